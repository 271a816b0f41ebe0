"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console)
- Database (SQLite via aiosqlite, PostgreSQL via asyncpg)
- Security defaults (built-in or JSON document)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from security_store.core.config import get_settings
from security_store.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from security_store.domain.protocols.logger_protocol import LoggerProtocol
    from security_store.domain.protocols.security_defaults_protocol import (
        SecurityDefaultsProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns:
        Database manager instance.

    Usage:
        db = get_database()
        async with db.get_session() as session:
            ...
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


@lru_cache()
def get_security_defaults() -> "SecurityDefaultsProtocol":
    """Get the provider of default security data (app-scoped).

    Returns correct provider based on SECURITY_DEFAULTS_FILE:
        - unset: StaticSecurityDefaults (built-in admin/anonymous model)
        - set: FileSecurityDefaults loaded from that JSON document

    Returns:
        Defaults provider implementing SecurityDefaultsProtocol.

    Raises:
        OSError: If the configured file cannot be read.
        pydantic.ValidationError: If the configured document is malformed.
    """
    from security_store.infrastructure.defaults import (
        FileSecurityDefaults,
        StaticSecurityDefaults,
    )

    settings = get_settings()

    if settings.security_defaults_file is not None:
        return FileSecurityDefaults.from_path(settings.security_defaults_file)

    return StaticSecurityDefaults(admin_password_hash=settings.admin_password_hash)


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from security_store.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
