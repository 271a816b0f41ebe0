"""LoggerProtocol definition for structured logging.

Log calls carry a snake_case event name plus key-value context, so the
same call renders as a console line in development and as a JSON object
elsewhere. Never log password hashes.

Usage:
    from security_store.core.container import get_logger

    logger: LoggerProtocol = get_logger()
    logger.info("initializing_default_records", kind="users", count=2)

    store_logger = logger.bind(component="security_configuration")
    store_logger.debug("retrieving_user", user_id="admin")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger used by every security store component.

    All level methods take the event name positionally and context as
    keyword arguments. ``error`` and ``critical`` also accept an
    ``error`` exception; adapters expand it into ``error_type`` and
    ``error_message`` fields.
    """

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure that stops a component, such as a failed bootstrap."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger carrying ``context`` on every entry.

        The receiver is left unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
