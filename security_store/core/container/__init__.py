"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from security_store.core.container import get_logger, get_database, ...

The container is organized into modules:
- infrastructure: Core services (db, logging, security defaults)
- events: Event bus
- security: Security configuration source
"""

from security_store.core.container.events import get_event_bus
from security_store.core.container.infrastructure import (
    get_database,
    get_logger,
    get_security_defaults,
)
from security_store.core.container.security import get_security_configuration_source

__all__ = [
    "get_database",
    "get_event_bus",
    "get_logger",
    "get_security_configuration_source",
    "get_security_defaults",
]
