"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.
Do NOT re-export from other domain subpackages (events, entities) to avoid
circular import risks.

Usage:
    from security_store.domain.protocols import LoggerProtocol, EventBusProtocol
"""

from security_store.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from security_store.domain.protocols.logger_protocol import LoggerProtocol
from security_store.domain.protocols.record_store_protocol import (
    RecordStoreProtocol,
    StoreInitializer,
)
from security_store.domain.protocols.security_defaults_protocol import (
    SecurityDefaultsProtocol,
)

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "RecordStoreProtocol",
    "SecurityDefaultsProtocol",
    "StoreInitializer",
]
