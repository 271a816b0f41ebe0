"""Event bus dependency factory.

Application-scoped singleton for application lifecycle events.
"""

import os
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from security_store.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns correct adapter based on EVENT_BUS_TYPE environment variable:
        - 'in-memory': InMemoryEventBus (single process)

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        ValueError: If EVENT_BUS_TYPE is unsupported.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(ApplicationInitialized())
    """
    from security_store.core.container.infrastructure import get_logger
    from security_store.infrastructure.events import InMemoryEventBus

    event_bus_type = os.getenv("EVENT_BUS_TYPE", "in-memory")

    if event_bus_type == "in-memory":
        return InMemoryEventBus(logger=get_logger())

    raise ValueError(
        f"Unsupported EVENT_BUS_TYPE: {event_bus_type}. Supported: 'in-memory'"
    )
