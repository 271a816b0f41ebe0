"""Event bus protocol (port) for domain events.

Implementations:
    - InMemoryEventBus: security_store/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> event_bus = get_event_bus()
    >>> event_bus.subscribe(ApplicationInitialized, handler)
    >>> await event_bus.publish(ApplicationInitialized())
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from security_store.domain.events.base_event import DomainEvent

EventHandler = Callable[[Any], Awaitable[None]]
"""Async handler called with the published event."""


class EventBusProtocol(Protocol):
    """Protocol for publishing domain events to subscribed handlers."""

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register handler for an exact event type.

        Args:
            event_type: Event class to handle.
            handler: Async function called with the event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to every handler registered for its type.

        Args:
            event: Domain event instance.
        """
        ...
