"""In-memory event bus implementation.

Delivers application lifecycle events to the security configuration source
in single-process deployments.

Handlers for an event type are awaited one at a time, in subscription
order, so a start handler never overlaps a stop handler for the same
publisher. Delivery is fail-open: a handler exception is logged and the
remaining handlers still run.

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(ApplicationInitialized, source.handle_initialized)
    >>> await bus.publish(ApplicationInitialized())
"""

from collections import defaultdict

from security_store.domain.events.base_event import DomainEvent
from security_store.domain.protocols.event_bus_protocol import EventHandler
from security_store.domain.protocols.logger_protocol import LoggerProtocol


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__name__", repr(handler))


class InMemoryEventBus:
    """Event bus keyed by exact event class (no inheritance matching)."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._subscribers: defaultdict[type[DomainEvent], list[EventHandler]] = (
            defaultdict(list)
        )
        self._logger = logger

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        self._subscribers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Deliver ``event`` to its subscribers. Never raises handler errors."""
        handlers = tuple(self._subscribers.get(type(event), ()))
        if not handlers:
            return

        fields = {
            "event_type": type(event).__name__,
            "event_id": str(event.event_id),
        }
        self._logger.debug("event_publishing", handler_count=len(handlers), **fields)

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                self._logger.warning(
                    "event_handler_failed",
                    handler_name=_handler_name(handler),
                    error_type=type(e).__name__,
                    error_message=str(e),
                    **fields,
                )
