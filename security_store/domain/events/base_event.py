"""Base domain event class.

Domain events are immutable records of things that happened, named in the
past tense (ApplicationInitialized, ApplicationStopping).

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    ... class SomethingHappened(DomainEvent):
    ...     subject: str
    >>>
    >>> event = SomethingHappened(subject="x")
    >>> event.event_id  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        event_id: Unique identifier for this event instance (auto-generated).
        occurred_at: When the event occurred, UTC (auto-generated).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
