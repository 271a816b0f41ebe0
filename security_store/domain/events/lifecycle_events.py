"""Application lifecycle events.

The surrounding application publishes these; the security configuration
source subscribes to start once the application is initialized and to stop
when it is shutting down.
"""

from dataclasses import dataclass

from security_store.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class ApplicationInitialized(DomainEvent):
    """Application finished initialization; dependent stores may start."""


@dataclass(frozen=True, kw_only=True, slots=True)
class ApplicationStopping(DomainEvent):
    """Application is shutting down; dependent stores should stop."""
