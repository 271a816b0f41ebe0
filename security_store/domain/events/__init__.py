"""Domain events package."""

from security_store.domain.events.base_event import DomainEvent
from security_store.domain.events.lifecycle_events import (
    ApplicationInitialized,
    ApplicationStopping,
)

__all__ = ["DomainEvent", "ApplicationInitialized", "ApplicationStopping"]
