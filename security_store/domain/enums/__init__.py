"""Domain enums package."""

from security_store.domain.enums.user_status import UserStatus

__all__ = ["UserStatus"]
