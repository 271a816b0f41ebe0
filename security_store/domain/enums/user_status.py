"""User account status values."""

from enum import Enum


class UserStatus(str, Enum):
    """Status of a stored user account.

    The authorization engine decides what each status means at login time;
    the store only persists it.
    """

    ACTIVE = "active"
    LOCKED = "locked"
    DISABLED = "disabled"
    CHANGE_PASSWORD = "changepassword"
