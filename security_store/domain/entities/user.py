"""User domain entity.

Pure data, no framework dependencies. Profile fields are opaque to the
store: it persists them, the authorization engine interprets them.
"""

from dataclasses import dataclass, field

from security_store.domain.enums import UserStatus


@dataclass
class User:
    """Stored user account.

    Attributes:
        id: Unique user identifier (login name).
        first_name: Given name.
        last_name: Family name.
        email: Contact email address.
        password: Password hash (never plaintext, excluded from repr).
        status: Account status.
        version: Storage-assigned version token. None on a new entity or to
            request an unconditional update.

    Example:
        >>> user = User(id="jdoe", first_name="Jane", last_name="Doe")
        >>> user.version is None
        True
    """

    id: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = field(default=None, repr=False)
    status: UserStatus = UserStatus.ACTIVE
    version: str | None = None
