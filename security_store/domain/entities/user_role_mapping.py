"""User/role mapping domain entity.

A mapping is identified by (user_id, source). The source names the identity
origin of the user: DEFAULT_SOURCE for users managed by this store, other
values for users owned by external identity providers (LDAP, SAML, ...).
"""

from dataclasses import dataclass, field

DEFAULT_SOURCE = "default"


@dataclass
class UserRoleMapping:
    """Roles granted to one user of one identity source.

    Attributes:
        user_id: Id of the user in its source.
        source: Identity source of the user.
        roles: Granted role ids (may be empty).
        version: Storage-assigned version token (None = unconditional).
    """

    user_id: str
    source: str = DEFAULT_SOURCE
    roles: set[str] = field(default_factory=set)
    version: str | None = None

    @property
    def key(self) -> tuple[str, str]:
        """Composite identity (user_id, source)."""
        return (self.user_id, self.source)
