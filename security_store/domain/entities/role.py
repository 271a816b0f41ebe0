"""Role domain entity."""

from dataclasses import dataclass, field


@dataclass
class Role:
    """Named bundle of privileges and contained roles.

    Attributes:
        id: Unique role identifier.
        name: Display name.
        description: Optional description.
        privileges: Ids of privileges granted by this role.
        roles: Ids of roles contained in this role.
        read_only: Whether administrators may edit the role.
        version: Storage-assigned version token (None = unconditional).
    """

    id: str
    name: str | None = None
    description: str | None = None
    privileges: set[str] = field(default_factory=set)
    roles: set[str] = field(default_factory=set)
    read_only: bool = False
    version: str | None = None
