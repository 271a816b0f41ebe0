"""Privilege domain entity."""

from dataclasses import dataclass, field


@dataclass
class Privilege:
    """Single grant understood by the authorization engine.

    Attributes:
        id: Unique privilege identifier.
        type: Privilege type (e.g., "wildcard", "application").
        name: Display name.
        description: Optional description.
        properties: Type-specific settings (e.g., {"pattern": "nexus:*"}).
        read_only: Whether administrators may edit the privilege.
        version: Storage-assigned version token (None = unconditional).
    """

    id: str
    type: str | None = None
    name: str | None = None
    description: str | None = None
    properties: dict[str, str] = field(default_factory=dict)
    read_only: bool = False
    version: str | None = None
