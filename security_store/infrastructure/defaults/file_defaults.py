"""Security defaults loaded from a JSON document.

Document shape (every list optional, unknown keys rejected):

    {
        "users": [{"id": "admin", "email": "admin@example.org", "status": "active"}],
        "roles": [{"id": "nx-admin", "privileges": ["nx-all"]}],
        "privileges": [{"id": "nx-all", "type": "wildcard",
                        "properties": {"pattern": "nexus:*"}}],
        "user_role_mappings": [{"user_id": "admin", "roles": ["nx-admin"]}]
    }

Pydantic models validate the document; they are converted to domain
entities on each get_*() call.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from security_store.domain.entities import (
    DEFAULT_SOURCE,
    Privilege,
    Role,
    User,
    UserRoleMapping,
)
from security_store.domain.enums import UserStatus


class _DefaultsSchema(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class UserDefault(_DefaultsSchema):
    """Default user entry."""

    id: str = Field(..., min_length=1, description="User id")
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = Field(default=None, description="Password hash")
    status: UserStatus = UserStatus.ACTIVE

    def to_entity(self) -> User:
        return User(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            password=self.password,
            status=self.status,
        )


class RoleDefault(_DefaultsSchema):
    """Default role entry."""

    id: str = Field(..., min_length=1, description="Role id")
    name: str | None = None
    description: str | None = None
    privileges: list[str] = Field(default_factory=list)
    roles: list[str] = Field(default_factory=list)
    read_only: bool = False

    def to_entity(self) -> Role:
        return Role(
            id=self.id,
            name=self.name,
            description=self.description,
            privileges=set(self.privileges),
            roles=set(self.roles),
            read_only=self.read_only,
        )


class PrivilegeDefault(_DefaultsSchema):
    """Default privilege entry."""

    id: str = Field(..., min_length=1, description="Privilege id")
    type: str | None = None
    name: str | None = None
    description: str | None = None
    properties: dict[str, str] = Field(default_factory=dict)
    read_only: bool = False

    def to_entity(self) -> Privilege:
        return Privilege(
            id=self.id,
            type=self.type,
            name=self.name,
            description=self.description,
            properties=dict(self.properties),
            read_only=self.read_only,
        )


class UserRoleMappingDefault(_DefaultsSchema):
    """Default user/role mapping entry."""

    user_id: str = Field(..., min_length=1)
    source: str = Field(default=DEFAULT_SOURCE, min_length=1)
    roles: list[str] = Field(default_factory=list)

    def to_entity(self) -> UserRoleMapping:
        return UserRoleMapping(
            user_id=self.user_id,
            source=self.source,
            roles=set(self.roles),
        )


class SecurityDefaultsDocument(_DefaultsSchema):
    """Root of a security defaults document."""

    users: list[UserDefault] = Field(default_factory=list)
    roles: list[RoleDefault] = Field(default_factory=list)
    privileges: list[PrivilegeDefault] = Field(default_factory=list)
    user_role_mappings: list[UserRoleMappingDefault] = Field(default_factory=list)


class FileSecurityDefaults:
    """SecurityDefaultsProtocol implementation backed by a parsed document.

    Example:
        >>> defaults = FileSecurityDefaults.from_path(Path("defaults.json"))
        >>> [user.id for user in defaults.get_users()]
        ['admin']
    """

    def __init__(self, document: SecurityDefaultsDocument) -> None:
        self._document = document

    @classmethod
    def from_path(cls, path: Path) -> "FileSecurityDefaults":
        """Load and validate a defaults document.

        Args:
            path: JSON file location.

        Returns:
            FileSecurityDefaults wrapping the validated document.

        Raises:
            OSError: If the file cannot be read.
            pydantic.ValidationError: If the document is malformed.
        """
        return cls.from_json(path.read_text(encoding="utf-8"))

    @classmethod
    def from_json(cls, raw: str | bytes) -> "FileSecurityDefaults":
        """Validate a defaults document from raw JSON.

        Raises:
            pydantic.ValidationError: If the document is malformed.
        """
        return cls(SecurityDefaultsDocument.model_validate_json(raw))

    def get_users(self) -> list[User]:
        return [entry.to_entity() for entry in self._document.users]

    def get_roles(self) -> list[Role]:
        return [entry.to_entity() for entry in self._document.roles]

    def get_privileges(self) -> list[Privilege]:
        return [entry.to_entity() for entry in self._document.privileges]

    def get_user_role_mappings(self) -> list[UserRoleMapping]:
        return [entry.to_entity() for entry in self._document.user_role_mappings]
