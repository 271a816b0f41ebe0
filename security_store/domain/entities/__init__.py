"""Domain entities package."""

from security_store.domain.entities.privilege import Privilege
from security_store.domain.entities.role import Role
from security_store.domain.entities.user import User
from security_store.domain.entities.user_role_mapping import (
    DEFAULT_SOURCE,
    UserRoleMapping,
)

__all__ = [
    "DEFAULT_SOURCE",
    "Privilege",
    "Role",
    "User",
    "UserRoleMapping",
]
