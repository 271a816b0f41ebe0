"""Database models for the security tables.

Importing this package registers every table on BaseModel.metadata.
"""

from security_store.infrastructure.persistence.models.privilege import PrivilegeModel
from security_store.infrastructure.persistence.models.role import RoleModel
from security_store.infrastructure.persistence.models.user import UserModel
from security_store.infrastructure.persistence.models.user_role_mapping import (
    UserRoleMappingModel,
)

__all__ = [
    "PrivilegeModel",
    "RoleModel",
    "UserModel",
    "UserRoleMappingModel",
]
