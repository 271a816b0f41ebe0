"""Record stores (one per security entity kind)."""

from security_store.infrastructure.persistence.stores.privilege_store import (
    PrivilegeStore,
)
from security_store.infrastructure.persistence.stores.record_store import (
    RecordStore,
    RegistrationState,
)
from security_store.infrastructure.persistence.stores.role_store import RoleStore
from security_store.infrastructure.persistence.stores.user_role_mapping_store import (
    UserRoleMappingStore,
)
from security_store.infrastructure.persistence.stores.user_store import UserStore

__all__ = [
    "PrivilegeStore",
    "RecordStore",
    "RegistrationState",
    "RoleStore",
    "UserRoleMappingStore",
    "UserStore",
]
