"""Security defaults protocol.

Read-only provider of the baseline security model. Consulted only while
bootstrapping empty stores.
"""

from typing import Protocol

from security_store.domain.entities import Privilege, Role, User, UserRoleMapping


class SecurityDefaultsProtocol(Protocol):
    """Protocol for default security data providers.

    Implementations:
        - StaticSecurityDefaults: built-in baseline
        - FileSecurityDefaults: JSON document
    """

    def get_users(self) -> list[User]:
        """Default users (may be empty)."""
        ...

    def get_roles(self) -> list[Role]:
        """Default roles (may be empty)."""
        ...

    def get_privileges(self) -> list[Privilege]:
        """Default privileges (may be empty)."""
        ...

    def get_user_role_mappings(self) -> list[UserRoleMapping]:
        """Default user/role mappings (may be empty)."""
        ...
