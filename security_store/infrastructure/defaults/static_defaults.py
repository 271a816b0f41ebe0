"""Built-in security defaults.

Baseline security model seeded into empty stores:

    users       admin, anonymous
    roles       nx-admin (nx-all), nx-anonymous (read-only browsing)
    privileges  nx-all, nx-search-read, nx-healthcheck-read
    mappings    admin -> nx-admin, anonymous -> nx-anonymous (default source)

Every call returns fresh entity instances, so callers may mutate them.
"""

from security_store.domain.entities import (
    DEFAULT_SOURCE,
    Privilege,
    Role,
    User,
    UserRoleMapping,
)
from security_store.domain.enums import UserStatus

ADMIN_USER_ID = "admin"
ANONYMOUS_USER_ID = "anonymous"
ADMIN_ROLE_ID = "nx-admin"
ANONYMOUS_ROLE_ID = "nx-anonymous"


class StaticSecurityDefaults:
    """Built-in implementation of SecurityDefaultsProtocol.

    Args:
        admin_password_hash: Password hash stored on the admin user. Left
            empty when None; the surrounding application then forces a
            password to be set.
    """

    def __init__(self, admin_password_hash: str | None = None) -> None:
        self._admin_password_hash = admin_password_hash

    def get_users(self) -> list[User]:
        return [
            User(
                id=ADMIN_USER_ID,
                first_name="Administrator",
                last_name="User",
                email="admin@example.org",
                password=self._admin_password_hash,
                status=UserStatus.ACTIVE,
            ),
            User(
                id=ANONYMOUS_USER_ID,
                first_name="Anonymous",
                last_name="User",
                email="anonymous@example.org",
                status=UserStatus.ACTIVE,
            ),
        ]

    def get_roles(self) -> list[Role]:
        return [
            Role(
                id=ADMIN_ROLE_ID,
                name=ADMIN_ROLE_ID,
                description="Administrator Role",
                privileges={"nx-all"},
                read_only=True,
            ),
            Role(
                id=ANONYMOUS_ROLE_ID,
                name=ANONYMOUS_ROLE_ID,
                description="Anonymous Role",
                privileges={"nx-search-read", "nx-healthcheck-read"},
                read_only=True,
            ),
        ]

    def get_privileges(self) -> list[Privilege]:
        return [
            Privilege(
                id="nx-all",
                type="wildcard",
                name="nx-all",
                description="All permissions",
                properties={"pattern": "nexus:*"},
                read_only=True,
            ),
            Privilege(
                id="nx-search-read",
                type="application",
                name="nx-search-read",
                description="Read search results",
                properties={"domain": "search", "actions": "read"},
                read_only=True,
            ),
            Privilege(
                id="nx-healthcheck-read",
                type="application",
                name="nx-healthcheck-read",
                description="Read system health checks",
                properties={"domain": "healthcheck", "actions": "read"},
                read_only=True,
            ),
        ]

    def get_user_role_mappings(self) -> list[UserRoleMapping]:
        return [
            UserRoleMapping(
                user_id=ADMIN_USER_ID,
                source=DEFAULT_SOURCE,
                roles={ADMIN_ROLE_ID},
            ),
            UserRoleMapping(
                user_id=ANONYMOUS_USER_ID,
                source=DEFAULT_SOURCE,
                roles={ANONYMOUS_ROLE_ID},
            ),
        ]
