"""Security store bootstrap.

Seeds empty stores with the baseline security model exactly once at start.

Flow:
    1. Open ONE transaction.
    2. For users, roles, privileges, user/role mappings (in that order):
       register the store with an initializer that copies the defaults list
       through the store's add(). register() only runs the initializer when
       the table holds no rows, and at most once per process.
    3. Commit. On any error roll back, reset every store's registration and
       re-raise: a half-seeded security model never becomes visible.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from security_store.domain.entities import Privilege, Role, User, UserRoleMapping
from security_store.domain.protocols.logger_protocol import LoggerProtocol
from security_store.domain.protocols.record_store_protocol import (
    RecordStoreProtocol,
    StoreInitializer,
)
from security_store.domain.protocols.security_defaults_protocol import (
    SecurityDefaultsProtocol,
)
from security_store.infrastructure.persistence.database import Database
from security_store.infrastructure.persistence.stores import (
    PrivilegeStore,
    RoleStore,
    UserRoleMappingStore,
    UserStore,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class SecurityStores:
    """The four record stores backing the security configuration."""

    users: RecordStoreProtocol[User, str] = field(default_factory=UserStore)
    roles: RecordStoreProtocol[Role, str] = field(default_factory=RoleStore)
    privileges: RecordStoreProtocol[Privilege, str] = field(
        default_factory=PrivilegeStore
    )
    user_role_mappings: RecordStoreProtocol[UserRoleMapping, tuple[str, str]] = field(
        default_factory=UserRoleMappingStore
    )

    def all(self) -> tuple[RecordStoreProtocol[Any, Any], ...]:
        """Stores in bootstrap order."""
        return (self.users, self.roles, self.privileges, self.user_role_mappings)


@dataclass(frozen=True, slots=True, kw_only=True)
class BootstrapReport:
    """Outcome of one bootstrap run.

    Attributes:
        seeded: Kind -> number of default records inserted. Kinds whose
            store was already populated (or already registered) are absent.
    """

    seeded: dict[str, int] = field(default_factory=dict)

    @property
    def skipped(self) -> bool:
        """True when no store was seeded."""
        return not self.seeded


class SecurityBootstrap:
    """Registers the security stores and copies defaults into empty ones.

    Args:
        database: Database providing the bootstrap transaction.
        stores: Stores to register.
        defaults: Provider of the baseline records.
        logger: Structured logger.
    """

    def __init__(
        self,
        *,
        database: Database,
        stores: SecurityStores,
        defaults: SecurityDefaultsProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._database = database
        self._stores = stores
        self._defaults = defaults
        self._logger = logger

    async def run(self) -> BootstrapReport:
        """Register all stores in one transaction.

        Returns:
            BootstrapReport with per-kind seeded counts.

        Raises:
            Exception: Any failure while preparing or seeding; fatal to start.
        """
        seeded: dict[str, int] = {}
        plan: Sequence[tuple[RecordStoreProtocol[Any, Any], Callable[[], list[Any]], str]] = (
            (self._stores.users, self._defaults.get_users, "users"),
            (self._stores.roles, self._defaults.get_roles, "roles"),
            (self._stores.privileges, self._defaults.get_privileges, "privileges"),
            (
                self._stores.user_role_mappings,
                self._defaults.get_user_role_mappings,
                "user/role mappings",
            ),
        )

        try:
            async with self._database.transaction() as session:
                for store, fetch, label in plan:
                    await store.register(
                        session, self._copy_defaults(store, fetch, label, seeded)
                    )
        except Exception as e:
            for store in self._stores.all():
                store.reset()
            self._logger.critical(
                "security_bootstrap_failed",
                error=e,
                seeded_before_failure=dict(seeded),
            )
            raise

        report = BootstrapReport(seeded=seeded)
        self._logger.info(
            "security_bootstrap_complete",
            seeded=dict(report.seeded),
            skipped=report.skipped,
        )
        return report

    def _copy_defaults(
        self,
        store: RecordStoreProtocol[Any, Any],
        fetch: Callable[[], list[Any]],
        label: str,
        seeded: dict[str, int],
    ) -> StoreInitializer:
        async def initialize(session: AsyncSession) -> None:
            records = fetch()
            if not records:
                return
            self._logger.info(
                "initializing_default_records", kind=label, count=len(records)
            )
            for record in records:
                await store.add(session, record)
            seeded[store.kind] = len(records)

        return initialize
