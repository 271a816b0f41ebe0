"""Security configuration facade.

Typed CRUD over users, roles, privileges and user/role mappings with
optimistic concurrency control. A facade instance holds no state of its own:
every call opens a session, does its work and releases the session before
returning, so instances can be recreated freely (see
SecurityConfigurationSource.load_configuration()).

Error handling:
    - Reads return entities, lists or None. Missing data is never an error.
    - Writes return Result[T, DomainError]:
        NotFoundError                update of a missing record
        ConcurrentModificationError  version mismatch, or conflict detected
                                     by storage during the write/delete
        DuplicateKeyError            add of an existing identity
    - NotStartedError is raised when the owning source is not started.
    - Missing ids raise ValueError before anything else happens.

Update algorithm (all kinds):
    1. Load the stored record by identity; absent -> NotFoundError.
    2. If the caller's entity carries a version, compare it with the stored
       version (both strings); mismatch -> ConcurrentModificationError.
       No version means an unconditional update.
    3. Write through the loaded record. StaleDataError from the flush means
       another writer won between 1 and 3 -> ConcurrentModificationError.

Users own their default-source mapping: add/update write the user and the
mapping in one session; remove deletes the mapping when the user existed.
A conflict on the mapping half of these calls is reported as kind
"User-role mapping" with id "<user>/default", and the user write is rolled
back with it.
"""

from collections.abc import AsyncIterator, Awaitable, Callable, Iterable
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from security_store.application.bootstrap import SecurityStores
from security_store.core.enums import ErrorCode
from security_store.core.errors import (
    ConcurrentModificationError,
    DomainError,
    DuplicateKeyError,
    NotFoundError,
)
from security_store.core.lifecycle import LifecycleSupport
from security_store.core.result import Failure, Result, Success
from security_store.domain.entities import (
    DEFAULT_SOURCE,
    Privilege,
    Role,
    User,
    UserRoleMapping,
)
from security_store.domain.protocols.logger_protocol import LoggerProtocol
from security_store.domain.protocols.record_store_protocol import RecordStoreProtocol
from security_store.infrastructure.persistence.database import Database

Store = RecordStoreProtocol[Any, Any]

_NOT_FOUND_CODES = {
    "User": ErrorCode.USER_NOT_FOUND,
    "Role": ErrorCode.ROLE_NOT_FOUND,
    "Privilege": ErrorCode.PRIVILEGE_NOT_FOUND,
    "User-role mapping": ErrorCode.USER_ROLE_MAPPING_NOT_FOUND,
}


def _require(value: str | None, name: str) -> str:
    if not value:
        raise ValueError(f"{name} is required")
    return value


def _mapping_id(user_id: str, source: str) -> str:
    return f"{user_id}/{source}"


class SecurityConfiguration:
    """Entry point for reading and changing the stored security model.

    Args:
        database: Source of per-call sessions.
        stores: Record stores for the four kinds.
        lifecycle: Owning component; calls fail unless it is started.
        logger: Structured logger.

    Example:
        >>> configuration = source.load_configuration()
        >>> await configuration.add_user(User(id="jdoe"), {"nx-admin"})
        >>> user = await configuration.get_user("jdoe")
        >>> user.email = "jdoe@example.org"
        >>> match await configuration.update_user(user, {"nx-admin"}):
        ...     case Failure(error=ConcurrentModificationError()):
        ...         ...  # re-read and retry
    """

    def __init__(
        self,
        *,
        database: Database,
        stores: SecurityStores,
        lifecycle: LifecycleSupport,
        logger: LoggerProtocol,
    ) -> None:
        self._database = database
        self._stores = stores
        self._lifecycle = lifecycle
        self._logger = logger.bind(component="security_configuration")

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def get_users(self) -> list[User]:
        """List all users."""
        self._logger.debug("retrieving_all_users")
        return await self._browse(self._stores.users)

    async def get_user(self, user_id: str) -> User | None:
        """Get user by id, or None."""
        _require(user_id, "user_id")
        self._logger.debug("retrieving_user", user_id=user_id)
        async with self._open_session() as session:
            return await self._stores.users.read(session, user_id)

    async def add_user(
        self, user: User, roles: Iterable[str] = ()
    ) -> Result[None, DomainError]:
        """Add a user together with its default-source role mapping.

        A default-source mapping already stored for the same id is adopted
        and overwritten with ``roles``.

        Args:
            user: New user.
            roles: Role ids granted in the default source (may be empty).

        Returns:
            Success(None), Failure(DuplicateKeyError) if the user exists, or
            Failure(ConcurrentModificationError) of kind "User-role mapping"
            if another writer stored the mapping meanwhile.
        """
        _require(user.id, "user.id")
        self._logger.debug("adding_user", user_id=user.id)

        async def insert(session: AsyncSession) -> Result[None, DomainError]:
            await self._stores.users.add(session, user)
            return Success(value=None)

        return await self._save_user(user.id, roles, insert)

    async def update_user(
        self, user: User, roles: Iterable[str] = ()
    ) -> Result[None, DomainError]:
        """Update a user and replace its default-source roles.

        A user without a default-source mapping gets one created.

        Args:
            user: User with new field values (version optional).
            roles: Role ids granted in the default source.

        Returns:
            Success(None), Failure(NotFoundError) or
            Failure(ConcurrentModificationError). The conflict names the
            kind whose write lost: "User" or "User-role mapping".
        """
        _require(user.id, "user.id")
        self._logger.debug("updating_user", user_id=user.id)
        return await self._save_user(
            user.id,
            roles,
            lambda session: self._update(
                session, self._stores.users, user.id, user.id, user
            ),
        )

    async def remove_user(self, user_id: str) -> Result[bool, DomainError]:
        """Remove a user and its default-source mapping.

        Returns:
            Success(True) if the user existed, Success(False) otherwise, or
            Failure(ConcurrentModificationError) naming the kind ("User" or
            "User-role mapping") whose delete lost to another writer.
        """
        _require(user_id, "user_id")
        self._logger.debug("removing_user", user_id=user_id)
        users, mappings = self._stores.users, self._stores.user_role_mappings
        failing: Store = users
        resource_id = user_id
        try:
            async with self._open_session() as session:
                if not await users.delete(session, user_id):
                    return Success(value=False)
                failing, resource_id = mappings, _mapping_id(user_id, DEFAULT_SOURCE)
                # Mapping may legitimately be missing
                await mappings.delete(session, (user_id, DEFAULT_SOURCE))
                return Success(value=True)
        except StaleDataError:
            return self._concurrently_modified(failing, resource_id)

    # ------------------------------------------------------------------
    # Privileges
    # ------------------------------------------------------------------

    async def get_privileges(self) -> list[Privilege]:
        """List all privileges."""
        self._logger.debug("retrieving_all_privileges")
        return await self._browse(self._stores.privileges)

    async def get_privilege(self, privilege_id: str) -> Privilege | None:
        """Get privilege by id, or None."""
        _require(privilege_id, "privilege_id")
        self._logger.debug("retrieving_privilege", privilege_id=privilege_id)
        async with self._open_session() as session:
            return await self._stores.privileges.read(session, privilege_id)

    async def add_privilege(self, privilege: Privilege) -> Result[None, DomainError]:
        """Add a privilege."""
        _require(privilege.id, "privilege.id")
        self._logger.debug("adding_privilege", privilege_id=privilege.id)
        return await self._add(self._stores.privileges, privilege.id, privilege)

    async def update_privilege(self, privilege: Privilege) -> Result[None, DomainError]:
        """Update a privilege (version-checked when privilege.version is set)."""
        _require(privilege.id, "privilege.id")
        self._logger.debug("updating_privilege", privilege_id=privilege.id)
        return await self._update_one(
            self._stores.privileges, privilege.id, privilege.id, privilege
        )

    async def remove_privilege(self, privilege_id: str) -> Result[bool, DomainError]:
        """Remove a privilege. Success(False) if it did not exist."""
        _require(privilege_id, "privilege_id")
        self._logger.debug("removing_privilege", privilege_id=privilege_id)
        return await self._remove(self._stores.privileges, privilege_id, privilege_id)

    # ------------------------------------------------------------------
    # Roles
    # ------------------------------------------------------------------

    async def get_roles(self) -> list[Role]:
        """List all roles."""
        self._logger.debug("retrieving_all_roles")
        return await self._browse(self._stores.roles)

    async def get_role(self, role_id: str) -> Role | None:
        """Get role by id, or None."""
        _require(role_id, "role_id")
        self._logger.debug("retrieving_role", role_id=role_id)
        async with self._open_session() as session:
            return await self._stores.roles.read(session, role_id)

    async def add_role(self, role: Role) -> Result[None, DomainError]:
        """Add a role."""
        _require(role.id, "role.id")
        self._logger.debug("adding_role", role_id=role.id)
        return await self._add(self._stores.roles, role.id, role)

    async def update_role(self, role: Role) -> Result[None, DomainError]:
        """Update a role (version-checked when role.version is set)."""
        _require(role.id, "role.id")
        self._logger.debug("updating_role", role_id=role.id)
        return await self._update_one(self._stores.roles, role.id, role.id, role)

    async def remove_role(self, role_id: str) -> Result[bool, DomainError]:
        """Remove a role. Mappings referencing it are left untouched."""
        _require(role_id, "role_id")
        self._logger.debug("removing_role", role_id=role_id)
        return await self._remove(self._stores.roles, role_id, role_id)

    # ------------------------------------------------------------------
    # User/role mappings
    # ------------------------------------------------------------------

    async def get_user_role_mappings(self) -> list[UserRoleMapping]:
        """List all user/role mappings of every source."""
        self._logger.debug("retrieving_all_user_role_mappings")
        return await self._browse(self._stores.user_role_mappings)

    async def get_user_role_mapping(
        self, user_id: str, source: str
    ) -> UserRoleMapping | None:
        """Get the mapping of (user_id, source), or None."""
        _require(user_id, "user_id")
        _require(source, "source")
        self._logger.debug("retrieving_user_role_mapping", user_id=user_id, source=source)
        async with self._open_session() as session:
            return await self._stores.user_role_mappings.read(session, (user_id, source))

    async def add_user_role_mapping(
        self, mapping: UserRoleMapping
    ) -> Result[None, DomainError]:
        """Add a mapping."""
        _require(mapping.user_id, "mapping.user_id")
        _require(mapping.source, "mapping.source")
        self._logger.debug(
            "adding_user_role_mapping", user_id=mapping.user_id, source=mapping.source
        )
        return await self._add(
            self._stores.user_role_mappings,
            _mapping_id(mapping.user_id, mapping.source),
            mapping,
        )

    async def update_user_role_mapping(
        self, mapping: UserRoleMapping
    ) -> Result[None, DomainError]:
        """Update a mapping (version-checked when mapping.version is set)."""
        _require(mapping.user_id, "mapping.user_id")
        _require(mapping.source, "mapping.source")
        self._logger.debug(
            "updating_user_role_mapping", user_id=mapping.user_id, source=mapping.source
        )
        return await self._update_one(
            self._stores.user_role_mappings,
            mapping.key,
            _mapping_id(mapping.user_id, mapping.source),
            mapping,
        )

    async def remove_user_role_mapping(
        self, user_id: str, source: str
    ) -> Result[bool, DomainError]:
        """Remove the mapping of (user_id, source). Success(False) if absent."""
        _require(user_id, "user_id")
        _require(source, "source")
        self._logger.debug("removing_user_role_mapping", user_id=user_id, source=source)
        return await self._remove(
            self._stores.user_role_mappings,
            (user_id, source),
            _mapping_id(user_id, source),
        )

    # ------------------------------------------------------------------
    # Shared algorithms
    # ------------------------------------------------------------------

    @asynccontextmanager
    async def _open_session(self) -> AsyncIterator[AsyncSession]:
        self._lifecycle.ensure_started()
        async with self._database.get_session() as session:
            yield session

    async def _browse(self, store: Store) -> list[Any]:
        async with self._open_session() as session:
            return [entity async for entity in store.browse(session)]

    async def _add(
        self, store: Store, resource_id: str, entity: Any
    ) -> Result[None, DomainError]:
        try:
            async with self._open_session() as session:
                await store.add(session, entity)
        except IntegrityError as e:
            return self._duplicate(store, resource_id, e)
        return Success(value=None)

    async def _update_one(
        self,
        store: Store,
        key: Any,
        resource_id: str,
        entity: Any,
    ) -> Result[None, DomainError]:
        try:
            async with self._open_session() as session:
                return await self._update(session, store, key, resource_id, entity)
        except StaleDataError:
            return self._concurrently_modified(store, resource_id)

    async def _update(
        self,
        session: AsyncSession,
        store: Store,
        key: Any,
        resource_id: str,
        entity: Any,
    ) -> Result[None, DomainError]:
        record = await store.read_record(session, key)
        if record is None:
            return Failure(
                error=NotFoundError(
                    code=_NOT_FOUND_CODES[store.kind],
                    message=f"{store.kind} '{resource_id}' not found",
                    resource_type=store.kind,
                    resource_id=resource_id,
                )
            )

        current = store.version_of(record)
        if entity.version is not None and entity.version != current:
            return self._concurrently_modified(
                store, resource_id, expected=entity.version, actual=current
            )

        await store.write(session, record, entity)
        return Success(value=None)

    async def _remove(
        self, store: Store, key: Any, resource_id: str
    ) -> Result[bool, DomainError]:
        try:
            async with self._open_session() as session:
                return Success(value=await store.delete(session, key))
        except StaleDataError:
            return self._concurrently_modified(store, resource_id)

    async def _save_user(
        self,
        user_id: str,
        roles: Iterable[str],
        write_user: Callable[[AsyncSession], Awaitable[Result[None, DomainError]]],
    ) -> Result[None, DomainError]:
        """Write a user and its default-source mapping in one session.

        Any failure rolls back both writes. Storage conflicts are reported
        against the store whose flush raised them.
        """
        users, mappings = self._stores.users, self._stores.user_role_mappings
        failing: Store = users
        resource_id = user_id
        try:
            async with self._open_session() as session:
                result = await write_user(session)
                if isinstance(result, Failure):
                    return result
                failing, resource_id = mappings, _mapping_id(user_id, DEFAULT_SOURCE)
                result = await self._save_default_mapping(session, user_id, roles)
                if isinstance(result, Failure):
                    await session.rollback()
                return result
        except IntegrityError as e:
            if failing is users:
                return self._duplicate(users, user_id, e)
            # Another writer stored the mapping after it was read as absent
            return self._concurrently_modified(mappings, resource_id)
        except StaleDataError:
            return self._concurrently_modified(failing, resource_id)

    async def _save_default_mapping(
        self, session: AsyncSession, user_id: str, roles: Iterable[str]
    ) -> Result[None, DomainError]:
        mappings = self._stores.user_role_mappings
        mapping = UserRoleMapping(user_id=user_id, source=DEFAULT_SOURCE, roles=set(roles))
        result = await self._update(
            session, mappings, mapping.key, _mapping_id(user_id, DEFAULT_SOURCE), mapping
        )
        match result:
            case Failure(error=NotFoundError()):
                await mappings.add(session, mapping)
                return Success(value=None)
            case _:
                return result

    def _concurrently_modified(
        self,
        store: Store,
        resource_id: str,
        *,
        expected: str | None = None,
        actual: str | None = None,
    ) -> Failure[DomainError]:
        details = None
        if expected is not None and actual is not None:
            details = {"expected_version": expected, "actual_version": actual}
        self._logger.warning(
            "concurrent_modification",
            kind=store.kind,
            resource_id=resource_id,
            expected_version=expected,
            actual_version=actual,
        )
        return Failure(
            error=ConcurrentModificationError(
                code=ErrorCode.CONCURRENT_MODIFICATION,
                message=f"{store.kind} '{resource_id}' updated in the meantime",
                resource_type=store.kind,
                resource_id=resource_id,
                details=details,
            )
        )

    def _duplicate(
        self, store: Store, resource_id: str, error: IntegrityError
    ) -> Failure[DomainError]:
        self._logger.warning(
            "duplicate_key", kind=store.kind, resource_id=resource_id, error=str(error.orig)
        )
        return Failure(
            error=DuplicateKeyError(
                code=ErrorCode.DUPLICATE_KEY,
                message=f"{store.kind} '{resource_id}' already exists",
                resource_type=store.kind,
                resource_id=resource_id,
                details={"storage_error": str(error.orig)},
            )
        )
