"""Generic SQLAlchemy record store.

Adapter for RecordStoreProtocol. One subclass per entity kind supplies the
model class, the identity clause and the entity/model mapping; this base
class supplies the CRUD operations, version handling and the one-time
registration hook.

Concurrency:
    Models declare ``version_id_col``, so write() and delete() flush
    statements guarded by the version that was loaded. If another writer
    changed the row in between, the flush raises StaleDataError and nothing
    is written. The store never retries and never commits; the caller owns
    the session.

Registration:
    register() walks an explicit state machine guarded by one asyncio.Lock:

        UNINITIALIZED -> INITIALIZING -> READY
              ^               |
              +---- error ----+

    While INITIALIZING the backing table is created if missing and, when it
    holds no rows, the initializer runs inside the caller's session. READY
    is terminal for the process unless reset() is called.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from datetime import UTC, datetime
from enum import Enum
from typing import ClassVar, Generic, TypeVar

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified

from security_store.domain.protocols.record_store_protocol import StoreInitializer
from security_store.infrastructure.persistence.base import BaseMutableModel

EntityT = TypeVar("EntityT")
ModelT = TypeVar("ModelT", bound=BaseMutableModel)
KeyT = TypeVar("KeyT")


class RegistrationState(str, Enum):
    """Registration states of a record store."""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


class RecordStore(ABC, Generic[EntityT, ModelT, KeyT]):
    """Base class for per-kind record stores.

    Subclasses set ``kind`` (used in error messages and logs) and ``model``,
    and implement the four mapping hooks.

    Attributes:
        kind: Human-readable kind name ("User", "Role", ...).
        model: SQLAlchemy model class backing this store.
    """

    kind: ClassVar[str]
    model: ClassVar[type[BaseMutableModel]]

    def __init__(self) -> None:
        self._state = RegistrationState.UNINITIALIZED
        self._registration_lock = asyncio.Lock()

    @property
    def state(self) -> RegistrationState:
        """Current registration state."""
        return self._state

    # ------------------------------------------------------------------
    # Mapping hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _key_clause(self, key: KeyT) -> ColumnElement[bool]:
        """WHERE clause selecting the record with the given identity."""

    @abstractmethod
    def _to_entity(self, record: ModelT) -> EntityT:
        """Map a stored record to a domain entity (version included)."""

    @abstractmethod
    def _new_record(self, entity: EntityT) -> ModelT:
        """Build a new stored record from a domain entity."""

    @abstractmethod
    def _apply(self, record: ModelT, entity: EntityT) -> None:
        """Copy the entity's fields onto an existing record."""

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def browse(self, session: AsyncSession) -> AsyncIterator[EntityT]:
        """Yield every record of this kind.

        Rows are fetched in one query when iteration starts, so one pass
        observes one snapshot.

        Args:
            session: Caller-scoped session.

        Yields:
            Domain entities, order undefined.
        """
        result = await session.scalars(select(self.model))
        for record in result.all():
            yield self._to_entity(record)

    async def read(self, session: AsyncSession, key: KeyT) -> EntityT | None:
        """Find entity by identity.

        Args:
            session: Caller-scoped session.
            key: Record identity.

        Returns:
            Domain entity if found, None otherwise.
        """
        record = await self.read_record(session, key)
        if record is None:
            return None
        return self._to_entity(record)

    async def read_record(self, session: AsyncSession, key: KeyT) -> ModelT | None:
        """Load the stored record with its current version.

        Args:
            session: Caller-scoped session.
            key: Record identity.

        Returns:
            Stored record if found, None otherwise.
        """
        stmt = select(self.model).where(self._key_clause(key))
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    def version_of(self, record: ModelT) -> str:
        """Version token of a stored record.

        Args:
            record: Stored record.

        Returns:
            Decimal string of the integer version.
        """
        return str(record.version)

    async def add(self, session: AsyncSession, entity: EntityT) -> None:
        """Insert a new record.

        Args:
            session: Caller-scoped session.
            entity: Entity to insert. Its version is ignored.

        Raises:
            IntegrityError: If the identity already exists.
        """
        session.add(self._new_record(entity))
        await session.flush()

    async def write(self, session: AsyncSession, record: ModelT, entity: EntityT) -> None:
        """Overwrite a stored record with the entity's fields.

        The flush always emits an UPDATE, even if no field changed, so the
        version advances on every successful write.

        Args:
            session: Session the record was loaded in.
            record: Handle returned by read_record().
            entity: New field values.

        Raises:
            StaleDataError: If the record changed since it was loaded.
        """
        self._apply(record, entity)
        record.updated_at = datetime.now(UTC)
        flag_modified(record, "updated_at")
        await session.flush()

    async def delete(self, session: AsyncSession, key: KeyT) -> bool:
        """Delete the record if present.

        Args:
            session: Caller-scoped session.
            key: Record identity.

        Returns:
            True if a record existed and was deleted, False otherwise.

        Raises:
            StaleDataError: If the record changed between load and delete.
        """
        record = await self.read_record(session, key)
        if record is None:
            return False
        await session.delete(record)
        await session.flush()
        return True

    async def count(self, session: AsyncSession) -> int:
        """Count stored records.

        Args:
            session: Caller-scoped session.

        Returns:
            Number of records of this kind.
        """
        stmt = select(func.count()).select_from(self.model)
        return int(await session.scalar(stmt) or 0)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    async def register(self, session: AsyncSession, initializer: StoreInitializer) -> bool:
        """Prepare the backing table and run initializer at most once.

        Args:
            session: Session to prepare and initialize in (caller commits).
            initializer: Callback run when the table holds no rows.

        Returns:
            True if the initializer ran, False if the store was already
            registered or already held records.

        Raises:
            Exception: Anything raised while preparing or initializing; the
                store returns to UNINITIALIZED.
        """
        async with self._registration_lock:
            if self._state is RegistrationState.READY:
                return False

            self._state = RegistrationState.INITIALIZING
            try:
                await session.run_sync(self._create_table)
                ran = False
                if await self.count(session) == 0:
                    await initializer(session)
                    ran = True
            except BaseException:
                self._state = RegistrationState.UNINITIALIZED
                raise

            self._state = RegistrationState.READY
            return ran

    def reset(self) -> None:
        """Return to UNINITIALIZED so the next register() re-checks storage."""
        self._state = RegistrationState.UNINITIALIZED

    def _create_table(self, sync_session: Session) -> None:
        self.model.__table__.create(sync_session.connection(), checkfirst=True)
