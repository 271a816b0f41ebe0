"""Record store protocol.

Generic persistence contract for one entity kind. The facade depends on this
port; security_store/infrastructure/persistence/stores provides the
SQLAlchemy adapters.

read() returns caller-facing entities. read_record() returns the stored
record itself (the "handle") with its current version attached, so the
facade can compare versions before writing back through write() without
knowing how storage represents versions.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

EntityT = TypeVar("EntityT")
KeyT = TypeVar("KeyT")

StoreInitializer = Callable[["AsyncSession"], Awaitable[None]]
"""One-time callback run when a store's backing table is first prepared."""


class RecordStoreProtocol(Protocol[EntityT, KeyT]):
    """Protocol for per-kind record persistence.

    Every method operates inside the session scoped by the caller; the store
    never commits.
    """

    kind: str

    def browse(self, session: AsyncSession) -> AsyncIterator[EntityT]:
        """Enumerate all records of this kind (single pass, order undefined).

        Args:
            session: Caller-scoped session.

        Returns:
            Async iterator over a snapshot taken when iteration starts.
        """
        ...

    async def read(self, session: AsyncSession, key: KeyT) -> EntityT | None:
        """Point lookup. Absent is not an error.

        Args:
            session: Caller-scoped session.
            key: Record identity.

        Returns:
            Entity with version populated, or None.
        """
        ...

    async def read_record(self, session: AsyncSession, key: KeyT) -> Any | None:
        """Load the stored record (handle) with its current version.

        Args:
            session: Caller-scoped session.
            key: Record identity.

        Returns:
            Stored record, or None.
        """
        ...

    def version_of(self, record: Any) -> str:
        """Current version token of a stored record, as a string."""
        ...

    async def add(self, session: AsyncSession, entity: EntityT) -> None:
        """Insert a new record.

        Raises:
            sqlalchemy.exc.IntegrityError: If the identity already exists.
        """
        ...

    async def write(self, session: AsyncSession, record: Any, entity: EntityT) -> None:
        """Overwrite the record behind the handle; storage bumps the version.

        Raises:
            sqlalchemy.orm.exc.StaleDataError: If another writer updated the
                record since it was read.
        """
        ...

    async def delete(self, session: AsyncSession, key: KeyT) -> bool:
        """Delete the record if present.

        Returns:
            True if a record existed and was deleted.

        Raises:
            sqlalchemy.orm.exc.StaleDataError: If a racing writer modified
                the record during the delete.
        """
        ...

    async def count(self, session: AsyncSession) -> int:
        """Number of stored records."""
        ...

    async def register(
        self, session: AsyncSession, initializer: StoreInitializer
    ) -> bool:
        """Prepare backing storage and run initializer at most once.

        Returns:
            True if the initializer ran.
        """
        ...

    def reset(self) -> None:
        """Forget registration so the next register() re-checks storage."""
        ...
