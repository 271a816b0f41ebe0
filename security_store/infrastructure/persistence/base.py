"""Declarative base for the security tables.

Each table gets a UUID surrogate key plus created/updated timestamps from
BaseMutableModel. The business identity (user id, role id, ...) lives in
its own unique column so it can be any opaque string. Domain entities do
NOT inherit from these classes; stores map between the two.

Every table also declares an integer ``version`` column registered as the
mapper's ``version_id_col``. SQLAlchemy then issues UPDATE and DELETE as
``WHERE id = :id AND version = :version`` and bumps the version on each
UPDATE. A statement matching no row raises ``StaleDataError``.

Usage:
    class RoleModel(BaseMutableModel):
        __tablename__ = "security_roles"
        version: Mapped[int] = mapped_column(Integer, nullable=False)
        __mapper_args__ = {"version_id_col": version}
"""

from datetime import datetime
from uuid import UUID as PythonUUID, uuid4

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Owner of the shared metadata; not mapped to a table itself."""

    __abstract__ = True


class BaseMutableModel(BaseModel):
    """Surrogate key and timestamps shared by all security tables."""

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id})>"
