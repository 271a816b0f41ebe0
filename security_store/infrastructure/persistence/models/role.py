"""Role database model."""

from sqlalchemy import JSON, Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from security_store.infrastructure.persistence.base import BaseMutableModel


class RoleModel(BaseMutableModel):
    """Stored role.

    Fields:
        role_id: Business identity (unique)
        name, description: Display fields
        privileges: Sorted list of privilege ids (JSON)
        roles: Sorted list of contained role ids (JSON)
        read_only: Whether the role is editable
        version: Optimistic concurrency counter (version_id_col)
    """

    __tablename__ = "security_roles"

    role_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    privileges: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    roles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    read_only: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"<RoleModel(role_id={self.role_id!r}, version={self.version})>"
