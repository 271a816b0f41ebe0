"""Privilege database model."""

from sqlalchemy import JSON, Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from security_store.infrastructure.persistence.base import BaseMutableModel


class PrivilegeModel(BaseMutableModel):
    """Stored privilege.

    Fields:
        privilege_id: Business identity (unique)
        type: Privilege type (wildcard, application, ...)
        name, description: Display fields
        properties: Type-specific settings (JSON object)
        read_only: Whether the privilege is editable
        version: Optimistic concurrency counter (version_id_col)
    """

    __tablename__ = "security_privileges"

    privilege_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )
    type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    properties: Mapped[dict[str, str]] = mapped_column(JSON, nullable=False, default=dict)
    read_only: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"<PrivilegeModel(privilege_id={self.privilege_id!r}, version={self.version})>"
