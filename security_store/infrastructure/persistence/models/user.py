"""User database model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from security_store.infrastructure.persistence.base import BaseMutableModel


class UserModel(BaseMutableModel):
    """Stored user account.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        user_id: Business identity (unique login name)
        first_name, last_name, email: Profile fields
        password: Password hash
        status: UserStatus value
        version: Optimistic concurrency counter (version_id_col)
    """

    __tablename__ = "security_users"

    user_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User id (login name)",
    )
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    password: Mapped[str | None] = mapped_column(
        String(512),
        nullable=True,
        comment="Password hash",
    )
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"<UserModel(user_id={self.user_id!r}, version={self.version})>"
