"""User/role mapping database model."""

from sqlalchemy import JSON, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from security_store.infrastructure.persistence.base import BaseMutableModel


class UserRoleMappingModel(BaseMutableModel):
    """Stored user/role mapping.

    Fields:
        user_id: User id within its source
        source: Identity source of the user
        roles: Sorted list of granted role ids (JSON)
        version: Optimistic concurrency counter (version_id_col)

    Constraints:
        - uq_security_user_role_mappings_user_source: (user_id, source) UNIQUE
    """

    __tablename__ = "security_user_role_mappings"

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    source: Mapped[str] = mapped_column(String(100), nullable=False)
    roles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "user_id",
            "source",
            name="uq_security_user_role_mappings_user_source",
        ),
    )
    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return (
            f"<UserRoleMappingModel(user_id={self.user_id!r}, "
            f"source={self.source!r}, version={self.version})>"
        )
