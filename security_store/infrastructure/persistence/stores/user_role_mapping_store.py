"""User/role mapping record store."""

from sqlalchemy import ColumnElement, and_

from security_store.domain.entities import UserRoleMapping
from security_store.infrastructure.persistence.models import UserRoleMappingModel
from security_store.infrastructure.persistence.stores.record_store import RecordStore


class UserRoleMappingStore(
    RecordStore[UserRoleMapping, UserRoleMappingModel, tuple[str, str]]
):
    """Stores user/role mappings keyed by (user_id, source)."""

    kind = "User-role mapping"
    model = UserRoleMappingModel

    def _key_clause(self, key: tuple[str, str]) -> ColumnElement[bool]:
        user_id, source = key
        return and_(
            UserRoleMappingModel.user_id == user_id,
            UserRoleMappingModel.source == source,
        )

    def _to_entity(self, record: UserRoleMappingModel) -> UserRoleMapping:
        return UserRoleMapping(
            user_id=record.user_id,
            source=record.source,
            roles=set(record.roles),
            version=self.version_of(record),
        )

    def _new_record(self, entity: UserRoleMapping) -> UserRoleMappingModel:
        record = UserRoleMappingModel(user_id=entity.user_id, source=entity.source)
        self._apply(record, entity)
        return record

    def _apply(self, record: UserRoleMappingModel, entity: UserRoleMapping) -> None:
        record.roles = sorted(entity.roles)
