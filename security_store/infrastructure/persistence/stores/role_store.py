"""Role record store."""

from sqlalchemy import ColumnElement

from security_store.domain.entities import Role
from security_store.infrastructure.persistence.models import RoleModel
from security_store.infrastructure.persistence.stores.record_store import RecordStore


class RoleStore(RecordStore[Role, RoleModel, str]):
    """Stores roles keyed by role id.

    Privilege and contained-role sets are persisted as sorted JSON lists.
    """

    kind = "Role"
    model = RoleModel

    def _key_clause(self, key: str) -> ColumnElement[bool]:
        return RoleModel.role_id == key

    def _to_entity(self, record: RoleModel) -> Role:
        return Role(
            id=record.role_id,
            name=record.name,
            description=record.description,
            privileges=set(record.privileges),
            roles=set(record.roles),
            read_only=record.read_only,
            version=self.version_of(record),
        )

    def _new_record(self, entity: Role) -> RoleModel:
        record = RoleModel(role_id=entity.id)
        self._apply(record, entity)
        return record

    def _apply(self, record: RoleModel, entity: Role) -> None:
        record.name = entity.name
        record.description = entity.description
        record.privileges = sorted(entity.privileges)
        record.roles = sorted(entity.roles)
        record.read_only = entity.read_only
