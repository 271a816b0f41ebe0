"""Privilege record store."""

from sqlalchemy import ColumnElement

from security_store.domain.entities import Privilege
from security_store.infrastructure.persistence.models import PrivilegeModel
from security_store.infrastructure.persistence.stores.record_store import RecordStore


class PrivilegeStore(RecordStore[Privilege, PrivilegeModel, str]):
    """Stores privileges keyed by privilege id."""

    kind = "Privilege"
    model = PrivilegeModel

    def _key_clause(self, key: str) -> ColumnElement[bool]:
        return PrivilegeModel.privilege_id == key

    def _to_entity(self, record: PrivilegeModel) -> Privilege:
        return Privilege(
            id=record.privilege_id,
            type=record.type,
            name=record.name,
            description=record.description,
            properties=dict(record.properties),
            read_only=record.read_only,
            version=self.version_of(record),
        )

    def _new_record(self, entity: Privilege) -> PrivilegeModel:
        record = PrivilegeModel(privilege_id=entity.id)
        self._apply(record, entity)
        return record

    def _apply(self, record: PrivilegeModel, entity: Privilege) -> None:
        record.type = entity.type
        record.name = entity.name
        record.description = entity.description
        record.properties = dict(entity.properties)
        record.read_only = entity.read_only
