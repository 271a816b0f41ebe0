"""User record store."""

from sqlalchemy import ColumnElement

from security_store.domain.entities import User
from security_store.domain.enums import UserStatus
from security_store.infrastructure.persistence.models import UserModel
from security_store.infrastructure.persistence.stores.record_store import RecordStore


class UserStore(RecordStore[User, UserModel, str]):
    """Stores users keyed by user id."""

    kind = "User"
    model = UserModel

    def _key_clause(self, key: str) -> ColumnElement[bool]:
        return UserModel.user_id == key

    def _to_entity(self, record: UserModel) -> User:
        return User(
            id=record.user_id,
            first_name=record.first_name,
            last_name=record.last_name,
            email=record.email,
            password=record.password,
            status=UserStatus(record.status),
            version=self.version_of(record),
        )

    def _new_record(self, entity: User) -> UserModel:
        record = UserModel(user_id=entity.id)
        self._apply(record, entity)
        return record

    def _apply(self, record: UserModel, entity: User) -> None:
        record.first_name = entity.first_name
        record.last_name = entity.last_name
        record.email = entity.email
        record.password = entity.password
        record.status = UserStatus(entity.status).value
