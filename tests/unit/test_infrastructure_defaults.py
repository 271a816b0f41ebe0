"""Unit tests for the security defaults providers.

Tests cover:
- Built-in defaults content and fresh instances per call
- JSON document loading from string and file
- Schema validation (unknown keys, missing ids, bad status)
"""

import json

import pytest
from pydantic import ValidationError

from security_store.domain.entities import DEFAULT_SOURCE
from security_store.domain.enums import UserStatus
from security_store.infrastructure.defaults import (
    FileSecurityDefaults,
    StaticSecurityDefaults,
)


@pytest.mark.unit
class TestStaticSecurityDefaults:
    """Built-in baseline."""

    def test_users_and_mappings(self):
        defaults = StaticSecurityDefaults()

        users = {user.id: user for user in defaults.get_users()}
        mappings = {m.user_id: m for m in defaults.get_user_role_mappings()}

        assert set(users) == {"admin", "anonymous"}
        assert users["admin"].password is None
        assert all(user.status is UserStatus.ACTIVE for user in users.values())
        assert mappings["admin"].roles == {"nx-admin"}
        assert mappings["anonymous"].roles == {"nx-anonymous"}
        assert {m.source for m in mappings.values()} == {DEFAULT_SOURCE}

    def test_roles_reference_existing_privileges(self):
        defaults = StaticSecurityDefaults()

        privilege_ids = {privilege.id for privilege in defaults.get_privileges()}
        granted = set().union(*(role.privileges for role in defaults.get_roles()))

        assert granted <= privilege_ids
        assert all(role.read_only for role in defaults.get_roles())

    def test_admin_password_hash(self):
        defaults = StaticSecurityDefaults(admin_password_hash="$shiro1$hash")

        admin = next(user for user in defaults.get_users() if user.id == "admin")

        assert admin.password == "$shiro1$hash"

    def test_each_call_returns_fresh_entities(self):
        defaults = StaticSecurityDefaults()

        first = defaults.get_roles()
        first[0].privileges.add("mutated")

        assert "mutated" not in defaults.get_roles()[0].privileges
        assert all(role.version is None for role in defaults.get_roles())


@pytest.mark.unit
class TestFileSecurityDefaults:
    """JSON document provider."""

    def test_from_json(self):
        defaults = FileSecurityDefaults.from_json(
            json.dumps(
                {
                    "users": [{"id": "jdoe", "status": "locked", "email": "j@x.org"}],
                    "roles": [{"id": "devs", "privileges": ["p1"], "roles": ["base"]}],
                    "privileges": [
                        {"id": "p1", "type": "wildcard", "properties": {"pattern": "a:*"}}
                    ],
                    "user_role_mappings": [
                        {"user_id": "jdoe", "roles": ["devs"]},
                        {"user_id": "ext", "source": "LDAP", "roles": []},
                    ],
                }
            )
        )

        [user] = defaults.get_users()
        [role] = defaults.get_roles()
        [privilege] = defaults.get_privileges()
        mappings = defaults.get_user_role_mappings()

        assert user.status is UserStatus.LOCKED
        assert role.privileges == {"p1"}
        assert role.roles == {"base"}
        assert privilege.properties == {"pattern": "a:*"}
        assert [m.key for m in mappings] == [("jdoe", DEFAULT_SOURCE), ("ext", "LDAP")]

    def test_missing_lists_are_empty(self):
        defaults = FileSecurityDefaults.from_json("{}")

        assert defaults.get_users() == []
        assert defaults.get_roles() == []
        assert defaults.get_privileges() == []
        assert defaults.get_user_role_mappings() == []

    def test_from_path(self, tmp_path):
        path = tmp_path / "defaults.json"
        path.write_text(json.dumps({"roles": [{"id": "r1"}]}), encoding="utf-8")

        defaults = FileSecurityDefaults.from_path(path)

        assert [role.id for role in defaults.get_roles()] == ["r1"]

    @pytest.mark.parametrize(
        "document",
        [
            {"groups": []},
            {"users": [{"id": ""}]},
            {"users": [{"id": "u", "status": "sleeping"}]},
            {"roles": [{"name": "no id"}]},
            {"privileges": [{"id": "p", "unexpected": True}]},
        ],
    )
    def test_invalid_documents_rejected(self, document):
        with pytest.raises(ValidationError):
            FileSecurityDefaults.from_json(json.dumps(document))

    def test_missing_file_raises_os_error(self, tmp_path):
        with pytest.raises(OSError):
            FileSecurityDefaults.from_path(tmp_path / "absent.json")
