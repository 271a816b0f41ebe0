"""Integration tests for SecurityConfigurationSource.

Tests cover:
- Empty-store bootstrap seeds exactly the defaults
- Bootstrap idempotence across restarts and across processes
- Bootstrap failure is fatal: nothing seeded, source FAILED, gate closed
- Lifecycle gate before start and after stop
- Start/stop driven by application lifecycle events

Architecture:
- Integration tests with a REAL SQLite database (aiosqlite)
- New source instances stand in for new processes (fresh store state)
"""

import json

import pytest
from sqlalchemy.exc import IntegrityError

from security_store.application.security_configuration_source import (
    SecurityConfigurationSource,
)
from security_store.core.enums import LifecycleState
from security_store.core.errors import NotStartedError
from security_store.domain.entities import DEFAULT_SOURCE
from security_store.domain.events import ApplicationInitialized, ApplicationStopping
from security_store.infrastructure.defaults import (
    FileSecurityDefaults,
    StaticSecurityDefaults,
)
from security_store.infrastructure.events import InMemoryEventBus
from security_store.infrastructure.persistence.stores import RegistrationState


def create_source(database, logger, defaults=None):
    """Create a source over database (built-in defaults unless given)."""
    return SecurityConfigurationSource(
        database=database,
        defaults=defaults or StaticSecurityDefaults(),
        logger=logger,
    )


def two_one_three_zero_defaults():
    """Defaults with 2 users, 1 role, 3 privileges and no mappings."""
    return FileSecurityDefaults.from_json(
        json.dumps(
            {
                "users": [{"id": "alice"}, {"id": "bob", "status": "disabled"}],
                "roles": [{"id": "readers", "privileges": ["p1", "p2", "p3"]}],
                "privileges": [
                    {"id": "p1", "type": "application"},
                    {"id": "p2", "type": "application"},
                    {"id": "p3", "type": "wildcard", "properties": {"pattern": "x:*"}},
                ],
            }
        )
    )


class ExplodingDefaults(StaticSecurityDefaults):
    """Defaults whose privilege list cannot be produced."""

    def get_privileges(self):
        raise RuntimeError("privilege defaults unavailable")


@pytest.mark.integration
class TestBootstrap:
    """Seeding empty stores with defaults."""

    @pytest.mark.asyncio
    async def test_empty_store_bootstrap_seeds_exact_counts(
        self, test_database, mock_logger
    ):
        """Test 2 users, 1 role, 3 privileges, 0 mappings are browsed back."""
        # Arrange
        source = create_source(test_database, mock_logger, two_one_three_zero_defaults())

        # Act
        await source.start()
        configuration = source.load_configuration()

        # Assert
        assert len(await configuration.get_users()) == 2
        assert len(await configuration.get_roles()) == 1
        assert len(await configuration.get_privileges()) == 3
        assert len(await configuration.get_user_role_mappings()) == 0
        assert source.last_report.seeded == {"User": 2, "Role": 1, "Privilege": 3}

    @pytest.mark.asyncio
    async def test_seeded_records_start_at_version_one(self, test_database, mock_logger):
        """Test defaults are inserted, not updated."""
        source = create_source(test_database, mock_logger)
        await source.start()

        admin = await source.load_configuration().get_user("admin")

        assert admin.version == "1"

    @pytest.mark.asyncio
    async def test_restart_does_not_duplicate_defaults(self, test_database, mock_logger):
        """Test stop/start of the same source skips seeding."""
        # Arrange
        source = create_source(test_database, mock_logger)
        await source.start()
        await source.stop()

        # Act
        await source.start()

        # Assert
        configuration = source.load_configuration()
        assert len(await configuration.get_users()) == 2
        assert len(await configuration.get_user_role_mappings()) == 2
        assert source.last_report.skipped is True

    @pytest.mark.asyncio
    async def test_second_process_does_not_duplicate_defaults(
        self, test_database, mock_logger
    ):
        """Test a new source over non-empty storage skips seeding."""
        # Arrange - first process seeds and changes data
        first = create_source(test_database, mock_logger)
        await first.start()
        await first.load_configuration().remove_role("nx-anonymous")
        await first.stop()

        # Act
        second = create_source(test_database, mock_logger)
        await second.start()

        # Assert - removed default is not re-seeded
        configuration = second.load_configuration()
        assert [role.id for role in await configuration.get_roles()] == ["nx-admin"]
        assert len(await configuration.get_users()) == 2
        assert second.last_report.skipped is True

    @pytest.mark.asyncio
    async def test_only_empty_kinds_are_seeded(self, test_database, mock_logger):
        """Test emptiness is checked per kind."""
        # Arrange - storage holds users but no other kinds
        first = create_source(test_database, mock_logger)
        await first.start()
        configuration = first.load_configuration()
        for role in await configuration.get_roles():
            await configuration.remove_role(role.id)
        await first.stop()

        # Act
        second = create_source(test_database, mock_logger)
        await second.start()

        # Assert
        assert second.last_report.seeded == {"Role": 2}
        assert len(await second.load_configuration().get_roles()) == 2

    @pytest.mark.asyncio
    async def test_admin_password_hash_is_seeded(self, test_database, mock_logger):
        """Test the configured admin password hash reaches storage."""
        source = create_source(
            test_database,
            mock_logger,
            StaticSecurityDefaults(admin_password_hash="$shiro1$hash"),
        )
        await source.start()

        admin = await source.load_configuration().get_user("admin")

        assert admin.password == "$shiro1$hash"


@pytest.mark.integration
class TestBootstrapFailure:
    """A failing bootstrap fails closed."""

    @pytest.mark.asyncio
    async def test_failure_leaves_source_failed_and_gate_closed(
        self, test_database, mock_logger
    ):
        """Test start raises, state is FAILED and every call is rejected."""
        # Arrange
        source = create_source(test_database, mock_logger, ExplodingDefaults())

        # Act
        with pytest.raises(RuntimeError, match="privilege defaults unavailable"):
            await source.start()

        # Assert
        assert source.state is LifecycleState.FAILED
        assert all(
            store.state is RegistrationState.UNINITIALIZED
            for store in source.stores.all()
        )
        with pytest.raises(NotStartedError):
            await source.load_configuration().get_users()

    @pytest.mark.asyncio
    async def test_failure_rolls_back_earlier_kinds(self, test_database, mock_logger):
        """Test users seeded before the failure are not kept."""
        failed = create_source(test_database, mock_logger, ExplodingDefaults())
        with pytest.raises(RuntimeError):
            await failed.start()

        source = create_source(test_database, mock_logger)
        await source.start()

        # Seeding ran again for users, so nothing survived the failed attempt
        assert source.last_report.seeded["User"] == 2
        assert len(await source.load_configuration().get_users()) == 2

    @pytest.mark.asyncio
    async def test_duplicate_defaults_fail_bootstrap(self, test_database, mock_logger):
        """Test a defaults document with a repeated id aborts start."""
        defaults = FileSecurityDefaults.from_json(
            json.dumps({"users": [{"id": "admin"}, {"id": "admin"}]})
        )
        source = create_source(test_database, mock_logger, defaults)

        with pytest.raises(IntegrityError):
            await source.start()

        assert source.state is LifecycleState.FAILED

    @pytest.mark.asyncio
    async def test_failed_source_can_start_again(self, test_database, mock_logger):
        """Test FAILED is not terminal once the cause is fixed."""
        defaults = ExplodingDefaults()
        source = create_source(test_database, mock_logger, defaults)
        with pytest.raises(RuntimeError):
            await source.start()

        defaults.get_privileges = StaticSecurityDefaults().get_privileges
        await source.start()

        assert source.is_started
        assert len(await source.load_configuration().get_privileges()) == 3


@pytest.mark.integration
class TestLifecycleGate:
    """Facade calls require a started source."""

    @pytest.mark.asyncio
    async def test_calls_before_start_raise(self, test_database, mock_logger):
        """Test NotStartedError before start()."""
        source = create_source(test_database, mock_logger)
        configuration = source.load_configuration()

        with pytest.raises(NotStartedError, match="not started"):
            await configuration.get_user("admin")

    @pytest.mark.asyncio
    async def test_calls_after_stop_raise(self, test_database, mock_logger):
        """Test NotStartedError after stop()."""
        source = create_source(test_database, mock_logger)
        await source.start()
        configuration = source.load_configuration()
        await source.stop()

        with pytest.raises(NotStartedError):
            await configuration.remove_user("admin")

        assert source.state is LifecycleState.STOPPED

    @pytest.mark.asyncio
    async def test_facades_are_interchangeable(self, test_database, mock_logger):
        """Test a reloaded facade sees the same stored data."""
        source = create_source(test_database, mock_logger)
        await source.start()
        first = source.load_configuration()

        second = source.load_configuration()

        assert second is not first
        assert source.get_configuration() is second
        assert await second.get_user_role_mapping("admin", DEFAULT_SOURCE) == (
            await first.get_user_role_mapping("admin", DEFAULT_SOURCE)
        )


@pytest.mark.integration
class TestEventWiring:
    """Start and stop through application lifecycle events."""

    @pytest.mark.asyncio
    async def test_events_start_and_stop_source(self, test_database, mock_logger):
        """Test ApplicationInitialized starts, ApplicationStopping stops."""
        # Arrange
        bus = InMemoryEventBus(logger=mock_logger)
        source = create_source(test_database, mock_logger)
        source.subscribe(bus)

        # Act / Assert
        await bus.publish(ApplicationInitialized())
        assert source.is_started
        assert len(await source.load_configuration().get_users()) == 2

        await bus.publish(ApplicationStopping())
        assert source.state is LifecycleState.STOPPED

    @pytest.mark.asyncio
    async def test_failed_start_via_event_is_not_propagated(
        self, test_database, mock_logger
    ):
        """Test the bus absorbs the error while the source fails closed."""
        bus = InMemoryEventBus(logger=mock_logger)
        source = create_source(test_database, mock_logger, ExplodingDefaults())
        source.subscribe(bus)

        await bus.publish(ApplicationInitialized())

        assert source.state is LifecycleState.FAILED
        failures = [
            call.kwargs
            for call in mock_logger.warning.call_args_list
            if call.args == ("event_handler_failed",)
        ]
        assert len(failures) == 1
        assert failures[0]["handler_name"] == "handle_initialized"
        assert failures[0]["error_type"] == "RuntimeError"
