"""Pytest configuration for async testing.

This configuration ensures:
1. Async tests are marked for pytest-asyncio
2. Every integration test gets its own SQLite database file
3. Database engines are disposed after each test
"""

import inspect
from collections.abc import AsyncIterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from security_store.application.security_configuration import SecurityConfiguration
from security_store.application.security_configuration_source import (
    SecurityConfigurationSource,
)
from security_store.infrastructure.defaults import StaticSecurityDefaults
from security_store.infrastructure.persistence.database import Database

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


def unique_id(prefix: str) -> str:
    """Return an id that is unique per test run (e.g. 'user-0192...')."""
    return f"{prefix}-{uuid7().hex}"


def database_url(directory: Path) -> str:
    return f"sqlite+aiosqlite:///{directory / 'security.db'}"


@pytest.fixture
def mock_logger():
    """Logger double; bind() returns the same mock so calls are observable."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest_asyncio.fixture
async def test_database(tmp_path) -> AsyncIterator[Database]:
    """Fresh SQLite database per test (tables created by store registration)."""
    database = Database(database_url=database_url(tmp_path))
    yield database
    await database.close()


@pytest_asyncio.fixture
async def started_source(
    test_database, mock_logger
) -> AsyncIterator[SecurityConfigurationSource]:
    """Started source seeded with the built-in defaults."""
    source = SecurityConfigurationSource(
        database=test_database,
        defaults=StaticSecurityDefaults(),
        logger=mock_logger,
    )
    await source.start()
    yield source
    await source.stop()


@pytest.fixture
def configuration(started_source) -> SecurityConfiguration:
    """Facade over a started, seeded source."""
    return started_source.load_configuration()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
