"""Unit tests for InMemoryEventBus.

Tests cover:
- Handlers receive the published event
- Exact type matching
- Fail-open: a failing handler neither stops others nor reaches the publisher
- Publishing without subscribers
- Sequential delivery in subscription order
"""

from unittest.mock import AsyncMock

import pytest

from security_store.domain.events import ApplicationInitialized, ApplicationStopping
from security_store.infrastructure.events import InMemoryEventBus


@pytest.mark.unit
class TestInMemoryEventBus:
    """Publish/subscribe behavior."""

    @pytest.mark.asyncio
    async def test_publish_calls_all_handlers(self, mock_logger):
        bus = InMemoryEventBus(logger=mock_logger)
        first, second = AsyncMock(), AsyncMock()
        bus.subscribe(ApplicationInitialized, first)
        bus.subscribe(ApplicationInitialized, second)
        event = ApplicationInitialized()

        await bus.publish(event)

        first.assert_awaited_once_with(event)
        second.assert_awaited_once_with(event)

    @pytest.mark.asyncio
    async def test_handlers_only_receive_their_event_type(self, mock_logger):
        bus = InMemoryEventBus(logger=mock_logger)
        on_stopping = AsyncMock()
        bus.subscribe(ApplicationStopping, on_stopping)

        await bus.publish(ApplicationInitialized())

        on_stopping.assert_not_called()

    @pytest.mark.asyncio
    async def test_failing_handler_is_logged_not_raised(self, mock_logger):
        # Arrange
        bus = InMemoryEventBus(logger=mock_logger)
        failing = AsyncMock(side_effect=RuntimeError("handler broke"))
        failing.__name__ = "failing"
        healthy = AsyncMock()
        bus.subscribe(ApplicationStopping, failing)
        bus.subscribe(ApplicationStopping, healthy)

        # Act
        await bus.publish(ApplicationStopping())

        # Assert
        healthy.assert_awaited_once()
        mock_logger.warning.assert_called_once()
        kwargs = mock_logger.warning.call_args.kwargs
        assert mock_logger.warning.call_args.args == ("event_handler_failed",)
        assert kwargs["handler_name"] == "failing"
        assert kwargs["error_message"] == "handler broke"

    @pytest.mark.asyncio
    async def test_publish_without_handlers_is_noop(self, mock_logger):
        bus = InMemoryEventBus(logger=mock_logger)

        await bus.publish(ApplicationInitialized())

        mock_logger.debug.assert_not_called()

    def test_events_carry_identity_and_timestamp(self):
        first, second = ApplicationInitialized(), ApplicationInitialized()

        assert first.event_id != second.event_id
        assert first.occurred_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_handlers_run_in_subscription_order(self, mock_logger):
        bus = InMemoryEventBus(logger=mock_logger)
        calls = []

        async def first(event):
            calls.append("first")

        async def second(event):
            calls.append("second")

        bus.subscribe(ApplicationInitialized, first)
        bus.subscribe(ApplicationInitialized, second)

        await bus.publish(ApplicationInitialized())

        assert calls == ["first", "second"]
