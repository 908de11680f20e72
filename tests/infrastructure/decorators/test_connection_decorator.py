"""Tests for connection decorator."""

import logging
import pytest
from unittest.mock import AsyncMock

from custom_components.realtime_link.infrastructure.decorators.connection_decorator import (
    require_connection,
)


class TestRequireConnection:
    """Test connection decorator."""

    @pytest.mark.asyncio
    async def test_runs_when_connected(self):
        """Test decorated method runs while connected."""

        class TestClass:
            is_connected = True

            def __init__(self):
                self._transport = AsyncMock()
                self._transport.send.return_value = True

            @require_connection("send message")
            async def method(self, payload: dict) -> bool:
                return await self._transport.send(payload)

        obj = TestClass()
        result = await obj.method({"type": "ping"})

        assert result is True
        obj._transport.send.assert_called_once_with({"type": "ping"})

    @pytest.mark.asyncio
    async def test_skipped_when_disconnected(self, caplog):
        """Test decorated method is skipped while disconnected."""

        class TestClass:
            is_connected = False

            def __init__(self):
                self._transport = AsyncMock()

            @require_connection("send message")
            async def method(self, payload: dict) -> bool:
                return await self._transport.send(payload)

        obj = TestClass()
        with caplog.at_level(logging.WARNING):
            result = await obj.method({"type": "ping"})

        assert result is False
        obj._transport.send.assert_not_called()
        assert "Cannot send message: WebSocket not connected" in caplog.text

    @pytest.mark.asyncio
    async def test_custom_default_return(self):
        """Test default_return is returned when skipped."""

        class TestClass:
            is_connected = False

            @require_connection("fetch", default_return=None)
            async def method(self) -> str:
                return "result"

        assert await TestClass().method() is None

    @pytest.mark.asyncio
    async def test_custom_state_attribute(self):
        """Test state_attr selects the attribute checked."""

        class TestClass:
            is_connected = False
            link_up = True

            @require_connection("fetch", state_attr="link_up")
            async def method(self) -> str:
                return "result"

        assert await TestClass().method() == "result"

    @pytest.mark.asyncio
    async def test_missing_attribute_counts_as_disconnected(self):
        """Test instances without the attribute are treated as down."""

        class TestClass:
            @require_connection("fetch")
            async def method(self) -> str:
                return "result"

        assert await TestClass().method() is False

    @pytest.mark.asyncio
    async def test_decorator_preserves_function_metadata(self):
        """Test decorator preserves function name and docstring."""

        class TestClass:
            is_connected = True

            @require_connection()
            async def my_method(self) -> str:
                """This is my method docstring."""
                return "result"

        obj = TestClass()
        assert obj.my_method.__name__ == "my_method"
        assert "docstring" in obj.my_method.__doc__
