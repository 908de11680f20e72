"""Pytest configuration and fixtures for Realtime Link tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import custom_components
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from unittest.mock import MagicMock, Mock

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from custom_components.realtime_link.const import CONF_URL
from custom_components.realtime_link.infrastructure.transport import ConnectionManager
from tests.doubles.fake_transport import FakeTransport

TEST_URL = "ws://realtime.test/ws"


@pytest.fixture
def mock_config_entry() -> ConfigEntry:
    """Return a mock config entry."""
    entry = MagicMock(spec=ConfigEntry)
    entry.entry_id = "test_entry_id"
    entry.title = "Realtime Link (ws://realtime.test/ws)"
    entry.data = {CONF_URL: TEST_URL}
    entry.options = {}
    return entry


@pytest.fixture
def fake_transport():
    """Create fake transport."""
    return FakeTransport()


@pytest.fixture
def manager(fake_transport):
    """Create connection manager with fake transport."""
    return ConnectionManager(fake_transport, TEST_URL)


@pytest.fixture
def mock_loop():
    """Loop double capturing call_later callbacks."""
    loop = Mock()
    loop.call_later = Mock(side_effect=lambda delay, cb, *args: Mock(delay=delay, cb=cb, args=args))
    return loop


@pytest.fixture
def hass():
    """Create a mock HomeAssistant instance."""
    hass_instance = Mock(spec=HomeAssistant)
    hass_instance.data = {}
    hass_instance.bus = Mock()
    hass_instance.loop = Mock()
    return hass_instance


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "asyncio: mark test as an asyncio test")
