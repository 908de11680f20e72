"""Tests for status rendering and the reconnect affordance."""

import pytest
from unittest.mock import Mock

from custom_components.realtime_link.application.services import StatusPublisher
from custom_components.realtime_link.domain.value_objects import ConnectionState
from custom_components.realtime_link.presentation.status_indicator import (
    StatusIndicator,
    render_status,
)


class TestRenderStatus:
    """Test pure status rendering."""

    def test_connected(self):
        """Test only CONNECTED renders as connected."""
        view = render_status(ConnectionState.CONNECTED)
        assert view.label == "Conectado"
        assert view.icon == "mdi:wifi"
        assert view.is_connected
        assert not view.reconnect_available
        assert view.hint is None

    def test_disconnected_offers_reconnect(self):
        """Test DISCONNECTED is actionable with a hint."""
        view = render_status(ConnectionState.DISCONNECTED)
        assert view.label == "Desconectado"
        assert view.icon == "mdi:wifi-off"
        assert not view.is_connected
        assert view.reconnect_available
        assert view.hint == "Clique para reconectar"

    @pytest.mark.parametrize(
        "state", [ConnectionState.CONNECTING, ConnectionState.RECONNECTING]
    )
    def test_pending_states_render_disconnected(self, state):
        """Test pending attempts show Desconectado without the affordance."""
        view = render_status(state)
        assert view.label == "Desconectado"
        assert not view.is_connected
        assert not view.reconnect_available
        assert view.hint is None


class TestStatusIndicator:
    """Test status indicator."""

    def test_view_follows_publisher(self):
        """Test view is derived from the published state."""
        publisher = StatusPublisher()
        indicator = StatusIndicator(publisher, Mock())

        assert indicator.view.label == "Desconectado"
        publisher.publish(ConnectionState.CONNECTED)
        assert indicator.view.label == "Conectado"

    def test_press_when_disconnected(self):
        """Test press issues reconnect in DISCONNECTED."""
        reconnect = Mock()
        indicator = StatusIndicator(StatusPublisher(), reconnect)

        assert indicator.press() is True
        reconnect.assert_called_once_with()

    @pytest.mark.parametrize(
        "state",
        [
            ConnectionState.CONNECTING,
            ConnectionState.CONNECTED,
            ConnectionState.RECONNECTING,
        ],
    )
    def test_press_ignored_otherwise(self, state):
        """Test press does nothing outside DISCONNECTED."""
        reconnect = Mock()
        indicator = StatusIndicator(StatusPublisher(state), reconnect)

        assert indicator.press() is False
        reconnect.assert_not_called()
