"""Tests for the connectivity sensor and reconnect button."""

from unittest.mock import MagicMock, patch

import pytest

from custom_components.realtime_link.binary_sensor import (
    async_setup_entry as async_setup_binary_sensor,
)
from custom_components.realtime_link.button import (
    async_setup_entry as async_setup_button,
)
from custom_components.realtime_link.const import DOMAIN
from custom_components.realtime_link.entities import (
    LinkConnectivitySensor,
    ReconnectButton,
)
from custom_components.realtime_link.presentation.container import create_container


@pytest.fixture
def container(hass, mock_config_entry, fake_transport):
    """Wired container around the fake transport."""
    return create_container(
        hass, mock_config_entry, dict(mock_config_entry.data), transport=fake_transport
    )


class TestLinkConnectivitySensor:
    """Test connectivity sensor."""

    def test_initial_state(self, container, mock_config_entry):
        """Test sensor starts off and offers reconnect."""
        sensor = LinkConnectivitySensor(container, mock_config_entry)

        assert sensor.unique_id == "test_entry_id_connection"
        assert sensor.is_on is False
        assert sensor.icon == "mdi:wifi-off"
        attrs = sensor.extra_state_attributes
        assert attrs["status"] == "Desconectado"
        assert attrs["state"] == "disconnected"
        assert attrs["reconnect_available"] is True
        assert attrs["hint"] == "Clique para reconectar"
        assert attrs["last_failure"] is None

    def test_connected(self, container, mock_config_entry, fake_transport):
        """Test sensor is on while connected."""
        sensor = LinkConnectivitySensor(container, mock_config_entry)
        container.connection_manager.connect()
        fake_transport.fire_open()

        assert sensor.is_on is True
        assert sensor.icon == "mdi:wifi"
        assert sensor.extra_state_attributes["status"] == "Conectado"

    def test_last_failure_exposed(self, container, mock_config_entry, fake_transport):
        """Test failure reason appears in attributes."""
        sensor = LinkConnectivitySensor(container, mock_config_entry)
        container.connection_manager.connect()
        fake_transport.fire_error(ConnectionRefusedError("refused"))

        assert "refused" in sensor.extra_state_attributes["last_failure"]

    def test_message_counters_exposed(
        self, container, mock_config_entry, fake_transport
    ):
        """Test received and dropped frames are counted in attributes."""
        sensor = LinkConnectivitySensor(container, mock_config_entry)
        container.connection_manager.connect()
        fake_transport.fire_open()

        fake_transport.fire_message('{"type": "investment_update", "data": {}}')
        fake_transport.fire_message("not json")

        attrs = sensor.extra_state_attributes
        assert attrs["messages_received"] == 1
        assert attrs["messages_dropped"] == 1

    @pytest.mark.asyncio
    async def test_writes_state_on_change(self, container, mock_config_entry):
        """Test every published state triggers a state write."""
        sensor = LinkConnectivitySensor(container, mock_config_entry)

        with patch.object(sensor, "async_write_ha_state") as write_state:
            await sensor.async_added_to_hass()
            container.connection_manager.connect()

        write_state.assert_called_once()

    @pytest.mark.asyncio
    async def test_unsubscribes_on_remove(self, container, mock_config_entry):
        """Test the subscription is released with the entity."""
        sensor = LinkConnectivitySensor(container, mock_config_entry)
        await sensor.async_added_to_hass()

        for remove in sensor._on_remove:
            remove()

        with patch.object(sensor, "async_write_ha_state") as write_state:
            container.connection_manager.connect()

        write_state.assert_not_called()


class TestReconnectButton:
    """Test reconnect button."""

    @pytest.mark.asyncio
    async def test_press_reconnects_when_disconnected(
        self, container, mock_config_entry, fake_transport
    ):
        """Test press issues reconnect."""
        button = ReconnectButton(container, mock_config_entry)
        assert button.available is True

        await button.async_press()

        assert container.connection_manager.connection_state == "reconnecting"
        assert fake_transport.open_count == 1
        assert button.available is False

    @pytest.mark.asyncio
    async def test_press_ignored_while_connecting(
        self, container, mock_config_entry, fake_transport
    ):
        """Test press does nothing while an attempt is pending."""
        button = ReconnectButton(container, mock_config_entry)
        container.connection_manager.connect()

        await button.async_press()

        assert container.connection_manager.connection_state == "connecting"
        assert fake_transport.open_count == 1


class TestPlatformSetup:
    """Test platform setup functions."""

    @pytest.mark.asyncio
    async def test_platforms_add_entities(self, hass, mock_config_entry, container):
        """Test each platform adds its entity."""
        hass.data[DOMAIN] = {mock_config_entry.entry_id: {"container": container}}
        add_entities = MagicMock()

        await async_setup_binary_sensor(hass, mock_config_entry, add_entities)
        await async_setup_button(hass, mock_config_entry, add_entities)

        added = [call.args[0][0] for call in add_entities.call_args_list]
        assert isinstance(added[0], LinkConnectivitySensor)
        assert isinstance(added[1], ReconnectButton)
