# Copyright (c) 2026 Realtime Link Contributors
# Licensed under the MIT License
# See LICENSE file for full license text

"""Realtime Link integration for Home Assistant.

This integration keeps a WebSocket connection to a realtime notification
server, shows its status as a connectivity sensor ("Conectado" /
"Desconectado") with a reconnect button, and re-fires server pushes on the
Home Assistant event bus.
"""

from __future__ import annotations

import logging

import voluptuous as vol

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import Platform
from homeassistant.core import HomeAssistant, ServiceCall
from homeassistant.exceptions import ConfigEntryNotReady, HomeAssistantError
import homeassistant.helpers.config_validation as cv

from .const import (
    ATTR_DATA,
    ATTR_ENTRY_ID,
    ATTR_TYPE,
    CONF_URL,
    DOMAIN,
    SERVICE_RECONNECT,
    SERVICE_SEND_MESSAGE,
)
from .domain.value_objects import SOURCE_SERVICE
from .presentation.container import DIContainer, create_container, validate_container

_LOGGER = logging.getLogger(__name__)

# Service schemas
RECONNECT_SCHEMA = vol.Schema(
    {
        vol.Optional(ATTR_ENTRY_ID): cv.string,
    }
)

SEND_MESSAGE_SCHEMA = vol.Schema(
    {
        vol.Required(ATTR_TYPE): cv.string,
        vol.Optional(ATTR_DATA, default={}): dict,
        vol.Optional(ATTR_ENTRY_ID): cv.string,
    }
)

PLATFORMS: list[Platform] = [
    Platform.BINARY_SENSOR,
    Platform.BUTTON,
]


def _get_containers(hass: HomeAssistant, entry_id: str | None) -> list[DIContainer]:
    """Resolve the containers a service call targets.

    Args:
        hass: Home Assistant instance
        entry_id: Target entry, or None for all entries

    Returns:
        List of containers

    Raises:
        HomeAssistantError: If entry_id is not a loaded entry
    """
    entries = hass.data.get(DOMAIN, {})

    if entry_id is None:
        return [data["container"] for data in entries.values()]

    if entry_id not in entries:
        raise HomeAssistantError(f"Realtime Link entry not loaded: {entry_id}")
    return [entries[entry_id]["container"]]


def _async_register_services(hass: HomeAssistant) -> None:
    """Register domain services once for all entries."""
    if hass.services.has_service(DOMAIN, SERVICE_RECONNECT):
        return

    async def handle_reconnect(call: ServiceCall) -> None:
        """Handle reconnect service call."""
        for container in _get_containers(hass, call.data.get(ATTR_ENTRY_ID)):
            container.connection_manager.reconnect(SOURCE_SERVICE)
        _LOGGER.info("Reconnect triggered by service call")

    async def handle_send_message(call: ServiceCall) -> None:
        """Handle send message service call."""
        payload = {"type": call.data[ATTR_TYPE], "data": call.data[ATTR_DATA]}

        sent = False
        for container in _get_containers(hass, call.data.get(ATTR_ENTRY_ID)):
            if await container.connection_manager.async_send_message(payload):
                sent = True

        if not sent:
            raise HomeAssistantError("Cannot send message: WebSocket not connected")

    hass.services.async_register(
        DOMAIN,
        SERVICE_RECONNECT,
        handle_reconnect,
        schema=RECONNECT_SCHEMA,
    )

    hass.services.async_register(
        DOMAIN,
        SERVICE_SEND_MESSAGE,
        handle_send_message,
        schema=SEND_MESSAGE_SCHEMA,
    )


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up Realtime Link from a config entry."""
    config = {**entry.data, **entry.options}
    _LOGGER.debug("Setting up Realtime Link for %s", config.get(CONF_URL))

    # Use DI Container for Complete Wiring
    try:
        container = create_container(hass, entry, config)
        validate_container(container)
    except (KeyError, ValueError) as err:
        _LOGGER.error("Failed to create Realtime Link: %s", err)
        raise ConfigEntryNotReady(f"Failed to create Realtime Link: {err}") from err

    hass.data.setdefault(DOMAIN, {})
    hass.data[DOMAIN][entry.entry_id] = {
        "container": container,
        "config": config,
    }

    # Forward setup to platforms
    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    # Entities are subscribed; open the link
    container.connection_manager.connect()

    # Register options update listener
    entry.async_on_unload(entry.add_update_listener(async_reload_entry))

    _async_register_services(hass)

    _LOGGER.info("Realtime Link setup complete for %s", config.get(CONF_URL))
    return True


async def async_reload_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Reload config entry when options change."""
    await hass.config_entries.async_reload(entry.entry_id)


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    _LOGGER.debug("Unloading Realtime Link integration")

    # Unload platforms
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)

    # Tear down the link and clean up
    if unload_ok:
        data = hass.data[DOMAIN].pop(entry.entry_id)
        container: DIContainer = data["container"]
        container.connection_manager.teardown()
        await container.transport.wait_closed()

        # Unregister services with the last entry
        if not hass.data[DOMAIN]:
            hass.services.async_remove(DOMAIN, SERVICE_RECONNECT)
            hass.services.async_remove(DOMAIN, SERVICE_SEND_MESSAGE)

    return unload_ok
