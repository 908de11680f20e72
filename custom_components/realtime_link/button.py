# Copyright (c) 2026 Realtime Link Contributors
# Licensed under the MIT License
# See LICENSE file for full license text

"""Button platform for the Realtime Link integration."""

from __future__ import annotations

import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .entities import ReconnectButton

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the reconnect button from a config entry."""
    container = hass.data[DOMAIN][entry.entry_id]["container"]

    async_add_entities([ReconnectButton(container, entry)])
    _LOGGER.debug("Added reconnect button for %s", entry.title)
