"""Binary sensor platform for the Realtime Link integration."""

from __future__ import annotations

import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .entities import LinkConnectivitySensor

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the connectivity binary sensor from a config entry."""
    container = hass.data[DOMAIN][entry.entry_id]["container"]

    async_add_entities([LinkConnectivitySensor(container, entry)])
    _LOGGER.debug("Added connectivity sensor for %s", entry.title)
