"""Base class for entities backed by the connection status."""

from __future__ import annotations

import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import callback
from homeassistant.helpers.entity import Entity

from ..const import DOMAIN, MANUFACTURER, MODEL
from ..domain.value_objects import ConnectionState
from ..presentation.container import DIContainer

_LOGGER = logging.getLogger(__name__)


class RealtimeLinkEntity(Entity):
    """Entity that re-renders on every published ConnectionState."""

    _attr_has_entity_name = True
    _attr_should_poll = False

    def __init__(self, container: DIContainer, entry: ConfigEntry, key: str, name: str) -> None:
        """Initialize the entity.

        Args:
            container: Wired dependencies of the config entry
            entry: Config entry
            key: Entity key, used in the unique id
            name: Entity name
        """
        self._container = container
        self._manager = container.connection_manager
        self._publisher = container.publisher
        self._indicator = container.status_indicator

        self._attr_unique_id = f"{entry.entry_id}_{key}"
        self._attr_name = name

        # Device info (shared with all entities)
        self._attr_device_info = {
            "identifiers": {(DOMAIN, entry.entry_id)},
            "name": entry.title,
            "manufacturer": MANUFACTURER,
            "model": MODEL,
        }

    async def async_added_to_hass(self) -> None:
        """Subscribe to status changes."""
        await super().async_added_to_hass()
        self.async_on_remove(self._publisher.subscribe(self._handle_state_change))

    @callback
    def _handle_state_change(self, state: ConnectionState) -> None:
        """Write new state to Home Assistant."""
        _LOGGER.debug("%s: link state %s", self._attr_name, state.name)
        self.async_write_ha_state()
