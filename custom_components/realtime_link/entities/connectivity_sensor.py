"""Connectivity binary sensor showing "Conectado" / "Desconectado"."""

from __future__ import annotations

from typing import Any

from homeassistant.components.binary_sensor import (
    BinarySensorDeviceClass,
    BinarySensorEntity,
)

from .link_base import RealtimeLinkEntity


class LinkConnectivitySensor(RealtimeLinkEntity, BinarySensorEntity):
    """Binary sensor rendering the status indicator."""

    _attr_device_class = BinarySensorDeviceClass.CONNECTIVITY

    def __init__(self, container, entry) -> None:
        """Initialize the sensor."""
        super().__init__(container, entry, "connection", "Conexão")

    @property
    def is_on(self) -> bool:
        """Return True if the link is connected."""
        return self._indicator.view.is_connected

    @property
    def icon(self) -> str:
        """Icon from the status view."""
        return self._indicator.view.icon

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Expose label, raw state, last failure and message counters."""
        view = self._indicator.view
        failure = self._manager.last_failure
        stats = self._container.message_router.get_stats()
        return {
            "status": view.label,
            "state": self._manager.connection_state,
            "reconnect_available": view.reconnect_available,
            "hint": view.hint,
            "last_failure": str(failure) if failure else None,
            "url": self._manager.url,
            "messages_received": stats["received"],
            "messages_dropped": stats["dropped"],
        }
