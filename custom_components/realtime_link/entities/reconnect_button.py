# Copyright (c) 2026 Realtime Link Contributors
# Licensed under the MIT License
# See LICENSE file for full license text

"""Reconnect button: the manual reconnect affordance."""

from __future__ import annotations

import logging

from homeassistant.components.button import ButtonEntity

from .link_base import RealtimeLinkEntity

_LOGGER = logging.getLogger(__name__)


class ReconnectButton(RealtimeLinkEntity, ButtonEntity):
    """Button issuing reconnect while the link is down."""

    _attr_icon = "mdi:refresh"

    def __init__(self, container, entry) -> None:
        """Initialize the button."""
        super().__init__(container, entry, "reconnect", "Reconectar")

    @property
    def available(self) -> bool:
        """Interactive only while the link is disconnected."""
        return self._indicator.view.reconnect_available

    async def async_press(self) -> None:
        """Handle the button press."""
        if not self._indicator.press():
            _LOGGER.debug(
                "Reconnect press ignored in state %s", self._manager.connection_state
            )
