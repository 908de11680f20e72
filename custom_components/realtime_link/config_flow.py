"""Config flow for the Realtime Link integration."""

from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.core import callback
from homeassistant.data_entry_flow import FlowResult

from .const import (
    BACKOFF_CHOICES,
    CONF_BACKOFF,
    CONF_HEARTBEAT_INTERVAL,
    CONF_RECONNECT_DELAY,
    CONF_URL,
    CONF_USER_ID,
    CONF_USER_TYPE,
    DEFAULT_BACKOFF,
    DEFAULT_HEARTBEAT_INTERVAL,
    DEFAULT_NAME,
    DEFAULT_RECONNECT_DELAY,
    DOMAIN,
    MAX_BACKOFF,
)
from .validation import normalize_ws_url

_LOGGER = logging.getLogger(__name__)

USER_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_URL): str,
        vol.Optional(CONF_USER_ID): str,
        vol.Optional(CONF_USER_TYPE): str,
    }
)


class RealtimeLinkConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Realtime Link."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Handle the initial step - ask for the server URL."""
        errors: dict[str, str] = {}

        if user_input is not None:
            try:
                url = normalize_ws_url(user_input[CONF_URL])
            except vol.Invalid as err:
                _LOGGER.debug("Rejected URL %s: %s", user_input[CONF_URL], err)
                errors[CONF_URL] = "invalid_url"
            else:
                # One entry per server URL
                await self.async_set_unique_id(url)
                self._abort_if_unique_id_configured()

                data = {CONF_URL: url}
                for key in (CONF_USER_ID, CONF_USER_TYPE):
                    if user_input.get(key):
                        data[key] = user_input[key]

                return self.async_create_entry(
                    title=f"{DEFAULT_NAME} ({url})",
                    data=data,
                )

        return self.async_show_form(
            step_id="user",
            data_schema=self.add_suggested_values_to_schema(
                USER_SCHEMA, user_input or {}
            ),
            errors=errors,
        )

    @staticmethod
    @callback
    def async_get_options_flow(
        config_entry: config_entries.ConfigEntry,
    ) -> config_entries.OptionsFlow:
        """Get the options flow handler."""
        return RealtimeLinkOptionsFlowHandler(config_entry)


class RealtimeLinkOptionsFlowHandler(config_entries.OptionsFlow):
    """Handle reconnect and heartbeat options."""

    def __init__(self, config_entry: config_entries.ConfigEntry) -> None:
        """Initialize options flow.

        Args:
            config_entry: The config entry being configured
        """
        self._entry = config_entry

    async def async_step_init(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Manage the options."""
        if user_input is not None:
            return self.async_create_entry(title="", data=user_input)

        options = self._entry.options
        schema = vol.Schema(
            {
                vol.Optional(
                    CONF_BACKOFF,
                    default=options.get(CONF_BACKOFF, DEFAULT_BACKOFF),
                ): vol.In(BACKOFF_CHOICES),
                vol.Optional(
                    CONF_RECONNECT_DELAY,
                    default=options.get(CONF_RECONNECT_DELAY, DEFAULT_RECONNECT_DELAY),
                ): vol.All(vol.Coerce(float), vol.Range(min=0, max=MAX_BACKOFF)),
                vol.Optional(
                    CONF_HEARTBEAT_INTERVAL,
                    default=options.get(
                        CONF_HEARTBEAT_INTERVAL, DEFAULT_HEARTBEAT_INTERVAL
                    ),
                ): vol.All(vol.Coerce(float), vol.Range(min=0, max=3600)),
            }
        )

        return self.async_show_form(step_id="init", data_schema=schema)
