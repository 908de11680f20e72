"""Tests for the Realtime Link config flow."""

from unittest.mock import MagicMock, patch

import pytest
from homeassistant.data_entry_flow import FlowResultType

from custom_components.realtime_link.config_flow import (
    RealtimeLinkConfigFlow,
    RealtimeLinkOptionsFlowHandler,
)
from custom_components.realtime_link.const import (
    CONF_BACKOFF,
    CONF_HEARTBEAT_INTERVAL,
    CONF_RECONNECT_DELAY,
    CONF_URL,
    CONF_USER_ID,
    CONF_USER_TYPE,
    DOMAIN,
)


@pytest.fixture
def flow():
    """Create a config flow bound to a mock hass."""
    flow = RealtimeLinkConfigFlow()
    flow.hass = MagicMock()
    flow.handler = DOMAIN
    flow.flow_id = "test_flow"
    flow.context = {"source": "user"}
    return flow


class TestRealtimeLinkConfigFlow:
    """Test the Realtime Link config flow."""

    @pytest.mark.asyncio
    async def test_show_form(self, flow):
        """Test the first step shows the form."""
        result = await flow.async_step_user()

        assert result["type"] == FlowResultType.FORM
        assert result["step_id"] == "user"
        assert result["errors"] == {}

    @pytest.mark.asyncio
    async def test_user_flow_success(self, flow):
        """Test successful user configuration flow."""
        with patch.object(flow, "async_set_unique_id") as set_unique_id, patch.object(
            flow, "_abort_if_unique_id_configured"
        ):
            result = await flow.async_step_user(
                user_input={
                    CONF_URL: "https://realtime.test",
                    CONF_USER_ID: "u1",
                    CONF_USER_TYPE: "investor",
                }
            )

        assert result["type"] == FlowResultType.CREATE_ENTRY
        assert result["title"] == "Realtime Link (wss://realtime.test/ws)"
        assert result["data"] == {
            CONF_URL: "wss://realtime.test/ws",
            CONF_USER_ID: "u1",
            CONF_USER_TYPE: "investor",
        }
        set_unique_id.assert_called_once_with("wss://realtime.test/ws")

    @pytest.mark.asyncio
    async def test_empty_user_fields_dropped(self, flow):
        """Test blank optional fields are not stored."""
        with patch.object(flow, "async_set_unique_id"), patch.object(
            flow, "_abort_if_unique_id_configured"
        ):
            result = await flow.async_step_user(
                user_input={CONF_URL: "ws://realtime.test/ws", CONF_USER_ID: ""}
            )

        assert result["data"] == {CONF_URL: "ws://realtime.test/ws"}

    @pytest.mark.asyncio
    async def test_invalid_url(self, flow):
        """Test invalid URL shows an error."""
        result = await flow.async_step_user(user_input={CONF_URL: "ftp://nope"})

        assert result["type"] == FlowResultType.FORM
        assert result["errors"] == {CONF_URL: "invalid_url"}


class TestRealtimeLinkOptionsFlow:
    """Test the options flow."""

    @pytest.mark.asyncio
    async def test_options_form_defaults(self):
        """Test options form shows current values."""
        entry = MagicMock()
        entry.options = {CONF_BACKOFF: "exponential"}
        handler = RealtimeLinkOptionsFlowHandler(entry)
        handler.hass = MagicMock()

        result = await handler.async_step_init()

        assert result["type"] == FlowResultType.FORM
        assert result["step_id"] == "init"
        validated = result["data_schema"]({})
        assert validated[CONF_BACKOFF] == "exponential"
        assert validated[CONF_RECONNECT_DELAY] == 3.0
        assert validated[CONF_HEARTBEAT_INTERVAL] == 30.0

    @pytest.mark.asyncio
    async def test_options_saved(self):
        """Test submitted options create the entry."""
        handler = RealtimeLinkOptionsFlowHandler(MagicMock(options={}))
        handler.hass = MagicMock()
        user_input = {
            CONF_BACKOFF: "fixed",
            CONF_RECONNECT_DELAY: 5.0,
            CONF_HEARTBEAT_INTERVAL: 0.0,
        }

        result = await handler.async_step_init(user_input)

        assert result["type"] == FlowResultType.CREATE_ENTRY
        assert result["data"] == user_input

    def test_get_options_flow(self):
        """Test the options flow factory."""
        entry = MagicMock(options={})
        handler = RealtimeLinkConfigFlow.async_get_options_flow(entry)
        assert isinstance(handler, RealtimeLinkOptionsFlowHandler)
