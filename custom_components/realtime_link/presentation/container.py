"""Dependency Injection Container.

This module implements a simple DI container using dataclasses.
The container holds all dependencies of one config entry and provides
factory functions for creating the full dependency graph.

Pattern: Service Locator + Factory
Benefits:
- Single place to wire all dependencies
- One explicitly owned connection manager per entry (no module globals)
- Easy to test (can inject fakes)
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from ..const import (
    AUTH_TOKEN,
    BACKOFF_EXPONENTIAL,
    BACKOFF_FIXED,
    BROADCAST_MESSAGE_TYPES,
    CONF_BACKOFF,
    CONF_HEARTBEAT_INTERVAL,
    CONF_RECONNECT_DELAY,
    CONF_URL,
    CONF_USER_ID,
    CONF_USER_TYPE,
    DEFAULT_BACKOFF,
    DEFAULT_HEARTBEAT_INTERVAL,
    DEFAULT_RECONNECT_DELAY,
    EVENT_PREFIX,
    MSG_AUTHENTICATE,
    MSG_AUTHENTICATED,
    MSG_CONNECTION,
    MSG_PONG,
)

_LOGGER = logging.getLogger(__name__)


@dataclass
class DIContainer:
    """Dependency Injection Container.

    This container holds all dependencies organized by layer:
    - Infrastructure: transport and connection manager
    - Application: status publisher and message router
    - Presentation: status indicator

    Attributes:
        hass: Home Assistant instance
        entry: Config entry
        config: Merged entry data and options

        # Infrastructure Layer
        transport: WebSocket transport
        connection_manager: Connection lifecycle manager
        backoff: Automatic reconnect strategy

        # Application Layer
        publisher: Observable connection state
        message_router: Incoming message dispatch

        # Presentation Layer
        status_indicator: Rendering and guarded reconnect

    Example:
        >>> container = create_container(hass, entry, config)
        >>> container.connection_manager.connect()
    """

    # Core
    hass: HomeAssistant
    entry: ConfigEntry
    config: Dict[str, Any]

    # Infrastructure Layer
    transport: Optional[Any] = None  # ITransport
    connection_manager: Optional[Any] = None  # IConnectionManager
    backoff: Optional[Any] = None  # BackoffStrategy

    # Application Layer
    publisher: Optional[Any] = None
    message_router: Optional[Any] = None

    # Presentation Layer
    status_indicator: Optional[Any] = None


def create_container(
    hass: HomeAssistant,
    entry: ConfigEntry,
    config: Dict[str, Any],
    transport: Any = None,
) -> DIContainer:
    """Factory function to create fully-wired DI container.

    Dependencies are created in order:
    1. Application services (no dependencies)
    2. Infrastructure layer (depends on application services)
    3. Presentation layer (depends on both)

    Args:
        hass: Home Assistant instance
        entry: Config entry for this integration
        config: Merged entry data and options
        transport: Transport override (tests)

    Returns:
        Fully-wired DIContainer with all dependencies
    """
    container = DIContainer(hass=hass, entry=entry, config=config)

    # Application Layer
    container.publisher = _create_publisher()
    container.message_router = _create_message_router(hass, entry)

    # Infrastructure Layer
    container.backoff = _create_backoff(config)
    container.transport = transport or _create_transport(hass, config)
    container.connection_manager = _create_connection_manager(
        hass,
        config,
        transport=container.transport,
        publisher=container.publisher,
        router=container.message_router,
        backoff=container.backoff,
    )

    # Presentation Layer
    container.status_indicator = _create_status_indicator(
        container.publisher, container.connection_manager
    )

    return container


# Application Layer Factory Functions


def _create_publisher() -> Any:
    """Create status publisher.

    Returns:
        StatusPublisher starting in DISCONNECTED
    """
    from ..application.services import StatusPublisher

    return StatusPublisher()


def _create_message_router(hass: HomeAssistant, entry: ConfigEntry) -> Any:
    """Create message router with the integration's handlers.

    Server pushes are re-fired on the Home Assistant bus as
    ``realtime_link_<type>`` events.

    Args:
        hass: Home Assistant instance
        entry: Config entry (its id is added to every event)

    Returns:
        MessageRouter
    """
    from ..application.services import MessageRouter

    router = MessageRouter()

    def _fire(message) -> None:
        if isinstance(message.data, dict):
            event_data = dict(message.data)
        else:
            event_data = {"data": message.data}
        # Payload keys never replace the entry id
        event_data["entry_id"] = entry.entry_id
        hass.bus.async_fire(f"{EVENT_PREFIX}_{message.type}", event_data)
        _LOGGER.debug("Fired %s_%s event", EVENT_PREFIX, message.type)

    def _log_server_text(message) -> None:
        _LOGGER.info("WebSocket: %s", message.text)

    for message_type in BROADCAST_MESSAGE_TYPES:
        router.register(message_type, _fire)

    router.register(MSG_CONNECTION, _log_server_text)
    router.register(MSG_AUTHENTICATED, _log_server_text)
    # Heartbeat response
    router.register(MSG_PONG, lambda message: None)

    return router


# Infrastructure Layer Factory Functions


def _create_backoff(config: Dict[str, Any]) -> Any:
    """Create automatic reconnect strategy from options.

    Args:
        config: Merged entry data and options

    Returns:
        BackoffStrategy
    """
    from ..domain.strategies import create_backoff

    name = config.get(CONF_BACKOFF, DEFAULT_BACKOFF)
    delay = float(config.get(CONF_RECONNECT_DELAY, DEFAULT_RECONNECT_DELAY))

    if name == BACKOFF_FIXED:
        return create_backoff(name, seconds=delay)
    if name == BACKOFF_EXPONENTIAL:
        return create_backoff(name, initial=max(delay, 0.1))
    return create_backoff(name)


def _build_auth_payload(config: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Build the authenticate message, if a user is configured."""
    user_id = config.get(CONF_USER_ID)
    if not user_id:
        return None

    return {
        "type": MSG_AUTHENTICATE,
        "userId": user_id,
        "userType": config.get(CONF_USER_TYPE),
        "token": AUTH_TOKEN,
    }


def _create_transport(hass: HomeAssistant, config: Dict[str, Any]) -> Any:
    """Create WebSocket transport.

    Args:
        hass: Home Assistant instance (for the shared aiohttp session)
        config: Merged entry data and options

    Returns:
        ITransport implementation (WebSocketTransport)
    """
    from homeassistant.helpers.aiohttp_client import async_get_clientsession

    from ..infrastructure.transport import WebSocketTransport

    return WebSocketTransport(
        async_get_clientsession(hass),
        auth_payload=_build_auth_payload(config),
        heartbeat_interval=float(
            config.get(CONF_HEARTBEAT_INTERVAL, DEFAULT_HEARTBEAT_INTERVAL)
        ),
        loop=hass.loop,
    )


def _create_connection_manager(
    hass: HomeAssistant,
    config: Dict[str, Any],
    transport: Any,
    publisher: Any,
    router: Any,
    backoff: Any,
) -> Any:
    """Create connection manager.

    Args:
        hass: Home Assistant instance (its loop runs retries)
        config: Merged entry data and options
        transport: Transport implementation
        publisher: Status publisher
        router: Message router
        backoff: Automatic reconnect strategy

    Returns:
        IConnectionManager implementation (ConnectionManager)
    """
    from ..infrastructure.transport import ConnectionManager

    return ConnectionManager(
        transport,
        config[CONF_URL],
        publisher=publisher,
        router=router,
        backoff=backoff,
        loop=hass.loop,
    )


# Presentation Layer Factory Functions


def _create_status_indicator(publisher: Any, connection_manager: Any) -> Any:
    """Create status indicator.

    Args:
        publisher: Status publisher
        connection_manager: Manager receiving reconnect commands

    Returns:
        StatusIndicator
    """
    from .status_indicator import StatusIndicator

    return StatusIndicator(publisher, connection_manager.reconnect)


# Container Validation


def validate_container(container: DIContainer) -> bool:
    """Validate that container has all required dependencies.

    Args:
        container: Container to validate

    Returns:
        True if all critical dependencies are present

    Raises:
        ValueError: If critical dependencies are missing
    """
    critical_dependencies = [
        "hass",
        "entry",
        "config",
        "transport",
        "connection_manager",
        "publisher",
        "status_indicator",
    ]

    missing = []
    for dep_name in critical_dependencies:
        if getattr(container, dep_name, None) is None:
            missing.append(dep_name)

    if missing:
        raise ValueError(f"Missing critical dependencies: {', '.join(missing)}")

    return True
