"""IConnectionManager interface for connection lifecycle management."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from .i_transport import ITransportListener


class IConnectionManager(ITransportListener):
    """Interface for connection lifecycle management.

    The connection manager adds the lifecycle policy on top of the raw
    transport:
    - At most one active or pending connection
    - Connection state tracking and publishing
    - User-driven reconnect, optional automatic retry
    - Discarding events from superseded attempts

    Example:
        >>> manager = ConnectionManager(transport, "ws://example.org/ws")
        >>> manager.connect()
        >>> manager.connection_state
        'connecting'
    """

    @abstractmethod
    def connect(self) -> None:
        """Open the connection unless one is active or pending."""

    @abstractmethod
    def reconnect(self, source: str = "user") -> None:
        """Drop any existing socket and start a fresh attempt.

        Allowed in any state.
        """

    @abstractmethod
    def teardown(self) -> None:
        """Close the socket and release all resources. Idempotent."""

    @abstractmethod
    async def async_send_message(self, payload: dict[str, Any]) -> bool:
        """Send a JSON message over the open connection."""

    @property
    @abstractmethod
    def connection_state(self) -> str:
        """Get current connection state.

        Returns:
            State: "disconnected", "connecting", "connected", "reconnecting"
        """

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Check if the link is connected."""
