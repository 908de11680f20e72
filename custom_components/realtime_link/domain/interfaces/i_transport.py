"""ITransport interface for socket transport implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class ITransportListener(ABC):
    """Receiver of transport events.

    Every event carries the generation of the attempt that produced it so
    the receiver can discard completions of superseded attempts.
    """

    @abstractmethod
    def on_open(self, generation: int) -> None:
        """Socket for ``generation`` is open."""

    @abstractmethod
    def on_message(self, generation: int, raw: str) -> None:
        """Text frame received on the socket of ``generation``."""

    @abstractmethod
    def on_close(self, generation: int, reason: Optional[str] = None) -> None:
        """Socket for ``generation`` closed."""

    @abstractmethod
    def on_error(self, generation: int, error: BaseException) -> None:
        """Socket for ``generation`` failed."""


class ITransport(ABC):
    """Interface for transport layer implementations.

    The transport owns the actual socket. It is event driven: ``open``
    returns immediately and the outcome is reported later through the
    listener.

    Connection lifecycle:
        1. open(url, generation, listener) -> schedules connection
        2. listener.on_open / on_message ... (events)
        3. close() -> tears down the socket, reports nothing further

    Example:
        >>> transport = WebSocketTransport(session)
        >>> transport.open("ws://example.org/ws", 1, manager)
        >>> await transport.send({"type": "ping"})
        >>> transport.close()
    """

    @abstractmethod
    def open(self, url: str, generation: int, listener: ITransportListener) -> None:
        """Start opening a socket to ``url``.

        Any socket that is still open is closed first.

        Args:
            url: WebSocket URL (ws:// or wss://)
            generation: Attempt tag echoed back in every listener event
            listener: Receiver of the attempt's events
        """

    @abstractmethod
    def close(self) -> None:
        """Close the current socket.

        Idempotent. A closed attempt must not report further events.
        """

    async def wait_closed(self) -> None:
        """Close and wait until the socket is fully released.

        Transports that close synchronously need not override this.
        """
        self.close()

    @abstractmethod
    async def send(self, payload: dict[str, Any]) -> bool:
        """Send a JSON payload.

        Args:
            payload: JSON-serializable message

        Returns:
            True if the payload was written to an open socket
        """

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """Check if a socket is currently open."""
