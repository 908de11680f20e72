"""Fake transport for testing without a WebSocket server.

This fake implements ITransport interface for testing.
"""

from typing import Any, Dict, List, Optional, Tuple

from custom_components.realtime_link.domain.interfaces import (
    ITransport,
    ITransportListener,
)


class FakeTransport(ITransport):
    """Fake WebSocket transport for testing.

    ``open`` only records the attempt; tests drive the outcome with the
    ``fire_*`` helpers, which report events to the listener exactly as the
    real transport does (tagged with a generation).

    Attributes:
        _opens: History of open() calls as (url, generation, listener)
        _close_count: Number of close() calls
        _sent: Payloads accepted by send()
        _open: Whether a socket is "open"

    Example:
        >>> transport = FakeTransport()
        >>> manager = ConnectionManager(transport, "ws://test/ws")
        >>> manager.connect()
        >>> transport.fire_open()
        >>> assert manager.is_connected
    """

    def __init__(self):
        """Initialize fake transport."""
        self._opens: List[Tuple[str, int, ITransportListener]] = []
        self._close_count = 0
        self._sent: List[Dict[str, Any]] = []
        self._open = False
        self._fail_next_send = False

    def open(self, url: str, generation: int, listener: ITransportListener) -> None:
        """Record connection attempt."""
        self._open = False
        self._opens.append((url, generation, listener))

    def close(self) -> None:
        """Simulate close."""
        self._close_count += 1
        self._open = False

    async def send(self, payload: Dict[str, Any]) -> bool:
        """Record payload if open."""
        if not self._open:
            return False

        if self._fail_next_send:
            self._fail_next_send = False
            return False

        self._sent.append(payload)
        return True

    @property
    def is_open(self) -> bool:
        """Check if open."""
        return self._open

    # Test helper methods

    @property
    def open_count(self) -> int:
        """Number of open() calls."""
        return len(self._opens)

    @property
    def close_count(self) -> int:
        """Number of close() calls."""
        return self._close_count

    @property
    def last_generation(self) -> Optional[int]:
        """Generation of the latest open() call."""
        return self._opens[-1][1] if self._opens else None

    @property
    def last_url(self) -> Optional[str]:
        """URL of the latest open() call."""
        return self._opens[-1][0] if self._opens else None

    def _listener(self) -> ITransportListener:
        if not self._opens:
            raise RuntimeError("open() was never called")
        return self._opens[-1][2]

    def fire_open(self, generation: Optional[int] = None) -> None:
        """Report socket open (defaults to the latest attempt)."""
        self._open = True
        self._listener().on_open(
            self.last_generation if generation is None else generation
        )

    def fire_message(self, raw: str, generation: Optional[int] = None) -> None:
        """Report a text frame."""
        self._listener().on_message(
            self.last_generation if generation is None else generation, raw
        )

    def fire_close(
        self, reason: Optional[str] = None, generation: Optional[int] = None
    ) -> None:
        """Report socket close."""
        self._open = False
        self._listener().on_close(
            self.last_generation if generation is None else generation, reason
        )

    def fire_error(
        self, error: Optional[BaseException] = None, generation: Optional[int] = None
    ) -> None:
        """Report socket error."""
        self._open = False
        self._listener().on_error(
            self.last_generation if generation is None else generation,
            error or ConnectionError("Simulated error"),
        )

    def get_sent(self) -> List[Dict[str, Any]]:
        """Get payloads accepted by send()."""
        return self._sent.copy()

    def fail_next_send(self) -> None:
        """Make next send() return False."""
        self._fail_next_send = True

    def reset(self) -> None:
        """Reset transport to initial state."""
        self._opens.clear()
        self._close_count = 0
        self._sent.clear()
        self._open = False
        self._fail_next_send = False
