"""Connection manager for the WebSocket link lifecycle.

This module implements connection lifecycle management with:
- At most one active or pending socket
- Generation tagging of connection attempts
- User-driven reconnect
- Optional automatic reconnect through a backoff strategy
- Synchronous publishing of every state change
"""

import asyncio
import logging
from typing import Any, Optional

from ...application.services import MessageRouter, StatusPublisher
from ...domain.exceptions import ConnectionAttemptSuperseded, ConnectionLost
from ...domain.interfaces import IConnectionManager, ITransport
from ...domain.strategies import BackoffStrategy, NoRetry
from ...domain.value_objects import (
    ConnectionState,
    ReconnectRequest,
    SOURCE_AUTO,
    SOURCE_USER,
)
from ..decorators import require_connection
from ..state_machines import ConnectionEvent, ConnectionStateMachine

_LOGGER = logging.getLogger(__name__)


class ConnectionManager(IConnectionManager):
    """Manages the WebSocket connection lifecycle.

    All methods are plain callbacks meant to run on the event loop, so
    transitions never interleave. Every attempt gets a new generation
    number; transport events carrying an older generation are dropped as
    superseded.

    Attributes:
        _transport: Underlying transport (owns the socket handle)
        _url: WebSocket URL
        _publisher: Observable state for the UI
        _router: Receiver of incoming messages
        _backoff: Automatic reconnect policy
        _generation: Tag of the current attempt
        _retry_attempt: Automatic retries since the last successful open

    Example:
        >>> manager = ConnectionManager(transport, "ws://example.org/ws")
        >>> manager.connect()
        >>> manager.connection_state
        'connecting'
        >>> manager.on_open(manager.generation)
        >>> manager.is_connected
        True
    """

    def __init__(
        self,
        transport: ITransport,
        url: str,
        publisher: Optional[StatusPublisher] = None,
        router: Optional[MessageRouter] = None,
        backoff: Optional[BackoffStrategy] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        """Initialize connection manager.

        Args:
            transport: Transport to manage
            url: WebSocket URL to connect to
            publisher: Status publisher (created if not given)
            router: Message router for incoming frames
            backoff: Automatic reconnect policy (default: no retry)
            loop: Loop used to schedule automatic retries
        """
        self._transport = transport
        self._url = url
        self._router = router
        self._backoff = backoff or NoRetry()
        self._loop = loop

        self._generation = 0
        self._retry_attempt = 0
        self._retry_handle: Optional[asyncio.TimerHandle] = None
        self._last_failure: Optional[ConnectionLost] = None
        self._request_seq = 0
        self._last_request_id = 0
        self._torn_down = False

        self._state_machine = ConnectionStateMachine()
        self._publisher = publisher or StatusPublisher(self._state_machine.state)

        # Every change is mirrored to subscribers
        self._state_machine.add_listener(self._publish)
        self._state_machine.on_state(ConnectionState.CONNECTED, self._on_connected)

    # ------------------------------------------------------------------
    # State callbacks
    # ------------------------------------------------------------------

    def _publish(
        self,
        new_state: ConnectionState,
        previous_state: ConnectionState,
        event: ConnectionEvent,
    ) -> None:
        self._publisher.publish(new_state)

    def _on_connected(self):
        """Callback when connection established."""
        _LOGGER.info("Connection established to %s", self._url)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def connect(self) -> None:
        """Open the connection unless it is connected or connecting.

        No-op in CONNECTED and CONNECTING. In RECONNECTING the pending
        attempt is dropped and a fresh one starts in CONNECTING.
        """
        if self._torn_down:
            _LOGGER.debug("Connect ignored: manager torn down")
            return

        if not self._state_machine.can_connect:
            _LOGGER.debug(
                "Connect ignored in state: %s", self._state_machine.state.name
            )
            return

        self._cancel_retry()
        if self._state_machine.is_connecting:
            # Pending reconnect attempt is superseded
            self._transport.close()
        generation = self._next_generation()
        self._state_machine.transition(ConnectionEvent.CONNECT)
        self._open(generation)

    def reconnect(self, source: str = SOURCE_USER) -> None:
        """Drop any existing socket and start a fresh attempt.

        Allowed in any state. Stays RECONNECTING until the new socket opens.

        Args:
            source: Who asked ("user", "service", "auto")
        """
        self.handle_reconnect_request(self._new_request(source))

    def handle_reconnect_request(self, request: ReconnectRequest) -> bool:
        """Consume a reconnect request.

        Each request is consumed at most once.

        Args:
            request: Request to consume

        Returns:
            True if a new attempt was started
        """
        if self._torn_down:
            _LOGGER.debug("Reconnect ignored: manager torn down")
            return False

        if request.request_id <= self._last_request_id:
            _LOGGER.debug("Reconnect request %d already consumed", request.request_id)
            return False
        self._last_request_id = request.request_id

        self._cancel_retry()
        if request.source != SOURCE_AUTO:
            self._retry_attempt = 0

        _LOGGER.info(
            "Reconnecting to %s (source: %s, state: %s)",
            self._url,
            request.source,
            self._state_machine.state.name,
        )

        self._transport.close()
        generation = self._next_generation()
        self._state_machine.transition(ConnectionEvent.RECONNECT)
        self._open(generation)
        return True

    def teardown(self) -> None:
        """Close the socket, cancel timers, release listeners. Idempotent."""
        if self._torn_down:
            return
        self._torn_down = True

        self._cancel_retry()
        # Invalidate any attempt still in flight
        self._generation += 1
        self._transport.close()

        self._state_machine.clear_listeners()
        self._state_machine.reset()
        self._publisher.clear()

        _LOGGER.debug("Connection manager for %s torn down", self._url)

    @require_connection("send message")
    async def async_send_message(self, payload: dict[str, Any]) -> bool:
        """Send a JSON message over the open connection.

        Args:
            payload: JSON-serializable message

        Returns:
            True if sent, False if not connected or the send failed
        """
        return await self._transport.send(payload)

    # ------------------------------------------------------------------
    # Transport events
    # ------------------------------------------------------------------

    def on_open(self, generation: int) -> None:
        """Socket for ``generation`` opened."""
        if not self._is_current(generation, "open"):
            return

        self._retry_attempt = 0
        self._last_failure = None
        self._state_machine.transition(ConnectionEvent.OPEN)

    def on_message(self, generation: int, raw: str) -> None:
        """Forward a text frame of the current attempt to the router."""
        if not self._is_current(generation, "message"):
            return

        if self._router is not None:
            self._router.dispatch(raw)

    def on_close(self, generation: int, reason: Optional[str] = None) -> None:
        """Socket for ``generation`` closed."""
        if not self._is_current(generation, "close"):
            return

        self._connection_lost(ConnectionEvent.CLOSE, ConnectionLost(generation, reason))

    def on_error(self, generation: int, error: BaseException) -> None:
        """Socket for ``generation`` failed."""
        if not self._is_current(generation, "error"):
            return

        reason = str(error) or type(error).__name__
        self._connection_lost(ConnectionEvent.ERROR, ConnectionLost(generation, reason))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _new_request(self, source: str) -> ReconnectRequest:
        self._request_seq += 1
        return ReconnectRequest(source, self._generation, self._request_seq)

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _open(self, generation: int) -> None:
        _LOGGER.debug("Opening %s (attempt %d)", self._url, generation)
        self._transport.open(self._url, generation, self)

    def _is_current(self, generation: int, event_name: str) -> bool:
        """Check event belongs to the current attempt."""
        if not self._torn_down and generation == self._generation:
            return True

        superseded = ConnectionAttemptSuperseded(generation, self._generation)
        _LOGGER.debug("Dropping %s event: %s", event_name, superseded)
        return False

    def _connection_lost(self, event: ConnectionEvent, failure: ConnectionLost) -> None:
        if not self._state_machine.transition(event):
            return

        self._last_failure = failure
        _LOGGER.warning("%s", failure)
        self._schedule_retry()

    def _schedule_retry(self) -> None:
        """Schedule automatic reconnect if the backoff strategy allows it."""
        self._retry_attempt += 1
        delay = self._backoff.delay(self._retry_attempt)

        if delay is None:
            if not isinstance(self._backoff, NoRetry):
                _LOGGER.info(
                    "Automatic reconnect stopped after %d attempts",
                    self._retry_attempt - 1,
                )
            return

        request = self._new_request(SOURCE_AUTO)
        loop = self._loop or asyncio.get_running_loop()
        self._retry_handle = loop.call_later(delay, self._run_retry, request)

        _LOGGER.debug(
            "Reconnect scheduled in %.1fs (attempt %d, %r)",
            delay,
            self._retry_attempt,
            self._backoff,
        )

    def _run_retry(self, request: ReconnectRequest) -> None:
        self._retry_handle = None
        if request.generation != self._generation:
            _LOGGER.debug(
                "Dropping automatic reconnect: %s",
                ConnectionAttemptSuperseded(request.generation, self._generation),
            )
            return
        self.handle_reconnect_request(request)

    def _cancel_retry(self) -> None:
        if self._retry_handle is not None:
            self._retry_handle.cancel()
            self._retry_handle = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def connection_state(self) -> str:
        """Get current connection state.

        Returns:
            State: "disconnected", "connecting", "connected", "reconnecting"
        """
        return self._state_machine.state.name.lower()

    @property
    def state(self) -> ConnectionState:
        """Get current ConnectionState."""
        return self._state_machine.state

    @property
    def is_connected(self) -> bool:
        """Check if connected.

        Returns:
            True if in CONNECTED state
        """
        return self._state_machine.is_connected

    @property
    def generation(self) -> int:
        """Tag of the current attempt."""
        return self._generation

    @property
    def publisher(self) -> StatusPublisher:
        """Status publisher fed by this manager."""
        return self._publisher

    @property
    def last_failure(self) -> Optional[ConnectionLost]:
        """Most recent ConnectionLost since the last successful open."""
        return self._last_failure

    @property
    def retry_pending(self) -> bool:
        """Check if an automatic reconnect is scheduled."""
        return self._retry_handle is not None

    @property
    def url(self) -> str:
        """WebSocket URL."""
        return self._url

    def get_failure_info(self) -> dict:
        """Get current failure tracking info.

        Returns:
            Dictionary with connection statistics

        Example:
            >>> info = manager.get_failure_info()
            >>> print(f"Attempt: {info['generation']}")
        """
        return {
            "state": self.connection_state,
            "generation": self._generation,
            "retry_attempt": self._retry_attempt,
            "retry_pending": self.retry_pending,
            "last_failure": str(self._last_failure) if self._last_failure else None,
            "backoff": repr(self._backoff),
        }
