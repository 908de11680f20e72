"""Connection state machine for explicit state management."""

import logging
from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Tuple

from ...domain.value_objects.connection_state import ConnectionState

_LOGGER = logging.getLogger(__name__)


class ConnectionEvent(Enum):
    """Connection events that trigger state transitions."""

    CONNECT = auto()
    RECONNECT = auto()
    OPEN = auto()
    CLOSE = auto()
    ERROR = auto()


StateChangeListener = Callable[[ConnectionState, ConnectionState, ConnectionEvent], None]


def _build_transitions() -> Dict[Tuple[ConnectionState, ConnectionEvent], ConnectionState]:
    """Build the full (state, event) -> state table.

    Every pair is present. Pairs not listed as changes map to the current
    state (self-loop).
    """
    changes = {
        (ConnectionState.DISCONNECTED, ConnectionEvent.CONNECT): ConnectionState.CONNECTING,
        (ConnectionState.RECONNECTING, ConnectionEvent.CONNECT): ConnectionState.CONNECTING,
        (ConnectionState.CONNECTING, ConnectionEvent.OPEN): ConnectionState.CONNECTED,
        (ConnectionState.RECONNECTING, ConnectionEvent.OPEN): ConnectionState.CONNECTED,
    }
    for state in ConnectionState:
        changes[(state, ConnectionEvent.RECONNECT)] = ConnectionState.RECONNECTING
        if state is not ConnectionState.DISCONNECTED:
            changes[(state, ConnectionEvent.CLOSE)] = ConnectionState.DISCONNECTED
            changes[(state, ConnectionEvent.ERROR)] = ConnectionState.DISCONNECTED

    return {
        (state, event): changes.get((state, event), state)
        for state in ConnectionState
        for event in ConnectionEvent
    }


class ConnectionStateMachine:
    """State machine for connection lifecycle management.

    The transition function is total: every (state, event) pair has a next
    state. Pairs that do not change state are self-loops and do not notify
    listeners.

    Transitions that change state:
        DISCONNECTED -> CONNECTING (on CONNECT)
        RECONNECTING -> CONNECTING (on CONNECT)
        any -> RECONNECTING (on RECONNECT)
        CONNECTING -> CONNECTED (on OPEN)
        RECONNECTING -> CONNECTED (on OPEN)
        CONNECTING/CONNECTED/RECONNECTING -> DISCONNECTED (on CLOSE, ERROR)

    There is no way to set the state directly; only events move it.

    Example:
        >>> sm = ConnectionStateMachine()
        >>> sm.transition(ConnectionEvent.CONNECT)
        True
        >>> sm.state
        <ConnectionState.CONNECTING: 1>
        >>> sm.transition(ConnectionEvent.OPEN)
        True
        >>> sm.is_connected
        True
    """

    TRANSITIONS = _build_transitions()

    def __init__(self):
        """Initialize state machine in DISCONNECTED state."""
        self._state = ConnectionState.DISCONNECTED
        self._previous_state: Optional[ConnectionState] = None

        # Callbacks for state entry
        self._on_state_change: Dict[ConnectionState, Callable] = {}
        self._listeners: List[StateChangeListener] = []

    @property
    def state(self) -> ConnectionState:
        """Get current state."""
        return self._state

    @property
    def previous_state(self) -> Optional[ConnectionState]:
        """Get state before the last change."""
        return self._previous_state

    @property
    def is_connected(self) -> bool:
        """Check if currently connected."""
        return self._state == ConnectionState.CONNECTED

    @property
    def is_connecting(self) -> bool:
        """Check if connection in progress."""
        return self._state in (ConnectionState.CONNECTING, ConnectionState.RECONNECTING)

    @property
    def can_connect(self) -> bool:
        """Check if connect() starts a new attempt (not CONNECTED or CONNECTING)."""
        return self._state in (ConnectionState.DISCONNECTED, ConnectionState.RECONNECTING)

    @staticmethod
    def next_state(state: ConnectionState, event: ConnectionEvent) -> ConnectionState:
        """Pure transition function.

        Example:
            >>> ConnectionStateMachine.next_state(
            ...     ConnectionState.CONNECTED, ConnectionEvent.CLOSE
            ... ).name
            'DISCONNECTED'
        """
        return ConnectionStateMachine.TRANSITIONS[(state, event)]

    def transition(self, event: ConnectionEvent) -> bool:
        """Apply event.

        Args:
            event: Event triggering transition

        Returns:
            True if the state changed, False for a self-loop

        Example:
            >>> sm = ConnectionStateMachine()
            >>> sm.transition(ConnectionEvent.OPEN)
            False
            >>> sm.state.name
            'DISCONNECTED'
        """
        new_state = self.next_state(self._state, event)

        if new_state == self._state:
            _LOGGER.debug(
                "No state change: %s + %s",
                self._state.name,
                event.name,
            )
            return False

        self._change_state(new_state, event)
        return True

    def _change_state(self, new_state: ConnectionState, event: ConnectionEvent):
        """Change to new state and invoke callbacks.

        Args:
            new_state: State to transition to
            event: Event that triggered transition
        """
        self._previous_state = self._state
        self._state = new_state

        _LOGGER.debug(
            "Connection state: %s -> %s (event: %s)",
            self._previous_state.name,
            new_state.name,
            event.name,
        )

        for listener in list(self._listeners):
            try:
                listener(new_state, self._previous_state, event)
            except Exception as err:
                _LOGGER.error("Error in state change listener: %s", err)

        # Invoke state entry callback
        if new_state in self._on_state_change:
            try:
                self._on_state_change[new_state]()
            except Exception as err:
                _LOGGER.error("Error in state change callback: %s", err)

    def on_state(self, state: ConnectionState, callback: Callable):
        """Register callback for state entry.

        Args:
            state: State to watch
            callback: Function to call on state entry (no args)

        Example:
            >>> sm = ConnectionStateMachine()
            >>> sm.on_state(ConnectionState.CONNECTED, lambda: print("Connected!"))
        """
        self._on_state_change[state] = callback

    def add_listener(self, listener: StateChangeListener) -> None:
        """Register listener called with (new_state, previous_state, event)."""
        self._listeners.append(listener)

    def clear_listeners(self) -> None:
        """Drop all registered callbacks and listeners."""
        self._listeners.clear()
        self._on_state_change.clear()

    def reset(self):
        """Reset to initial DISCONNECTED state without notifying."""
        self._state = ConnectionState.DISCONNECTED
        self._previous_state = None

    def __str__(self) -> str:
        """String representation."""
        return f"ConnectionStateMachine(state={self._state.name})"

    def __repr__(self) -> str:
        """Developer representation."""
        return f"ConnectionStateMachine(state={self._state!r}, previous={self._previous_state!r})"
