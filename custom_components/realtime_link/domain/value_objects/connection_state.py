"""ConnectionState value object.

Represents the lifecycle state of the managed WebSocket link.
"""

from enum import Enum, auto


class ConnectionState(Enum):
    """Connection states.

    A single authoritative value exists per connection manager. Only the
    manager's event handling moves it; everything else reads it.

    State Transitions:
        DISCONNECTED/RECONNECTING -> CONNECTING (connect)
        Any state -> RECONNECTING (reconnect)
        CONNECTING/RECONNECTING -> CONNECTED (socket open)
        CONNECTING/CONNECTED/RECONNECTING -> DISCONNECTED (close, error)
    """

    CONNECTING = auto()
    CONNECTED = auto()
    DISCONNECTED = auto()
    RECONNECTING = auto()

    @property
    def is_pending(self) -> bool:
        """Check if an attempt is in flight.

        Example:
            >>> ConnectionState.RECONNECTING.is_pending
            True
            >>> ConnectionState.CONNECTED.is_pending
            False
        """
        return self in (ConnectionState.CONNECTING, ConnectionState.RECONNECTING)
