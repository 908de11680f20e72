"""WebSocket transport implementations.

This module contains the transport and the connection manager that owns
it.
"""

from .connection_manager import ConnectionManager
from .websocket_transport import WebSocketTransport

__all__ = [
    "ConnectionManager",
    "WebSocketTransport",
]
