"""Domain value objects."""

from .connection_state import ConnectionState
from .link_message import LinkMessage
from .reconnect_request import (
    ReconnectRequest,
    SOURCE_AUTO,
    SOURCE_SERVICE,
    SOURCE_USER,
)

__all__ = [
    "ConnectionState",
    "LinkMessage",
    "ReconnectRequest",
    "SOURCE_AUTO",
    "SOURCE_SERVICE",
    "SOURCE_USER",
]
