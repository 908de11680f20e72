"""Application services."""

from .message_router import MessageRouter
from .status_publisher import StatusPublisher

__all__ = [
    "MessageRouter",
    "StatusPublisher",
]
