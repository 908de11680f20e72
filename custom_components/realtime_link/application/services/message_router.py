"""Service for dispatching incoming server messages by type."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from ...domain.exceptions import MessageDecodeError
from ...domain.value_objects import LinkMessage

_LOGGER = logging.getLogger(__name__)

MessageHandler = Callable[[LinkMessage], None]


class MessageRouter:
    """Decode raw frames and route them to per-type handlers.

    Frames that cannot be decoded are logged and dropped; handler errors
    are logged and never propagate back into the transport.

    Example:
        >>> router = MessageRouter()
        >>> router.register("pong", lambda message: None)
        >>> router.dispatch('{"type": "pong"}')
        True
    """

    def __init__(self):
        """Initialize router with no handlers."""
        self._handlers: Dict[str, List[MessageHandler]] = {}
        self._received = 0
        self._dropped = 0

    def register(self, message_type: str, handler: MessageHandler) -> Callable[[], None]:
        """Register handler for a message type.

        Args:
            message_type: Value of the frame's "type" field
            handler: Called with the decoded LinkMessage

        Returns:
            Function removing the handler
        """
        handlers = self._handlers.setdefault(message_type, [])
        handlers.append(handler)

        def remove() -> None:
            if handler in handlers:
                handlers.remove(handler)

        return remove

    def dispatch(self, raw: str) -> bool:
        """Decode and route one frame.

        Args:
            raw: Raw text frame

        Returns:
            True if at least one handler received the message
        """
        try:
            message = LinkMessage.from_json(raw)
        except MessageDecodeError as err:
            self._dropped += 1
            _LOGGER.error("Failed to parse WebSocket message: %s", err)
            return False

        self._received += 1
        return self.route(message)

    def route(self, message: LinkMessage) -> bool:
        """Route an already decoded message."""
        handlers = list(self._handlers.get(message.type, ()))
        if not handlers:
            _LOGGER.debug("Unknown WebSocket message type: %s", message.type)
            return False

        for handler in handlers:
            try:
                handler(message)
            except Exception as err:
                _LOGGER.error(
                    "Error handling %s message: %s", message.type, err, exc_info=True
                )
        return True

    def get_stats(self) -> dict:
        """Get message counters.

        Returns:
            Dictionary with received/dropped counts and registered types
        """
        return {
            "received": self._received,
            "dropped": self._dropped,
            "types": sorted(t for t, h in self._handlers.items() if h),
        }
