"""LinkMessage value object.

Represents one JSON message pushed by the realtime server.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from ..exceptions import MessageDecodeError


@dataclass(frozen=True)
class LinkMessage:
    """Decoded server message.

    Server frames look like::

        {"type": "project_update", "data": {...}, "timestamp": "..."}

    ``connection`` and ``authenticated`` frames carry a top-level
    ``message`` string instead of (or next to) ``data``.

    Attributes:
        type: Message type
        data: Message payload (defaults to empty dict)
        timestamp: Server timestamp as sent, if any
        message: Human-readable server text, if any
    """

    type: str
    data: Any = field(default_factory=dict)
    timestamp: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def from_json(cls, raw: str) -> "LinkMessage":
        """Decode a raw text frame.

        Args:
            raw: Text frame received from the socket

        Returns:
            LinkMessage

        Raises:
            MessageDecodeError: If the frame is not a JSON object with a
                string ``type``

        Example:
            >>> LinkMessage.from_json('{"type": "pong"}').type
            'pong'
        """
        try:
            decoded = json.loads(raw)
        except (TypeError, ValueError) as err:
            raise MessageDecodeError(f"Invalid JSON frame: {err}") from err

        if not isinstance(decoded, dict):
            raise MessageDecodeError("Frame is not a JSON object")

        message_type = decoded.get("type")
        if not isinstance(message_type, str) or not message_type:
            raise MessageDecodeError("Frame has no message type")

        data = decoded.get("data")
        return cls(
            type=message_type,
            data={} if data is None else data,
            timestamp=decoded.get("timestamp"),
            message=decoded.get("message"),
        )

    @property
    def text(self) -> Optional[str]:
        """Server text from ``data.message`` or top-level ``message``."""
        if isinstance(self.data, dict) and self.data.get("message"):
            return self.data["message"]
        return self.message
