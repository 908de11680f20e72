"""ReconnectRequest value object."""

from __future__ import annotations

from dataclasses import dataclass

SOURCE_USER = "user"
SOURCE_SERVICE = "service"
SOURCE_AUTO = "auto"


@dataclass(frozen=True)
class ReconnectRequest:
    """Ephemeral reconnect command.

    Raised by the user (button, service call) or by failure handling
    (automatic retry). Carries the generation that was current when it was
    issued; the connection manager consumes each request at most once.

    Attributes:
        source: Who issued the request ("user", "service", "auto")
        generation: Current generation at issuance
        request_id: Sequence number assigned by the issuing manager
    """

    source: str
    generation: int
    request_id: int
