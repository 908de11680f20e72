"""Custom exceptions for the Realtime Link integration.

This module defines domain-specific exceptions that represent expected
error conditions of the managed WebSocket link. None of them are fatal:
failures degrade to a visible "Desconectado" status with a manual
recovery path.
"""

from __future__ import annotations

from typing import Optional


class RealtimeLinkError(Exception):
    """Base class for all Realtime Link errors."""


class ConnectionLost(RealtimeLinkError):
    """The managed connection closed or failed (recoverable).

    Never raised across the manager boundary. The connection manager
    builds one when the transport reports ``close`` or ``error`` for the
    current attempt and keeps it as ``last_failure``.

    Example:
        >>> failure = ConnectionLost(3, "server closed")
        >>> failure.generation
        3
    """

    def __init__(self, generation: int, reason: Optional[str] = None):
        self.generation = generation
        self.reason = reason or "connection closed"
        super().__init__(f"Connection lost (attempt {generation}): {self.reason}")


class ConnectionAttemptSuperseded(RealtimeLinkError):
    """A late event arrived for an attempt that is no longer current.

    Silently dropped by the connection manager; only logged at debug level.
    """

    def __init__(self, generation: int, current: int):
        self.generation = generation
        self.current = current
        super().__init__(
            f"Attempt {generation} superseded by attempt {current}"
        )


class MessageDecodeError(RealtimeLinkError):
    """Incoming frame could not be decoded into a message."""
