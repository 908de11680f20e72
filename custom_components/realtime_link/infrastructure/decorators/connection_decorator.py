"""Connection management decorators."""

import logging
from functools import wraps
from typing import Any, Callable

_LOGGER = logging.getLogger(__name__)


def require_connection(
    operation_name: str = "operation",
    default_return: Any = False,
    state_attr: str = "is_connected",
):
    """Decorator to skip an async method while the link is down.

    The decorated method's instance must expose a boolean attribute named
    by ``state_attr``. When it is false the call is not made, a warning is
    logged and ``default_return`` is returned.

    Args:
        operation_name: Human-readable operation name for logging
        default_return: Value returned when not connected
        state_attr: Name of the instance attribute holding connection state

    Example:
        @require_connection("send message")
        async def async_send_message(self, payload: dict) -> bool:
            # Connection is guaranteed - just do work
            return await self._transport.send(payload)
    """

    def decorator(func: Callable):
        @wraps(func)
        async def wrapper(self, *args, **kwargs):
            if not getattr(self, state_attr, False):
                _LOGGER.warning(
                    "Cannot %s: WebSocket not connected", operation_name
                )
                return default_return

            return await func(self, *args, **kwargs)

        return wrapper

    return decorator
