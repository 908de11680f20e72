"""Error handling decorator for transport writes."""

import asyncio
import logging
from functools import wraps
from typing import Any, Callable

from aiohttp import ClientError


def handle_transport_errors(operation_name: str, default_return: Any = None):
    """Log a failed transport write and return ``default_return`` instead.

    Cancellation always propagates. A timeout or a socket-level failure is
    an expected condition on a flaky link and is logged as a warning;
    anything else is logged with its traceback.

    Args:
        operation_name: Human-readable operation name for logging
        default_return: Value returned when the write failed

    Example:
        @handle_transport_errors("WebSocket send", default_return=False)
        async def send(self, payload: dict) -> bool:
            await self._ws.send_json(payload)
            return True
    """

    def decorator(func: Callable):
        log = logging.getLogger(func.__module__)

        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except asyncio.CancelledError:
                raise
            except asyncio.TimeoutError:
                log.warning("%s timed out", operation_name)
            except (ClientError, ConnectionError) as err:
                log.warning("%s failed: %s", operation_name, err)
            except Exception as err:
                log.error(
                    "%s unexpected error: %s", operation_name, err, exc_info=True
                )
            return default_return

        return wrapper

    return decorator
