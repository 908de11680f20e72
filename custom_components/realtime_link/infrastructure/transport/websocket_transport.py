"""WebSocket transport implementation.

This module implements the ITransport interface on top of the aiohttp
client shipped with Home Assistant. Each ``open`` runs one connection
task; every event it reports is tagged with the generation it was
opened for.
"""

import asyncio
import logging
from typing import Any, Optional

from aiohttp import ClientError, ClientSession, ClientWebSocketResponse, WSMsgType

from ...const import DEFAULT_HEARTBEAT_INTERVAL, MSG_PING, WS_CONNECT_TIMEOUT
from ...domain.interfaces import ITransport, ITransportListener
from ..decorators import handle_transport_errors

_LOGGER = logging.getLogger(__name__)


class WebSocketTransport(ITransport):
    """aiohttp WebSocket transport.

    This implementation handles:
    - Connecting with a timeout
    - Optional authenticate message once open
    - Application-level heartbeat ({"type": "ping"})
    - Reporting text frames, close and error to the listener

    Attributes:
        _session: Shared aiohttp client session
        _ws: Current socket (None when closed)
        _task: Task running the current attempt
        _closing: Cancelled attempts whose cleanup has not finished
        _auth_payload: Message sent right after the socket opens

    Example:
        >>> transport = WebSocketTransport(async_get_clientsession(hass))
        >>> transport.open("wss://example.org/ws", 1, manager)
        >>> await transport.send({"type": "ping"})
        >>> transport.close()
    """

    def __init__(
        self,
        session: ClientSession,
        auth_payload: Optional[dict[str, Any]] = None,
        heartbeat_interval: Optional[float] = DEFAULT_HEARTBEAT_INTERVAL,
        connect_timeout: float = WS_CONNECT_TIMEOUT,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        """Initialize WebSocket transport.

        Args:
            session: aiohttp client session
            auth_payload: Optional message sent once the socket is open
            heartbeat_interval: Seconds between pings (None or 0 disables)
            connect_timeout: Seconds allowed for the handshake
            loop: Loop to run connection tasks on (default: running loop)
        """
        self._session = session
        self._auth_payload = auth_payload
        self._heartbeat_interval = heartbeat_interval
        self._connect_timeout = connect_timeout
        self._loop = loop

        self._ws: Optional[ClientWebSocketResponse] = None
        self._task: Optional[asyncio.Task] = None
        self._closing: set[asyncio.Task] = set()

    def open(self, url: str, generation: int, listener: ITransportListener) -> None:
        """Start a connection task for ``generation``."""
        self.close()

        loop = self._loop or asyncio.get_running_loop()
        self._task = loop.create_task(self._run(url, generation, listener))
        _LOGGER.debug("Connecting to WebSocket: %s (attempt %d)", url, generation)

    def close(self) -> None:
        """Cancel the current attempt. Idempotent."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            # Kept until its cleanup (socket close) has run
            self._closing.add(task)
            task.add_done_callback(self._closing.discard)

    async def wait_closed(self) -> None:
        """Close and wait until every cancelled attempt has finished."""
        self.close()
        if self._closing:
            await asyncio.gather(*self._closing, return_exceptions=True)

    @handle_transport_errors("WebSocket send", default_return=False)
    async def send(self, payload: dict[str, Any]) -> bool:
        """Send JSON payload over the open socket.

        Returns:
            True if written, False if there is no open socket or sending failed
        """
        ws = self._ws
        if ws is None or ws.closed:
            _LOGGER.debug("Cannot send %s: no open socket", payload.get("type"))
            return False

        await ws.send_json(payload)
        return True

    @property
    def is_open(self) -> bool:
        """Check if a socket is currently open."""
        return self._ws is not None and not self._ws.closed

    async def _run(self, url: str, generation: int, listener: ITransportListener) -> None:
        """Connect, pump frames, report the outcome."""
        try:
            async with asyncio.timeout(self._connect_timeout):
                ws = await self._session.ws_connect(url)
        except (ClientError, asyncio.TimeoutError, OSError) as err:
            _LOGGER.debug("WebSocket connect to %s failed: %s", url, err)
            listener.on_error(generation, err)
            return

        self._ws = ws
        heartbeat: Optional[asyncio.Task] = None
        try:
            listener.on_open(generation)

            if self._auth_payload:
                await self.send(self._auth_payload)

            if self._heartbeat_interval:
                heartbeat = asyncio.get_running_loop().create_task(
                    self._heartbeat(ws)
                )

            async for msg in ws:
                if msg.type == WSMsgType.TEXT:
                    listener.on_message(generation, msg.data)
                elif msg.type == WSMsgType.ERROR:
                    error = ws.exception() or ClientError("WebSocket error frame")
                    listener.on_error(generation, error)
                    return
                else:
                    _LOGGER.debug("Ignoring WebSocket frame of type %s", msg.type)

            listener.on_close(generation, f"closed with code {ws.close_code}")
        except (ClientError, asyncio.TimeoutError, OSError) as err:
            listener.on_error(generation, err)
        finally:
            if heartbeat is not None:
                heartbeat.cancel()
            if self._ws is ws:
                self._ws = None
            await ws.close()

    async def _heartbeat(self, ws: ClientWebSocketResponse) -> None:
        """Ping the server while the socket is open."""
        while not ws.closed:
            await asyncio.sleep(self._heartbeat_interval)
            if ws.closed:
                break
            await self.send({"type": MSG_PING})
