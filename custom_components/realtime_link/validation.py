"""Validation helpers for Realtime Link configuration."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

import voluptuous as vol

from .const import DEFAULT_WS_PATH, WS_SCHEMES

# Page protocol -> socket protocol, as the web client derives it
_HTTP_TO_WS = {"http": "ws", "https": "wss"}


def normalize_ws_url(value: str) -> str:
    """Validate and normalize a WebSocket URL.

    Accepts ws:// and wss:// URLs. http:// and https:// URLs of the web
    application are mapped to ws:// and wss://. A missing path defaults to
    ``/ws``.

    Args:
        value: URL entered by the user

    Returns:
        Normalized URL

    Raises:
        vol.Invalid: If the value is not a usable WebSocket URL

    Example:
        >>> normalize_ws_url("https://example.org")
        'wss://example.org/ws'
    """
    if not isinstance(value, str) or not value.strip():
        raise vol.Invalid("URL is required")

    parts = urlsplit(value.strip())
    scheme = _HTTP_TO_WS.get(parts.scheme.lower(), parts.scheme.lower())

    if scheme not in WS_SCHEMES:
        raise vol.Invalid(f"Unsupported URL scheme: {parts.scheme or '(none)'}")
    if not parts.hostname:
        raise vol.Invalid("URL has no host")

    path = parts.path or DEFAULT_WS_PATH
    return urlunsplit((scheme, parts.netloc, path, parts.query, ""))


WS_URL = vol.All(str, normalize_ws_url)
