"""Constants for the Realtime Link integration."""

from __future__ import annotations

# Domain and basic constants
DOMAIN = "realtime_link"
MANUFACTURER = "Realtime Link"
DEFAULT_NAME = "Realtime Link"
MODEL = "WebSocket Client"

# Config entry keys
CONF_URL = "url"
CONF_USER_ID = "user_id"
CONF_USER_TYPE = "user_type"

# Options keys
CONF_BACKOFF = "backoff"
CONF_RECONNECT_DELAY = "reconnect_delay"
CONF_HEARTBEAT_INTERVAL = "heartbeat_interval"

# Backoff strategy names
BACKOFF_NONE = "none"
BACKOFF_FIXED = "fixed"
BACKOFF_EXPONENTIAL = "exponential"
BACKOFF_CHOICES = [BACKOFF_NONE, BACKOFF_FIXED, BACKOFF_EXPONENTIAL]

# Timing constants (in seconds)
DEFAULT_BACKOFF = BACKOFF_FIXED
DEFAULT_RECONNECT_DELAY = 3.0  # Matches the web client's retry timer
DEFAULT_HEARTBEAT_INTERVAL = 30.0  # Application-level ping
WS_CONNECT_TIMEOUT = 10.0
MAX_BACKOFF = 300.0  # 5 minutes

# Allowed URL schemes for the link
WS_SCHEMES = ("ws", "wss")
DEFAULT_WS_PATH = "/ws"

# Authentication message token (server only checks presence)
AUTH_TOKEN = "session-token"

# ============================================================================
# MESSAGE TYPES
# ============================================================================

MSG_AUTHENTICATE = "authenticate"
MSG_AUTHENTICATED = "authenticated"
MSG_CONNECTION = "connection"
MSG_PING = "ping"
MSG_PONG = "pong"

# Server pushes forwarded to the Home Assistant event bus
BROADCAST_MESSAGE_TYPES = [
    "project_update",
    "investment_update",
    "payment_proof_update",
    "sdg_update",
    "user_notification",
    "user_update",
    "carbon_update",
]

EVENT_PREFIX = DOMAIN

# ============================================================================
# STATUS INDICATOR
# ============================================================================

LABEL_CONNECTED = "Conectado"
LABEL_DISCONNECTED = "Desconectado"
ICON_CONNECTED = "mdi:wifi"
ICON_DISCONNECTED = "mdi:wifi-off"
RECONNECT_HINT = "Clique para reconectar"

# Services
SERVICE_RECONNECT = "reconnect"
SERVICE_SEND_MESSAGE = "send_message"

ATTR_ENTRY_ID = "entry_id"
ATTR_TYPE = "type"
ATTR_DATA = "data"
