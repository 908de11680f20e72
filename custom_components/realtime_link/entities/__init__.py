"""Home Assistant entities for the Realtime Link integration."""

from .connectivity_sensor import LinkConnectivitySensor
from .link_base import RealtimeLinkEntity
from .reconnect_button import ReconnectButton

__all__ = [
    "LinkConnectivitySensor",
    "RealtimeLinkEntity",
    "ReconnectButton",
]
