"""Domain interfaces for the Realtime Link integration.

This module defines the contracts (interfaces) that infrastructure implementations
must fulfill. Using these interfaces enables:
- Dependency Inversion: connection policy doesn't depend on the socket library
- Testability: Easy to fake the transport in tests
- Flexibility: Swap implementations without changing lifecycle logic
"""

from .i_transport import ITransport, ITransportListener
from .i_connection_manager import IConnectionManager

__all__ = [
    "ITransport",
    "ITransportListener",
    "IConnectionManager",
]
