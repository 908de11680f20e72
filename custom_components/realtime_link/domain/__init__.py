"""Domain layer for the Realtime Link integration.

This layer contains:
- Interfaces: transport and connection manager contracts
- Value Objects: ConnectionState, LinkMessage, ReconnectRequest
- Strategies: automatic reconnect delays
- Exceptions: ConnectionLost, ConnectionAttemptSuperseded

The domain layer has ZERO dependencies on external libraries (except Python stdlib).
"""
