"""Application layer for the Realtime Link integration.

This layer contains the services that sit between the connection manager
and the Home Assistant entities:
- StatusPublisher: observable ConnectionState
- MessageRouter: decoding and dispatching of server messages
"""
