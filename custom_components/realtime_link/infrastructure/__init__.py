"""Infrastructure layer for the Realtime Link integration.

The infrastructure layer contains implementations of domain interfaces:
- Connection state machine
- WebSocket transport (aiohttp)
- Connection manager
- Error handling decorators

This layer depends on:
- Domain layer (interfaces and value objects)
- External libraries (aiohttp, homeassistant)

But domain layer does NOT depend on infrastructure.
"""
