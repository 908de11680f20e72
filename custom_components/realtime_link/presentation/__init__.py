"""Presentation layer for Home Assistant integration.

The presentation layer is the outermost layer that:
- Renders the connection state for the UI
- Wires all dependencies for a config entry

This layer depends on application and domain layers but NOT vice versa.
"""
