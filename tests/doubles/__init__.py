"""Test doubles for unit testing.

Test doubles are fake implementations of interfaces used for testing.
They're faster and more reliable than mocking, and they implement the
actual interface contracts.

We primarily use Fakes because they:
- Actually implement the interface
- Can be reused across many tests
- Let tests drive transport events synchronously

Example:
    >>> from tests.doubles.fake_transport import FakeTransport
    >>> transport = FakeTransport()
    >>> manager = ConnectionManager(transport, "ws://test/ws")
    >>> manager.connect()
    >>> transport.fire_open()
"""
