"""Observable bridge from the connection manager to UI subscribers."""

from __future__ import annotations

import logging
from typing import Callable, List

from ...domain.value_objects import ConnectionState

_LOGGER = logging.getLogger(__name__)

StatusListener = Callable[[ConnectionState], None]


class _Subscription:
    """One registered listener."""

    __slots__ = ("listener", "active")

    def __init__(self, listener: StatusListener):
        self.listener = listener
        self.active = True


class StatusPublisher:
    """Publish ConnectionState changes to subscribers.

    Guarantees:
    - Listeners are invoked synchronously, in subscription order
    - current_state() already reflects a publish when listeners run
    - Unsubscribing during a notification neither crashes nor skips the
      listeners that are still subscribed
    - A failing listener is logged and does not stop the others

    Example:
        >>> publisher = StatusPublisher()
        >>> seen = []
        >>> unsubscribe = publisher.subscribe(seen.append)
        >>> publisher.publish(ConnectionState.CONNECTING)
        >>> seen
        [<ConnectionState.CONNECTING: 1>]
        >>> unsubscribe()
    """

    def __init__(self, initial_state: ConnectionState = ConnectionState.DISCONNECTED):
        """Initialize publisher.

        Args:
            initial_state: State reported before the first publish
        """
        self._state = initial_state
        self._subscriptions: List[_Subscription] = []

    def current_state(self) -> ConnectionState:
        """Get the most recently published state."""
        return self._state

    @property
    def is_connected(self) -> bool:
        """Check if the last published state is CONNECTED."""
        return self._state == ConnectionState.CONNECTED

    def subscribe(self, listener: StatusListener) -> Callable[[], None]:
        """Register listener for state changes.

        Args:
            listener: Called with the new ConnectionState

        Returns:
            Function removing this subscription (safe to call twice)
        """
        subscription = _Subscription(listener)
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            if not subscription.active:
                return
            subscription.active = False
            self._subscriptions.remove(subscription)

        return unsubscribe

    def publish(self, state: ConnectionState) -> None:
        """Store state and notify all active subscribers.

        Args:
            state: New connection state
        """
        self._state = state

        for subscription in list(self._subscriptions):
            if not subscription.active:
                continue
            try:
                subscription.listener(state)
            except Exception as err:
                _LOGGER.error(
                    "Error in status listener %r: %s", subscription.listener, err
                )

    def clear(self) -> None:
        """Drop all subscribers."""
        for subscription in self._subscriptions:
            subscription.active = False
        self._subscriptions.clear()

    def __repr__(self) -> str:
        return (
            f"StatusPublisher(state={self._state.name}, "
            f"subscribers={len(self._subscriptions)})"
        )
