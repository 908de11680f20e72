"""Status indicator: renders the link state and guards manual reconnect."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from ..application.services import StatusPublisher
from ..const import (
    ICON_CONNECTED,
    ICON_DISCONNECTED,
    LABEL_CONNECTED,
    LABEL_DISCONNECTED,
    RECONNECT_HINT,
)
from ..domain.value_objects import ConnectionState

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusView:
    """What the UI shows for one ConnectionState."""

    label: str
    icon: str
    is_connected: bool
    reconnect_available: bool
    hint: str | None = None


def render_status(state: ConnectionState) -> StatusView:
    """Render a ConnectionState.

    Pure function. Only CONNECTED renders as "Conectado". The reconnect
    affordance is offered only in DISCONNECTED; while an attempt is pending
    (CONNECTING, RECONNECTING) clicks are ignored to avoid connection churn.

    Example:
        >>> render_status(ConnectionState.CONNECTED).label
        'Conectado'
        >>> render_status(ConnectionState.DISCONNECTED).reconnect_available
        True
    """
    if state == ConnectionState.CONNECTED:
        return StatusView(
            label=LABEL_CONNECTED,
            icon=ICON_CONNECTED,
            is_connected=True,
            reconnect_available=False,
        )

    actionable = state == ConnectionState.DISCONNECTED
    return StatusView(
        label=LABEL_DISCONNECTED,
        icon=ICON_DISCONNECTED,
        is_connected=False,
        reconnect_available=actionable,
        hint=RECONNECT_HINT if actionable else None,
    )


class StatusIndicator:
    """Reads published state and issues reconnect commands.

    Owns no state: the view is always derived from the publisher.
    """

    def __init__(self, publisher: StatusPublisher, reconnect: Callable[[], None]):
        """Initialize indicator.

        Args:
            publisher: Source of the current ConnectionState
            reconnect: Command run when the affordance is used
        """
        self._publisher = publisher
        self._reconnect = reconnect

    @property
    def view(self) -> StatusView:
        """Current rendering."""
        return render_status(self._publisher.current_state())

    def press(self) -> bool:
        """Use the reconnect affordance.

        Returns:
            True if reconnect was issued, False if the affordance is not
            interactive in the current state
        """
        state = self._publisher.current_state()
        if not render_status(state).reconnect_available:
            _LOGGER.debug("Reconnect click ignored in state %s", state.name)
            return False

        self._reconnect()
        return True
