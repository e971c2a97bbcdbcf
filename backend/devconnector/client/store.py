"""Store — single container for client state.

Invariants:
    - state only changes through dispatch(action)
    - Listeners run synchronously after each dispatch, in subscription order
    - Created once per client session and passed explicitly (no global instance)
"""

import logging
from collections.abc import Callable

from devconnector.client.action_types import Action
from devconnector.client.reducers import root_reducer
from devconnector.client.state import AppState

logger = logging.getLogger(__name__)

Reducer = Callable[[AppState, Action], AppState]
Listener = Callable[[Action, AppState], None]


class Store:
    def __init__(self, reducer: Reducer = root_reducer, initial: AppState | None = None):
        self._reducer = reducer
        self._state = initial if initial is not None else AppState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action) -> AppState:
        logger.debug(f"dispatch {action.type.value}", extra={"action": action.type.value})
        self._state = self._reducer(self._state, action)
        for listener in list(self._listeners):
            listener(action, self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
