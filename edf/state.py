"""Flat state machine whose states are callables taking an event."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from edf.event import ENTRY_EVENT, EXIT_EVENT, Event, Signal

logger = logging.getLogger(__name__)

State = Callable[[Event], None]


def _name_of(state: State) -> str:
    return getattr(state, "__qualname__", None) or getattr(
        state, "__name__", repr(state)
    )


class StateMachine:
    """Runs the current state for each event, with entry and exit on transitions."""

    def __init__(self) -> None:
        self._state: Optional[State] = None
        self._state_name: Optional[str] = None
        self._stashed: Optional[State] = None

    def init(self, state: State) -> None:
        """Enter the initial state."""
        if state is None:
            raise ValueError("initial state must not be None")
        self._state = state
        self._state_name = _name_of(state)
        self.dispatch(ENTRY_EVENT)

    def trans(self, state: State) -> None:
        """Leave the current state and enter ``state``."""
        if state is None:
            raise ValueError("target state must not be None")
        self.dispatch(EXIT_EVENT)
        self._state = state
        self._state_name = _name_of(state)
        self.dispatch(ENTRY_EVENT)

    def in_state(self, state: State) -> bool:
        return self._state == state

    def state(self) -> Optional[State]:
        return self._state

    def state_name(self) -> Optional[str]:
        return self._state_name

    def stash_state(self) -> None:
        """Remember the current state for a later return."""
        self._stashed = self._state

    def stashed_state(self) -> Optional[State]:
        return self._stashed

    def trans_backup(self, state: State) -> None:
        """Remember the current state, then transition to ``state``."""
        self.stash_state()
        self.trans(state)

    def trans_to_history(self) -> None:
        """Transition back to the remembered state."""
        if self._stashed is None:
            raise RuntimeError("no stashed state to return to")
        self.trans(self._stashed)

    def run_state(self, event: Event) -> None:
        if self._state is None:
            raise RuntimeError("state machine has not been initialised")
        self._state(event)

    def dispatch(self, event: Event) -> None:
        """Hand ``event`` to the current state; INIT events are not passed on."""
        if event.sig == Signal.INIT:
            logger.debug("Init:\t%s", self._state_name)
            return
        if event.sig == Signal.ENTRY:
            logger.debug("Enter:\t%s", self._state_name)
        elif event.sig == Signal.EXIT:
            logger.debug("Exit:\t%s", self._state_name)
        self.run_state(event)