"""A LED modelled as a two-state machine driven by ON and OFF events."""

from __future__ import annotations

import logging
from typing import Callable

from edf.event import Event, Signal
from edf.state import StateMachine

logger = logging.getLogger(__name__)


class Led:
    """Switches between on and off states on ON and OFF events."""

    ON = int(Signal.USER)
    OFF = int(Signal.USER) + 1

    def __init__(self) -> None:
        self.state_machine = StateMachine()

    def initial(self) -> None:
        """Enter the on state."""
        self.state_machine.init(self.s_on)

    def dispatch(self, event: Event) -> None:
        self.state_machine.dispatch(event)

    def s_on(self, event: Event) -> None:
        self._switch(event, "on", self.OFF, self.s_off)

    def s_off(self, event: Event) -> None:
        self._switch(event, "off", self.ON, self.s_on)

    def _switch(
        self,
        event: Event,
        label: str,
        toggle: int,
        target: Callable[[Event], None],
    ) -> None:
        if event.sig == Signal.ENTRY:
            logger.debug("led %s", label)
        elif event.sig == toggle:
            self.state_machine.trans(target)