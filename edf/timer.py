"""Tick-driven time events posted to their active object on expiry."""

from __future__ import annotations

import threading
from typing import Any, ClassVar, Optional

from edf.event import Event
from edf.link import List

NEVER = 0xFFFFFFFF

_lock = threading.RLock()
_timers: List["TimeEvent"] = List()


class TimeEvent(Event):
    """A non-releasable event that fires after a number of ticks, optionally periodically."""

    _tick: ClassVar[int] = 0

    def __init__(self, sig: int, active: Any) -> None:
        if active is None:
            raise ValueError("active object must not be None")
        super().__init__(sig, releasable=False)
        self.active = active
        self.start_point = NEVER
        self.period = NEVER
        self.paused = True

    def start(self, start_point: int, period: int) -> None:
        """Fire after ``start_point`` ticks, then every ``period`` ticks (0: once)."""
        with _lock:
            _timers.remove_item(self)
            self.start_point = start_point
            self.period = period if period else NEVER
            self.paused = False
            _timers.add_sort(self, lambda other: self.start_point <= other.start_point)

    def stop(self) -> None:
        with _lock:
            _timers.remove_item(self)

    def pause(self) -> int:
        """Stop counting down and return the current tick."""
        with _lock:
            self.paused = True
            return TimeEvent._tick

    def resume(self, his_point: Optional[int] = None) -> None:
        """Continue counting down.

        With ``his_point`` (a tick returned by ``pause``), the ticks that
        passed since then are taken off the remaining time.
        """
        with _lock:
            if his_point is not None:
                now = TimeEvent._tick
                passed = now - his_point if now >= his_point else NEVER - (his_point - now)
                self.start_point = 0 if passed >= self.start_point else self.start_point - passed
            self.paused = False

    def touch(self, from_isr: bool = False) -> None:
        self.active.post(self, from_isr)

    def time_remain(self) -> int:
        with _lock:
            return 0 if self.start_point == NEVER else self.start_point

    def get_tick(self) -> int:
        with _lock:
            return TimeEvent._tick

    @classmethod
    def tick(cls, from_isr: bool = False) -> None:
        """Advance time by one tick and fire every timer that has run out."""
        with _lock:
            TimeEvent._tick = (TimeEvent._tick + 1) & NEVER
        for timer in _timers:
            fire = False
            with _lock:
                if not timer.paused and timer.start_point != NEVER:
                    if timer.start_point == 0:
                        fire = True
                        timer.start_point = timer.period
                    else:
                        timer.start_point -= 1
            if fire:
                timer.touch(from_isr)


def time_event_tick(from_isr: bool = False) -> None:
    TimeEvent.tick(from_isr)