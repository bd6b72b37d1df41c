"""Signal-based publish/subscribe between active objects."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Optional

from edf.event import Event
from edf.link import List


@dataclass(eq=False)
class _Subscriber:
    """One active object subscribed to a signal.

    ``number`` is the count of subscribers the signal had once this one was
    added; the newest subscriber's number is used as the reference count of
    a published event.
    """

    active: Any
    number: int

    def update(self, event: Event, from_isr: bool = False) -> None:
        if not self.active.post(event, from_isr):
            event.dec_ref()


class Publisher:
    """Per-signal subscriber lists and delivery of published events."""

    def __init__(self, sig_num: int) -> None:
        if sig_num < 0:
            raise ValueError("number of signals must not be negative")
        self.sig_num = sig_num
        self._subs: list[List[_Subscriber]] = [List() for _ in range(sig_num)]
        self._lock = threading.RLock()

    def _check(self, sig: int) -> None:
        if not 0 <= sig < self.sig_num:
            raise ValueError(f"signal {sig} out of range 0..{self.sig_num - 1}")

    def subscribers(self, sig: int) -> list[Any]:
        """Return the active objects subscribed to ``sig``, newest first."""
        self._check(sig)
        with self._lock:
            return [sub.active for sub in self._subs[sig]]

    def subscribe(self, sig: int, active: Any) -> None:
        """Subscribe ``active`` to ``sig``; subscribing twice has no effect."""
        self._check(sig)
        if active is None:
            raise ValueError("active object must not be None")
        with self._lock:
            subs = self._subs[sig]
            if subs.exists(lambda sub: sub.active is active):
                return
            head = subs.head()
            subs.add_head(_Subscriber(active, (head.number if head else 0) + 1))

    def unsubscribe(self, sig: int, active: Any) -> None:
        """Remove ``active`` from the subscribers of ``sig``."""
        self._check(sig)
        if active is None:
            raise ValueError("active object must not be None")
        with self._lock:
            self._subs[sig].remove_item(lambda sub: sub.active is active)

    def publish(self, event: Event, from_isr: bool = False) -> None:
        """Post ``event`` to every subscriber of its signal.

        An event nobody subscribes to is released straight away.
        """
        if event is None:
            raise ValueError("event must not be None")
        self._check(event.sig)
        subs = self._subs[event.sig]
        head = subs.head()
        if head is None:
            event.dec_ref(from_isr)
            return
        event.init_ref(head.number, from_isr)
        subs.for_each(lambda sub: sub.update(event, from_isr))


_publisher: Optional[Publisher] = None


def _instance() -> Publisher:
    if _publisher is None:
        raise RuntimeError("publishing has not been initialised")
    return _publisher


def init_publish(sig_num: int) -> Publisher:
    """Create the shared publisher for ``sig_num`` signals and return it."""
    global _publisher
    _publisher = Publisher(sig_num)
    return _publisher


def subscribe(sig: int, active: Any) -> None:
    _instance().subscribe(sig, active)


def unsubscribe(sig: int, active: Any) -> None:
    _instance().unsubscribe(sig, active)


def publish(event: Event, from_isr: bool = False) -> None:
    _instance().publish(event, from_isr)