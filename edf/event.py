"""Events, signals, reference counting and the deferred-event queue."""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import Optional

from edf.link import Queue

_critical = threading.RLock()


class Signal(IntEnum):
    """Signals reserved by the framework; user signals start at ``USER``."""

    INIT = 0
    ENTRY = 1
    EXIT = 2
    TIMEOUT = 3
    HW_RSP = 4
    HW_OUT_COMPLETE = 5
    UART_RSP = 6
    CAN_RSP = 7
    SPI_RSP = 8
    I2C_RSP = 9
    PWM_RSP = 10
    ADC_RSP = 11
    GPIO_RSP = 12
    MAC_REQ = 13
    MAC_RSP = 14
    PC_REQ = 15
    APP_REQ = 16
    UART_SIM = 17
    USER = 18


class Event:
    """An event carrying a signal, optionally reference counted.

    A releasable event is released (``release`` is called once) when its
    reference count drops to zero.
    """

    def __init__(self, sig: int, releasable: bool = True) -> None:
        self.sig = sig
        self.ref_count = 0
        self.releasable = releasable
        self.freeing = False

    def init_ref(self, ref: int, from_isr: bool = False) -> None:
        """Set the reference count of a fresh event to ``ref``."""
        if not self.releasable:
            return
        with _critical:
            if self.ref_count != 0:
                raise RuntimeError(
                    f"reference count already set to {self.ref_count}"
                )
            self.ref_count = ref

    def inc_ref(self, from_isr: bool = False) -> None:
        if not self.releasable:
            return
        with _critical:
            self.ref_count += 1

    def dec_ref(self, from_isr: bool = False) -> None:
        """Drop one reference; release the event when none are left."""
        if not self.releasable:
            return
        to_free = False
        with _critical:
            if self.ref_count:
                self.ref_count -= 1
            if self.ref_count == 0 and not self.freeing:
                self.freeing = True
                to_free = True
        if to_free:
            self.release()

    def release(self) -> None:
        """Hook run once when the event is freed; subclasses drop resources here."""

    def __repr__(self) -> str:
        try:
            name = Signal(self.sig).name
        except ValueError:
            name = str(self.sig)
        return f"{type(self).__name__}(sig={name}, ref_count={self.ref_count})"


class EventQueue:
    """Bounded FIFO of deferred events that holds a reference to each."""

    DEFAULT_ITEMS = 10

    def __init__(self, max_items: int = DEFAULT_ITEMS) -> None:
        self.max_items = max_items
        self._queue: Queue[Event] = Queue()

    def __len__(self) -> int:
        return len(self._queue)

    def defer(self, event: Event) -> bool:
        """Keep ``event`` for later; return False when the queue is full."""
        if len(self._queue) == self.max_items:
            return False
        event.inc_ref()
        self._queue.push(event)
        return True

    def fetch(self) -> Optional[Event]:
        """Take the oldest deferred event, or None when there is none."""
        return self._queue.pop()

    def recycle(self, event: Event) -> None:
        """Give back the reference taken by ``defer``."""
        event.dec_ref()


INIT_EVENT = Event(Signal.INIT, releasable=False)
ENTRY_EVENT = Event(Signal.ENTRY, releasable=False)
EXIT_EVENT = Event(Signal.EXIT, releasable=False)