"""Active objects: a thread with an event queue that runs a state machine."""

from __future__ import annotations

import logging
import queue
import threading
from abc import ABC, abstractmethod
from typing import Optional

from edf.event import Event, EventQueue
from edf.publish import Publisher, init_publish

logger = logging.getLogger(__name__)

_STOP = object()


class Active(ABC):
    """An object that owns a thread and processes events posted to it one at a time."""

    DEFAULT_PRIORITY = 0
    DEFAULT_EQ_SIZE = 20
    DEFAULT_STACK_SIZE = 0
    NAME_LENGTH = 9

    def __init__(self, name: str, dq_size: int = 0) -> None:
        self.name = name[: self.NAME_LENGTH]
        self.priority = self.DEFAULT_PRIORITY
        self.stack_size = self.DEFAULT_STACK_SIZE
        self._queue: Optional[queue.Queue] = None
        self._thread: Optional[threading.Thread] = None
        self._stop_requested = threading.Event()
        self._dq: Optional[EventQueue] = EventQueue(dq_size) if dq_size else None

    def start(
        self,
        priority: Optional[int] = None,
        stack_size: Optional[int] = None,
        eq_size: int = DEFAULT_EQ_SIZE,
    ) -> None:
        """Create the event queue and start the thread that runs ``run``."""
        if self._thread is not None:
            raise RuntimeError(f"{self.name} already started")
        if priority is not None:
            self.priority = priority
        if stack_size is not None:
            self.stack_size = stack_size
        self._queue = queue.Queue(maxsize=eq_size)
        self._stop_requested.clear()
        self._thread = threading.Thread(target=self.run, name=self.name, daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        """Ask the thread to finish and wait for it."""
        thread = self._thread
        if thread is None:
            return
        self._stop_requested.set()
        self._require_queue().put(_STOP)
        thread.join(timeout)
        self._thread = None

    def set_priority(self, priority: int) -> None:
        self.priority = priority

    def _require_queue(self) -> queue.Queue:
        if self._queue is None:
            raise RuntimeError(f"{self.name} has not been started")
        return self._queue

    def post(self, event: Event, from_isr: bool = False) -> bool:
        """Queue ``event``; return False when the queue is full."""
        q = self._require_queue()
        try:
            q.put_nowait(event)
        except queue.Full:
            logger.error("%s: event queue is full", self.name)
            return False
        return True

    def run(self) -> None:
        """Run the initial transition, then process events until stopped."""
        self.initial()
        while not self._stop_requested.is_set():
            self.process_one()

    def process_one(self, timeout: Optional[float] = None) -> bool:
        """Handle one queued event; return False when none was handled."""
        q = self._require_queue()
        try:
            event = q.get(timeout=timeout)
        except queue.Empty:
            return False
        if event is _STOP:
            self._stop_requested.set()
            return False
        self.run_state(event)
        event.dec_ref()
        return True

    @abstractmethod
    def initial(self) -> None:
        """Subscribe to signals and enter the initial state."""

    @abstractmethod
    def run_state(self, event: Event) -> None:
        """Handle one event in the current state."""

    def _require_dq(self) -> EventQueue:
        if self._dq is None:
            raise RuntimeError(f"{self.name} has no deferred-event queue")
        return self._dq

    def defer_event(self, event: Event) -> bool:
        """Keep ``event`` for later; return False when the deferred queue is full."""
        if event is None:
            raise ValueError("event must not be None")
        result = self._require_dq().defer(event)
        if not result:
            logger.info("%s: DQ is full", self.name)
        return result

    def fetch_deferred_event(self) -> Optional[Event]:
        return self._require_dq().fetch()

    def recycle_event(self, event: Event) -> None:
        self._require_dq().recycle(event)

    def clear_deferred_events(self) -> None:
        """Drop every deferred event and its reference."""
        dq = self._require_dq()
        while (event := dq.fetch()) is not None:
            event.dec_ref()


def edf_start(sig_num: int) -> Publisher:
    """Set up publishing for ``sig_num`` signals."""
    return init_publish(sig_num)