"""Demo: Hello and World active objects exchanging published test events."""

from __future__ import annotations

import argparse
import itertools
import logging
import random
import threading
import time
from enum import IntEnum
from typing import Optional, Sequence

from edf.active import Active, edf_start
from edf.event import Event, Signal
from edf.publish import publish, subscribe
from edf.state import StateMachine
from edf.timer import TimeEvent, time_event_tick

logger = logging.getLogger(__name__)

MILLISECONDS_PER_TICK = 1


def _milliseconds(ms: int) -> int:
    """Convert milliseconds to timer ticks."""
    return max(1, ms // MILLISECONDS_PER_TICK)


class TestSignal(IntEnum):
    """Signals used by the demo, following the framework's reserved ones."""

    TEST = int(Signal.USER)
    TEST2 = int(Signal.USER) + 1
    TEST3 = int(Signal.USER) + 2
    TEST4 = int(Signal.USER) + 3
    TEST5 = int(Signal.USER) + 4
    MAX = int(Signal.USER) + 5


class TestEvent(Event):
    """A releasable event naming the state that published it.

    ``created`` and ``recycled`` count the events made and released.
    """

    created = 0
    recycled = 0
    _count_lock = threading.Lock()

    def __init__(self, sig: int, name: str) -> None:
        super().__init__(sig, releasable=True)
        self.name = name
        with TestEvent._count_lock:
            number = TestEvent.created
            TestEvent.created += 1
        logger.info("Create: %d, sig = %d from %s", number, sig, name)

    def release(self) -> None:
        with TestEvent._count_lock:
            number = TestEvent.recycled
            TestEvent.recycled += 1
        logger.info("Recycle: %d, sig = %d from %s", number, self.sig, self.name)


class Hello(Active):
    """Alternates between two states on a randomised timeout, publishing as it goes."""

    _numbers = itertools.count()

    def __init__(self) -> None:
        super().__init__(f"Hello{next(Hello._numbers):3d}", dq_size=10)
        self.timer = TimeEvent(Signal.TIMEOUT, self)
        self.state_machine = StateMachine()

    def initial(self) -> None:
        subscribe(TestSignal.TEST, self)
        subscribe(TestSignal.TEST5, self)
        self.state_machine.init(self.state1)

    def run_state(self, event: Event) -> None:
        self.state_machine.dispatch(event)

    def _arm_timer(self) -> None:
        self.timer.start(_milliseconds(200 + random.randrange(10)), 0)

    def state1(self, event: Event) -> None:
        if event.sig == Signal.ENTRY:
            self._arm_timer()
            publish(TestEvent(TestSignal.TEST, "State1"))
        elif event.sig == Signal.TIMEOUT:
            publish(TestEvent(TestSignal.TEST2, "State1"))
            self.state_machine.trans(self.state2)

    def state2(self, event: Event) -> None:
        if event.sig == Signal.ENTRY:
            self._arm_timer()
            publish(TestEvent(TestSignal.TEST, "State2"))
        elif event.sig == Signal.TIMEOUT:
            self.state_machine.trans(self.state1)
        elif event.sig == TestSignal.TEST:
            publish(TestEvent(TestSignal.TEST3, "State2"))


class World(Active):
    """Reacts to Hello's events, deferring and republishing some of them."""

    _numbers = itertools.count()

    def __init__(self) -> None:
        super().__init__(f"World{next(World._numbers):3d}", dq_size=10)
        self.state_machine = StateMachine()

    def initial(self) -> None:
        subscribe(TestSignal.TEST, self)
        subscribe(TestSignal.TEST2, self)
        subscribe(TestSignal.TEST3, self)
        self.state_machine.init(self.state1)

    def run_state(self, event: Event) -> None:
        self.state_machine.dispatch(event)

    def state1(self, event: Event) -> None:
        if event.sig == TestSignal.TEST:
            self.defer_event(event)
            self.state_machine.trans(self.state2)
        elif event.sig == TestSignal.TEST2:
            publish(TestEvent(TestSignal.TEST4, "State1"))
            self.state_machine.trans(self.state2)

    def state2(self, event: Event) -> None:
        if event.sig == Signal.ENTRY:
            deferred = self.fetch_deferred_event()
            if deferred is not None:
                self.recycle_event(deferred)
        elif event.sig == TestSignal.TEST:
            publish(TestEvent(TestSignal.TEST5, "State2"))
            self.state_machine.trans(self.state1)
        elif event.sig == TestSignal.TEST2:
            publish(TestEvent(TestSignal.TEST5, "State2"))
        elif event.sig == TestSignal.TEST3:
            self.state_machine.trans(self.state2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo, ticking the timers until interrupted or out of time."""
    parser = argparse.ArgumentParser(
        prog="edf-hello", description="Hello and World active objects demo."
    )
    parser.add_argument(
        "--instances", type=int, default=10,
        help="extra Hello and World objects to start (default: 10)",
    )
    parser.add_argument(
        "--seconds", type=float, default=None,
        help="stop after this many seconds (default: run until interrupted)",
    )
    args = parser.parse_args(argv)
    if args.instances < 0:
        parser.error("--instances must not be negative")

    print("Hello World!")
    edf_start(TestSignal.MAX)

    hellos = [Hello()]
    worlds = [World()]
    actors: list[Active] = [hellos[0], worlds[0]]
    for actor in actors:
        actor.start()
    for _ in range(args.instances):
        actor = Hello()
        hellos.append(actor)
        actors.append(actor)
        actor.start()
    for _ in range(args.instances):
        actor = World()
        worlds.append(actor)
        actors.append(actor)
        actor.start()

    deadline = None if args.seconds is None else time.monotonic() + args.seconds
    tick_seconds = MILLISECONDS_PER_TICK / 1000
    try:
        while deadline is None or time.monotonic() < deadline:
            time_event_tick()
            time.sleep(tick_seconds)
    except KeyboardInterrupt:
        pass
    finally:
        for actor in actors:
            actor.stop(timeout=1.0)
        for actor in hellos:
            actor.timer.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())