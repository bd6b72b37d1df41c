# edf

A small event-driven framework built from a few parts:

- **Active objects** (`edf.active.Active`): each one owns an event queue and a
  worker thread. `start()` launches the thread, which runs `initial()` once and
  then hands every posted event to `run_state()`. `stop()` ends the thread.
  An active object created with `dq_size > 0` also has a bounded queue of
  deferred events (`defer_event`, `fetch_deferred_event`, `recycle_event`,
  `clear_deferred_events`).
- **State machines** (`edf.state.StateMachine`): states are plain callables
  taking an event. `init()` enters the first state, `trans()` sends an exit
  event to the old state and an entry event to the new one. `trans_backup()`
  remembers the current state and `trans_to_history()` returns to it.
- **Events** (`edf.event`): `Event` carries a signal number and, when
  releasable, a reference count; its `release()` hook runs once when the last
  reference is dropped. `Signal` lists the reserved signals; user signals start
  at `Signal.USER`. `EventQueue` is the bounded deferred-event queue.
- **Publish/subscribe** (`edf.publish`): `init_publish(sig_num)` (or
  `edf.active.edf_start(sig_num)`) sets up the shared `Publisher`. Active
  objects `subscribe()` to signals; `publish()` posts an event to every
  subscriber with its reference count set, so it is released after the last
  one has handled it. An event with no subscribers is released at once.
- **Tick timers** (`edf.timer.TimeEvent`): one-shot or periodic timeouts,
  counted in ticks. A timer is posted to its active object once
  `time_event_tick()` has been called enough times; nothing ticks on its own.
  Timers can be paused and resumed.
- **Containers** (`edf.link`): `Queue`, `DeQueue`, `List` (with sorted
  insertion via `add_sort` and removal by identity or predicate) and `Stack`.
  Empty containers return `None` from their pop/remove methods.
- **Protocol helpers** (`edf.protocol`): `AppEvent` and `MacEvent` (events
  owning a copy of some bytes, with `MacEventType`) and the `MacLayer` base
  class for active objects.
- **LED** (`edf.led.Led`): a two-state machine switched by `Led.ON` and
  `Led.OFF` events.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## A short example

```python
from edf.active import Active, edf_start
from edf.event import Event, Signal
from edf.publish import publish, subscribe
from edf.state import StateMachine

PING = Signal.USER


class Pinger(Active):
    def __init__(self):
        super().__init__("Pinger")
        self.machine = StateMachine()

    def initial(self):
        subscribe(PING, self)
        self.machine.init(self.idle)

    def run_state(self, event):
        self.machine.dispatch(event)

    def idle(self, event):
        if event.sig == PING:
            print("ping received")


edf_start(PING + 1)
pinger = Pinger()
pinger.start()
publish(Event(PING))
```

## Demo

`edf.hello` holds a demo in which `Hello` and `World` active objects trade
`TestEvent`s through the publisher, with `Hello` switching state on a timer.
The command ticks the timers about once a millisecond:

```
edf-hello
edf-hello --instances 3 --seconds 5
```

`--instances` sets how many extra `Hello` and `World` objects start (default
10); `--seconds` stops the demo after that long (default: run until
interrupted).

## What it does not do

There are no device drivers here: no serial-port, UART or CAN access and no
HDLC link layer. `edf.protocol` only supplies the event types and the
`MacLayer` base for writing such layers. Thread priorities and stack sizes
given to `Active.start()` are recorded but have no effect on scheduling.