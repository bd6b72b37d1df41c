import pytest

from edf.event import Event, Signal
from edf.state import StateMachine


class Machine:
    def __init__(self):
        self.log = []

    def first(self, event):
        self.log.append(("first", event.sig))

    def second(self, event):
        self.log.append(("second", event.sig))


def _started(state_name="first"):
    machine = Machine()
    sm = StateMachine()
    sm.init(getattr(machine, state_name))
    return machine, sm


def test_init_enters_state():
    machine = Machine()
    sm = StateMachine()
    sm.init(machine.first)
    assert machine.log == [("first", Signal.ENTRY)]
    assert sm.in_state(machine.first) is True
    assert sm.state() == machine.first


def test_trans_exits_then_enters():
    machine = Machine()
    sm = StateMachine()
    sm.init(machine.first)
    machine.log.clear()
    sm.trans(machine.second)
    assert machine.log == [("first", Signal.EXIT), ("second", Signal.ENTRY)]
    assert sm.in_state(machine.second) is True
    assert sm.in_state(machine.first) is False


def test_state_name_follows_state():
    machine = Machine()
    sm = StateMachine()
    sm.init(machine.first)
    assert sm.state_name() == "Machine.first"
    sm.trans(machine.second)
    assert sm.state_name() == "Machine.second"


@pytest.mark.parametrize(
    "sig, expected", [(Signal.USER, [("first", Signal.USER)]), (Signal.INIT, [])]
)
def test_dispatch(sig, expected):
    machine, sm = _started()
    machine.log.clear()
    sm.dispatch(Event(sig))
    assert machine.log == expected


def test_trans_backup_and_history():
    machine = Machine()
    sm = StateMachine()
    sm.init(machine.first)
    sm.trans_backup(machine.second)
    assert sm.stashed_state() == machine.first
    assert sm.in_state(machine.second) is True
    sm.trans_to_history()
    assert sm.in_state(machine.first) is True


def test_stash_state_remembers_current():
    machine = Machine()
    sm = StateMachine()
    sm.init(machine.second)
    sm.stash_state()
    assert sm.stashed_state() == machine.second


def test_run_state_before_init_raises():
    with pytest.raises(RuntimeError):
        StateMachine().run_state(Event(Signal.USER))


def test_history_without_stash_raises():
    machine = Machine()
    sm = StateMachine()
    sm.init(machine.first)
    with pytest.raises(RuntimeError):
        sm.trans_to_history()


def test_transition_from_inside_state():
    class Toggle:
        def __init__(self, sm):
            self.sm = sm
            self.entries = []

        def _step(self, event, label, other):
            if event.sig == Signal.ENTRY:
                self.entries.append(label)
            elif event.sig == Signal.USER:
                self.sm.trans(other)

        def a(self, event):
            self._step(event, "a", self.b)

        def b(self, event):
            self._step(event, "b", self.a)

    sm = StateMachine()
    t = Toggle(sm)
    sm.init(t.a)
    for _ in range(2):
        sm.dispatch(Event(Signal.USER))
    assert t.entries == ["a", "b", "a"]
    assert sm.in_state(t.a) is True