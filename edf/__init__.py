"""Event-driven framework: active objects, state machines, events, publish/subscribe, tick timers and linked containers."""

__version__ = "0.1.0"