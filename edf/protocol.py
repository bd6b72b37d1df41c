"""Events and base class shared by protocol layers."""

from __future__ import annotations

from enum import IntEnum

from edf.active import Active
from edf.event import Event


class _DataEvent(Event):
    """A releasable event that owns a copy of some bytes."""

    def __init__(self, sig: int, data: bytes = b"") -> None:
        super().__init__(sig, releasable=True)
        self.data = bytes(data)

    @property
    def data_len(self) -> int:
        return len(self.data)

    def release(self) -> None:
        self.data = b""


class AppEvent(_DataEvent):
    """A releasable event carrying a copy of application data."""

    def __init__(self, sig: int, data: bytes = b"") -> None:
        super().__init__(sig, data)


class MacEventType(IntEnum):
    """What a MAC layer reports upwards."""

    SEND_ERROR = 0
    SEND_BUSY = 1
    GET_DATA = 2


class MacEvent(_DataEvent):
    """A releasable event from a MAC layer: a report type and a copy of its data."""

    def __init__(self, sig: int, type: MacEventType, data: bytes = b"") -> None:
        super().__init__(sig, data)
        self.type = MacEventType(type)


class MacLayer(Active):
    """Base for active objects implementing a media access layer."""

    def __init__(self, name: str, dq_size: int = 0) -> None:
        super().__init__(name, dq_size)