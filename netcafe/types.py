"""Core value types: working hours, incoming events and event codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class EventType(IntEnum):
    """Codes of incoming events."""

    COME = 1
    SIT = 2
    WAIT = 3
    LEAVE = 4


@dataclass(frozen=True)
class WorkHours:
    """Opening and closing time of the club as ``HH:MM`` strings."""

    open: str
    close: str

    @property
    def night_switch(self) -> bool:
        """True when the club closes on the day after it opens."""
        return self.open > self.close


@dataclass(frozen=True)
class Event:
    """One incoming event line.

    ``table`` is the zero-based table index, or ``None`` if the line has none.
    """

    raw: str
    time: str
    code: int
    client: str
    table: int | None = None