"""A single rented table and its accounting."""

from __future__ import annotations

_MINUTES_PER_DAY = 24 * 60


def _to_minutes(time: str) -> int:
    return int(time[0:2]) * 60 + int(time[3:5])


def minutes_between(start: str, end: str) -> int:
    """Minutes from ``start`` to ``end``, wrapping past midnight if needed."""
    start_minutes = _to_minutes(start)
    end_minutes = _to_minutes(end)
    if end_minutes < start_minutes:
        end_minutes += _MINUTES_PER_DAY
    return end_minutes - start_minutes


class Table:
    """A table billed per started hour."""

    def __init__(self, price: int) -> None:
        self.price = price
        self.client: str | None = None
        self.revenue = 0
        self.total_minutes = 0
        self._session_start = ""

    @property
    def is_occupied(self) -> bool:
        return self.client is not None

    def seat(self, client: str, time: str) -> None:
        """Start a session for ``client`` at ``time``."""
        self.client = client
        self._session_start = time

    def release(self, time: str) -> None:
        """End the current session at ``time`` and bill it."""
        self.client = None
        minutes = minutes_between(self._session_start, time)
        self.total_minutes += minutes
        self.revenue += -(-minutes // 60) * self.price

    @property
    def total_time(self) -> str:
        """Total occupied time as ``HH:MM``."""
        hours, minutes = divmod(self.total_minutes, 60)
        return f"{hours:02d}:{minutes:02d}"