"""Simulation of clients coming, sitting, waiting and leaving."""

from __future__ import annotations

import sys
from collections import deque
from typing import TextIO

from .filedata import DataFormatError
from .table import Table
from .types import Event, EventType, WorkHours


class ClientManager:
    """Tracks clients, the waiting queue and tables, writing events to ``out``."""

    def __init__(
        self,
        work_hours: WorkHours,
        table_count: int,
        price: int,
        out: TextIO | None = None,
    ) -> None:
        self.work_hours = work_hours
        self.tables = [Table(price) for _ in range(table_count)]
        self.clients: set[str] = set()
        self.queue: deque[str] = deque()
        self._out = out if out is not None else sys.stdout

    def _write(self, line: str) -> None:
        print(line, file=self._out)

    def _error(self, time: str, message: str) -> None:
        self._write(f"{time} 13 {message}")

    def _table_of(self, client: str) -> int | None:
        return next(
            (i for i, table in enumerate(self.tables) if table.client == client),
            None,
        )

    def _drop_from_queue(self, client: str) -> None:
        self.queue = deque(name for name in self.queue if name != client)

    def is_open_at(self, time: str) -> bool:
        hours = self.work_hours
        if hours.open <= time < hours.close:
            return True
        return hours.night_switch and (hours.open <= time or time < hours.close)

    def client_come(self, event: Event) -> None:
        if event.client in self.clients:
            self._error(event.time, "YouShallNotPass")
            return
        if not self.is_open_at(event.time):
            self._error(event.time, "NotOpenYet")
            return
        if len(self.queue) > len(self.tables):
            self._leave_on_overflow(event.client, event.time)
            return
        self.clients.add(event.client)
        self.queue.append(event.client)

    def client_sit(self, event: Event) -> None:
        if event.client not in self.clients:
            self._error(event.time, "ClientUnknown")
            return
        if event.table is None:
            raise DataFormatError(event.raw)
        if not 0 <= event.table < len(self.tables):
            self._error(event.time, "NoSuchATable")
            return
        target = self.tables[event.table]
        if target.is_occupied:
            self._error(event.time, "PlaceIsBusy")
            return
        current = self._table_of(event.client)
        if current is not None:
            self.tables[current].release(event.time)
        target.seat(event.client, event.time)
        self._drop_from_queue(event.client)

    def client_wait(self, event: Event) -> None:
        if not all(table.is_occupied for table in self.tables):
            self._error(event.time, "ICanWaitNoLonger!")
            return
        if len(self.queue) > len(self.tables):
            self._leave_on_overflow(event.client, event.time)

    def client_leave(self, event: Event) -> None:
        if event.client not in self.clients:
            self._error(event.time, "ClientUnknown")
            return
        self.clients.discard(event.client)
        index = self._table_of(event.client)
        if index is None:
            return
        table = self.tables[index]
        table.release(event.time)
        if self.queue:
            next_client = self.queue.popleft()
            table.seat(next_client, event.time)
            self._write(f"{event.time} 12 {next_client} {index + 1}")

    def handle(self, event: Event) -> None:
        """Dispatch an event by its code; unknown codes raise DataFormatError."""
        try:
            kind = EventType(event.code)
        except ValueError:
            raise DataFormatError(event.raw) from None
        handlers = {
            EventType.COME: self.client_come,
            EventType.SIT: self.client_sit,
            EventType.WAIT: self.client_wait,
            EventType.LEAVE: self.client_leave,
        }
        handlers[kind](event)

    def _leave_on_close(self, client: str, close_time: str) -> None:
        index = self._table_of(client)
        if index is not None:
            self.tables[index].release(close_time)
        self._write(f"{close_time} 11 {client}")

    def _leave_on_overflow(self, client: str, time: str) -> None:
        self.clients.discard(client)
        self._drop_from_queue(client)
        self._write(f"{time} 11 {client}")

    def end_of_work(self) -> None:
        """Send everyone away at closing time and write the day's revenue."""
        self.queue.clear()
        for client in sorted(self.clients):
            self._leave_on_close(client, self.work_hours.close)
        self.clients.clear()
        self._write(self.work_hours.close)
        for number, table in enumerate(self.tables, start=1):
            self._write(f"{number} {table.revenue} {table.total_time}")