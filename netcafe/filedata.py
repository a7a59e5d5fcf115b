"""Parsing of the input file: table count, working hours, price and events."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike

from .types import Event, WorkHours

_NUMBER = re.compile(r"(\d+)\s*\r?", re.ASCII)
_WORK_HOURS = re.compile(
    r"(([01]\d|2[0-3]):[0-5]\d) (([01]\d|2[0-3]):[0-5]\d)\s*\r?", re.ASCII
)
_EVENT = re.compile(
    r"(\d{2}:\d{2}) (\d+) ([A-Za-z0-9_-]+)(?: (\d+))?\s*\r?", re.ASCII
)


class DataFormatError(ValueError):
    """A line of input does not have the expected format."""


@dataclass
class FileData:
    """Everything read from an input file."""

    table_count: int
    work_hours: WorkHours
    price: int
    events: list[Event] = field(default_factory=list)


def parse_number(text: str) -> int:
    """Parse a line holding a single non-negative integer."""
    match = _NUMBER.fullmatch(text)
    if match is None:
        raise DataFormatError(text)
    return int(match.group(1))


def parse_work_hours(text: str) -> WorkHours:
    """Parse a line ``HH:MM HH:MM`` of opening and closing time."""
    match = _WORK_HOURS.fullmatch(text)
    if match is None:
        raise DataFormatError(text)
    return WorkHours(match.group(1), match.group(3))


def parse_event(text: str) -> Event:
    """Parse an event line ``HH:MM code client [table]``."""
    match = _EVENT.fullmatch(text)
    if match is None:
        raise DataFormatError(text)
    table_text = match.group(4)
    table = int(table_text) - 1 if table_text is not None else None
    return Event(text, match.group(1), int(match.group(2)), match.group(3), table)


def parse_lines(lines: Iterable[str]) -> FileData:
    """Parse the input from an iterable of lines."""
    stripped = (line.rstrip("\n") for line in lines)
    table_count = parse_number(next(stripped, ""))
    work_hours = parse_work_hours(next(stripped, ""))
    price = parse_number(next(stripped, ""))
    events = [parse_event(line) for line in stripped]
    return FileData(table_count, work_hours, price, events)


def load(path: str | PathLike[str]) -> FileData:
    """Read and parse an input file. Raises OSError if it cannot be opened."""
    with open(path, encoding="utf-8") as handle:
        return parse_lines(handle)