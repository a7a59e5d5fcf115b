"""Command line entry point: run a day's simulation from an input file."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .clientmanager import ClientManager
from .filedata import DataFormatError, load


def run_simulation(path: str, out: TextIO | None = None) -> int:
    """Run the simulation described by the file at ``path``."""
    stream = out if out is not None else sys.stdout
    data = load(path)
    manager = ClientManager(data.work_hours, data.table_count, data.price, stream)
    print(data.work_hours.open, file=stream)
    for event in data.events:
        print(event.raw, file=stream)
        manager.handle(event)
    manager.end_of_work()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: netcafe <input_file>", file=sys.stderr)
        return 1
    path = args[0]
    try:
        return run_simulation(path)
    except OSError:
        print(f"Couldn't open file for reading: {path}", file=sys.stderr)
        return 2
    except DataFormatError as err:
        print(f"Wrong data format: {err}", file=sys.stderr)
        return 3


if __name__ == "__main__":
    raise SystemExit(main())