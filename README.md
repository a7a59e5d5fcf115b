# netcafe

`netcafe` replays one working day of a computer club from an input file.
It echoes every incoming event and adds the events the club generates in
response. At closing time it prints the revenue and the occupied time of
each table.

## Installation

```
pip install .
```

## Usage

```
netcafe <input_file>
```

`python -m netcafe.cli <input_file>` does the same thing.

The full event log goes to standard output. The exit status is one of:

| Code | Meaning |
|------|---------|
| 0 | Success |
| 1 | No input file was given. A usage line is printed to standard error. |
| 2 | The file could not be opened or read |
| 3 | The file is malformed. `Wrong data format:` and the offending line are printed to standard error. |

A file is malformed in any of these cases:

- one of the first three lines is missing or does not match its format;
- an event line does not match `HH:MM <id> <client> [<table>]`;
- an event has an id other than 1 to 4;
- a "sit" event comes from a known client but has no table number.

## Input format

```
3
09:00 19:00
10
08:48 1 client1
09:41 1 client1
09:48 1 client2
09:52 3 client1
09:54 2 client1 1
10:25 2 client2 2
12:33 4 client1
12:43 4 client2
```

- Line 1 is the number of tables.
- Line 2 is the opening and closing time as `HH:MM HH:MM`. If the closing
  time is earlier than the opening time, the club stays open past midnight.
- Line 3 is the price per hour. Every started hour is charged in full.
- Every following line is an event: `HH:MM <id> <client> [<table>]`. A client
  name may contain letters, digits, `_` and `-`.

### Incoming events

| Id | Event |
|----|-------|
| 1 | Client arrives |
| 2 | Client sits at a table. Tables are numbered from 1. |
| 3 | Client waits in the queue |
| 4 | Client leaves |

### Generated events

| Id | Event |
|----|-------|
| 11 | Client leaves, either at closing time or because the queue is longer than the number of tables |
| 12 | The first client in the queue takes a table that has just been freed |
| 13 | Error: `YouShallNotPass`, `NotOpenYet`, `ClientUnknown`, `NoSuchATable`, `PlaceIsBusy` or `ICanWaitNoLonger!` |

At closing time:

1. The queue is emptied. Every client still in the club leaves, in
   alphabetical order, with one `11` event each.
2. The closing time is printed.
3. One line is printed per table: `<table> <revenue> <HH:MM occupied>`.

## Library use

```python
import sys
from netcafe.cli import run_simulation

run_simulation("day.txt", sys.stdout)
```

The parts can also be used separately:

- `netcafe.filedata.load(path)` reads a file into a `FileData` holding
  `table_count`, `work_hours`, `price` and `events`.
  `parse_lines(lines)` does the same for any iterable of lines.
  `parse_number`, `parse_work_hours` and `parse_event` each parse a single
  line. All of them raise `DataFormatError`, a subclass of `ValueError`, on
  malformed input.
- `netcafe.types` holds `WorkHours` (with the `night_switch` property),
  `Event` (its `table` is zero-based) and the `EventType` codes.
- `netcafe.clientmanager.ClientManager(work_hours, table_count, price, out=None)`
  processes events one at a time, either through `handle(event)` or through
  `client_come`, `client_sit`, `client_wait` and `client_leave`.
  `end_of_work()` closes the day. Output goes to `out`, or to standard output
  if `out` is not given.
- `netcafe.table.Table(price)` does the billing for one table through
  `seat`, `release`, `revenue` and `total_time`.
  `minutes_between(start, end)` counts the minutes between two `HH:MM` times
  and wraps past midnight.