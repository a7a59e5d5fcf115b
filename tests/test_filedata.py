import pytest

from netcafe.filedata import (
    DataFormatError,
    FileData,
    load,
    parse_event,
    parse_lines,
    parse_number,
    parse_work_hours,
)
from netcafe.types import WorkHours


@pytest.mark.parametrize("text", ["12", "12  ", "12\r", "12 \r"])
def test_parse_number_accepts_trailing_space(text):
    assert parse_number(text) == 12


@pytest.mark.parametrize("text", ["", "x", "-3", "1 2", " 4"])
def test_parse_number_rejects(text):
    with pytest.raises(DataFormatError) as info:
        parse_number(text)
    assert str(info.value) == text


def test_parse_work_hours():
    assert parse_work_hours("09:00 19:00") == WorkHours("09:00", "19:00")


@pytest.mark.parametrize("text", ["24:00 19:00", "09:60 19:00", "9:00 19:00", "09:00"])
def test_parse_work_hours_rejects(text):
    with pytest.raises(DataFormatError):
        parse_work_hours(text)


def test_parse_event_with_table_is_zero_based():
    event = parse_event("09:54 2 client1 1")
    assert event.raw == "09:54 2 client1 1"
    assert event.time == "09:54"
    assert event.code == 2
    assert event.client == "client1"
    assert event.table == 0


def test_parse_event_without_table():
    event = parse_event("09:41 1 client_1-a")
    assert event.client == "client_1-a"
    assert event.table is None


@pytest.mark.parametrize("text", ["09:41 1 cl!ent", "9:41 1 bob", "09:41 x bob", "09:41 1"])
def test_parse_event_rejects(text):
    with pytest.raises(DataFormatError):
        parse_event(text)


def test_parse_lines_reads_header_and_events():
    data = parse_lines(["3\n", "09:00 19:00\n", "10\n", "09:41 1 bob\n", "09:42 2 bob 3\n"])
    assert isinstance(data, FileData)
    assert data.table_count == 3
    assert data.work_hours == WorkHours("09:00", "19:00")
    assert data.price == 10
    assert [e.client for e in data.events] == ["bob", "bob"]
    assert data.events[1].table == 2


def test_parse_lines_missing_header_fails():
    with pytest.raises(DataFormatError):
        parse_lines(["3\n", "09:00 19:00\n"])


def test_parse_lines_bad_event_reports_line():
    with pytest.raises(DataFormatError) as info:
        parse_lines(["3", "09:00 19:00", "10", "oops"])
    assert str(info.value) == "oops"


def test_load_from_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("2\n08:00 20:00\n5\n08:30 1 bob\n", encoding="utf-8")
    data = load(path)
    assert data.table_count == 2
    assert data.price == 5
    assert data.events[0].raw == "08:30 1 bob"


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load(tmp_path / "absent.txt")