from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

from playerdir.models import RecordEntry
from playerdir.records import RecordReadError, append_entry, events_attended, read_entries


def _entry(event: str = "Summer Open", **kwargs) -> RecordEntry:
    payload = {
        "opponent": "bob",
        "event": event,
        "rating": 1500.0,
        "rd": 350.0,
        "volatility": 0.06,
        "outcome": 1.0,
    }
    payload.update(kwargs)
    return RecordEntry(**payload)


def test_record_entry_is_frozen():
    entry = _entry("Summer Open")
    with pytest.raises((TypeError, ValidationError)):
        entry.event = "Winter Open"  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"outcome": 1.5},
        {"rd": 0.0},
        {"volatility": -0.1},
        {"event": ""},
    ],
)
def test_record_entry_rejects_invalid_values(overrides):
    with pytest.raises(ValidationError):
        _entry(**overrides)


def test_append_then_read_preserves_entries(tmp_path: Path):
    record = tmp_path / "alice"
    append_entry(record, _entry("Summer Open", played_on=date(2026, 6, 1)))
    append_entry(record, _entry("Summer Open", opponent="carol", outcome=0.5))

    entries = read_entries(record)
    assert [entry.opponent for entry in entries] == ["bob", "carol"]
    assert entries[0].played_on == date(2026, 6, 1)
    assert entries[1].played_on is None


def test_events_attended_counts_distinct_events(tmp_path: Path):
    record = tmp_path / "alice"
    for event in ["Summer Open", "Summer Open", "Fall Classic", "Winter Cup"]:
        append_entry(record, _entry(event))

    assert events_attended(record) == 3


def test_empty_record_has_no_events(tmp_path: Path):
    record = tmp_path / "newcomer"
    record.write_text("\n\n", encoding="utf-8")

    assert read_entries(record) == []
    assert events_attended(record) == 0


def test_missing_record_raises(tmp_path: Path):
    with pytest.raises(RecordReadError):
        events_attended(tmp_path / "ghost")


def test_corrupt_line_reports_line_number(tmp_path: Path):
    record = tmp_path / "alice"
    append_entry(record, _entry("Summer Open"))
    with record.open("a", encoding="utf-8") as handle:
        handle.write("{not json\n")

    with pytest.raises(RecordReadError) as excinfo:
        read_entries(record)
    assert excinfo.value.line_number == 2
    assert str(record) in str(excinfo.value)
