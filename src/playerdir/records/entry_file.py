"""Helpers to read and append JSON-lines player record files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

from pydantic import ValidationError

from playerdir.models import RecordEntry


class RecordReadError(Exception):
    """Raised when a player record cannot be read or parsed."""

    def __init__(self, path: Path | str, message: str, line_number: int | None = None):
        location = f"{path}:{line_number}" if line_number is not None else str(path)
        super().__init__(f"{location}: {message}")
        self.path = Path(path)
        self.line_number = line_number


def read_entries(path: Path | str) -> List[RecordEntry]:
    """Parse every entry in a record, skipping blank lines."""

    record_path = Path(path)
    try:
        text = record_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RecordReadError(record_path, f"unable to read record ({exc})") from exc

    entries: List[RecordEntry] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            entries.append(RecordEntry.model_validate_json(line))
        except ValidationError as exc:
            raise RecordReadError(
                record_path,
                f"invalid entry ({exc.error_count()} validation errors)",
                line_number,
            ) from exc
    return entries


def events_attended(path: Path | str) -> int:
    """Return the number of distinct events a player's record covers."""

    return len({entry.event for entry in read_entries(path)})


def append_entry(path: Path | str, entry: RecordEntry) -> None:
    record_path = Path(path)
    with record_path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(entry.model_dump(mode="json")))
        handle.write("\n")
