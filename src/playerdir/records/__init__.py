"""Reader and writer for JSON-lines player record files."""

from .entry_file import RecordReadError, append_entry, events_attended, read_entries

__all__ = ["RecordReadError", "append_entry", "events_attended", "read_entries"]
