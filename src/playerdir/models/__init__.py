"""Data models shared by the record reader and the API layer."""

from .record import RecordEntry

__all__ = ["RecordEntry"]
