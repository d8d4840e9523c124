"""Enumeration, ranking and maintenance of the player record directory."""

from .errors import (
    CapacityExceeded,
    DeleteFailed,
    DirectoryCreateFailed,
    DirectoryUnavailable,
    ErrorKind,
    InvalidPlayerName,
    NameTooLong,
    PlayerDirError,
)
from .manager import PlayerDirectory, ResetReport
from .ranking import Ordering, RankedList
from .scanner import resolve_path, scan_player_files

__all__ = [
    "CapacityExceeded",
    "DeleteFailed",
    "DirectoryCreateFailed",
    "DirectoryUnavailable",
    "ErrorKind",
    "InvalidPlayerName",
    "NameTooLong",
    "Ordering",
    "PlayerDirError",
    "PlayerDirectory",
    "RankedList",
    "ResetReport",
    "resolve_path",
    "scan_player_files",
]
