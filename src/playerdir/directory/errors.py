"""Error kinds surfaced by player directory operations."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    DIRECTORY_UNAVAILABLE = "directory_unavailable"
    DIRECTORY_CREATE_FAILED = "directory_create_failed"
    DELETE_FAILED = "delete_failed"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    NAME_TOO_LONG = "name_too_long"
    INVALID_NAME = "invalid_name"


class PlayerDirError(Exception):
    kind: ErrorKind

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.message = message
        self.path = path


class DirectoryUnavailable(PlayerDirError):
    """The player directory could not be opened."""

    kind = ErrorKind.DIRECTORY_UNAVAILABLE


class DirectoryCreateFailed(PlayerDirError):
    """The player directory was missing and could not be created."""

    kind = ErrorKind.DIRECTORY_CREATE_FAILED


class DeleteFailed(PlayerDirError):
    """A single player file could not be removed during a reset."""

    kind = ErrorKind.DELETE_FAILED


class CapacityExceeded(PlayerDirError):
    """A ranked list was asked to hold more names than its capacity."""

    kind = ErrorKind.CAPACITY_EXCEEDED


class NameTooLong(PlayerDirError):
    """A player name or directory path does not fit the configured widths."""

    kind = ErrorKind.NAME_TOO_LONG


class InvalidPlayerName(PlayerDirError):
    """A player name would resolve outside the player directory."""

    kind = ErrorKind.INVALID_NAME
