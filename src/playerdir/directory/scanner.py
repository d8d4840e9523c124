"""Path resolution and one-pass scanning of the player directory."""

from __future__ import annotations

import os
from typing import Iterator

from playerdir.config import DEFAULT_MAX_FILE_PATH_LEN, DEFAULT_MAX_NAME_LEN

from .errors import DirectoryUnavailable, NameTooLong


def resolve_path(
    player_dir: str,
    name: str,
    *,
    max_name_len: int = DEFAULT_MAX_NAME_LEN,
    max_file_path_len: int = DEFAULT_MAX_FILE_PATH_LEN,
) -> str:
    """Join ``player_dir`` and ``name``, adding a separator only when missing.

    Both parts are checked against their fixed widths (measured in file-system
    encoded bytes, one byte reserved for the terminator) and rejected with
    :class:`NameTooLong` instead of being truncated.
    """

    name_bytes = len(os.fsencode(name))
    if name_bytes > max_name_len - 1:
        raise NameTooLong(
            f"Player name {name!r} is {name_bytes} bytes; limit is {max_name_len - 1}",
            path=name,
        )
    dir_limit = max_file_path_len - max_name_len - 1
    dir_bytes = len(os.fsencode(player_dir))
    if dir_bytes > dir_limit:
        raise NameTooLong(
            f"Player directory {player_dir!r} is {dir_bytes} bytes; limit is {dir_limit}",
            path=player_dir,
        )

    if player_dir.endswith(os.sep):
        return f"{player_dir}{name}"
    return f"{player_dir}{os.sep}{name}"


def _is_regular_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def scan_player_files(player_dir: str) -> Iterator[str]:
    """Yield the name of every regular file directly inside ``player_dir``.

    The directory is opened on the first ``next()`` and closed when the
    iterator is exhausted, closed or garbage collected. Raises
    :class:`DirectoryUnavailable` if it cannot be opened. Order follows the
    file system and carries no meaning.
    """

    try:
        iterator = os.scandir(player_dir)
    except OSError as exc:
        raise DirectoryUnavailable(
            f"Unable to open player directory {player_dir!r}: {exc.strerror or exc}",
            path=player_dir,
        ) from exc

    with iterator as entries:
        for entry in entries:
            if _is_regular_file(entry):
                yield entry.name
