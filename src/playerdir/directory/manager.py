"""Operations over the configured player directory."""

from __future__ import annotations

import logging
import os
from contextlib import closing
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional

from playerdir.config import PlayerDirConfig
from playerdir.records import RecordReadError, events_attended

from .errors import (
    DeleteFailed,
    DirectoryCreateFailed,
    DirectoryUnavailable,
    InvalidPlayerName,
    PlayerDirError,
)
from .ranking import Ordering, RankedList
from .scanner import resolve_path, scan_player_files


logger = logging.getLogger(__name__)

DIRECTORY_MODE = 0o700

EventsReader = Callable[[str], int]


@dataclass
class ResetReport:
    deleted: List[str] = field(default_factory=list)
    failed: List[DeleteFailed] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.deleted) + len(self.failed)


def _make_directory(path: str) -> None:
    # mode is ignored on Windows
    os.mkdir(path, DIRECTORY_MODE)


class PlayerDirectory:
    """Player record directory bound to one configuration.

    ``events_reader`` maps a record's full path to the number of events the
    player attended; it defaults to the JSON-lines record reader.
    """

    def __init__(self, config: PlayerDirConfig, events_reader: Optional[EventsReader] = None):
        self.config = config
        self._events_reader: EventsReader = events_reader or events_attended

    @property
    def path(self) -> str:
        return self.config.player_dir

    def path_for(self, name: str) -> str:
        """Resolve the record path for ``name``.

        Raises :class:`InvalidPlayerName` for names that are empty, dot
        entries or contain a path separator, and :class:`NameTooLong` for
        names that do not fit the configured widths.
        """

        if name in {"", ".", ".."} or os.sep in name or (os.altsep and os.altsep in name):
            raise InvalidPlayerName(f"Invalid player name {name!r}", path=name)
        return resolve_path(
            self.config.player_dir,
            name,
            max_name_len=self.config.max_name_len,
            max_file_path_len=self.config.max_file_path_len,
        )

    def scan(self) -> Iterator[str]:
        return scan_player_files(self.config.player_dir)

    def events_for(self, name: str) -> int:
        return self._events_reader(self.path_for(name))

    def qualifies(self, name: str) -> bool:
        """Return True when ``name`` attended at least ``pr_minimum_events`` events.

        Names that do not fit the configured widths and records that cannot be
        read are rejected with a warning.
        """

        try:
            full_path = self.path_for(name)
        except PlayerDirError as exc:
            logger.warning("Skipping player %r: %s", name, exc.message)
            return False
        try:
            num_events = self._events_reader(full_path)
        except (RecordReadError, OSError) as exc:
            logger.warning("Skipping unreadable player record %s: %s", full_path, exc)
            return False
        return num_events >= self.config.pr_minimum_events

    def players_list(
        self,
        order: Ordering | str = Ordering.LEXIO,
        *,
        capacity: Optional[int] = None,
    ) -> List[str]:
        """List every qualifying player, sorted byte-wise unless ``order`` is unordered.

        Raises :class:`DirectoryUnavailable` if the directory cannot be opened
        and :class:`CapacityExceeded` if more than ``capacity`` players qualify.
        """

        ranked = RankedList(order, capacity=capacity)
        seen = 0
        with closing(self.scan()) as names:
            for name in names:
                seen += 1
                if self.qualifies(name):
                    ranked.insert(name)
        logger.info(
            "Listed %s/%s players from %s (minimum events %s, order %s)",
            ranked.count,
            seen,
            self.path,
            self.config.pr_minimum_events,
            ranked.order.value,
        )
        return ranked.names()

    def count_players(self) -> int:
        """Return the number of regular files in the player directory."""

        return sum(1 for _ in self.scan())

    def reset_players(self) -> ResetReport:
        """Delete every player file, continuing past individual failures."""

        report = ResetReport()
        for name in self.scan():
            try:
                full_path = self.path_for(name)
                os.remove(full_path)
            except PlayerDirError as exc:
                failure = DeleteFailed(exc.message, path=name)
            except OSError as exc:
                failure = DeleteFailed(
                    f"Unable to delete player file {name!r}: {exc.strerror or exc}",
                    path=name,
                )
            else:
                report.deleted.append(name)
                continue
            logger.warning("%s", failure.message)
            report.failed.append(failure)

        logger.info(
            "Reset %s: deleted %s player files, %s failures",
            self.path,
            len(report.deleted),
            len(report.failed),
        )
        return report

    def ensure_exists(self) -> bool:
        """Create the player directory if it is missing.

        Returns True when the directory was created and False when it already
        existed.
        """

        player_dir = self.config.player_dir
        try:
            with os.scandir(player_dir):
                pass
        except FileNotFoundError:
            logger.warning("Player directory %r did not exist, creating...", player_dir)
        except OSError as exc:
            raise DirectoryUnavailable(
                f"Unable to open player directory {player_dir!r}: {exc.strerror or exc}",
                path=player_dir,
            ) from exc
        else:
            return False

        try:
            _make_directory(player_dir)
        except OSError as exc:
            raise DirectoryCreateFailed(
                f"Unable to create player directory {player_dir!r}: {exc.strerror or exc}",
                path=player_dir,
            ) from exc
        return True
