"""Runtime settings for locating and filtering player records."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any


logger = logging.getLogger(__name__)

DEFAULT_PLAYER_DIR = ".players"
DEFAULT_MAX_NAME_LEN = 128
DEFAULT_MAX_FILE_PATH_LEN = 256

_PLAYER_DIR_ENV = "PLAYERDIR_PATH"
_MIN_EVENTS_ENV = "PLAYERDIR_MIN_EVENTS"


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class PlayerDirConfig:
    """Where player records live and which players qualify for listing."""

    player_dir: str = DEFAULT_PLAYER_DIR
    pr_minimum_events: int = 0
    max_name_len: int = DEFAULT_MAX_NAME_LEN
    max_file_path_len: int = DEFAULT_MAX_FILE_PATH_LEN

    def __post_init__(self) -> None:
        if self.pr_minimum_events < 0:
            raise ValueError(f"pr_minimum_events must be >= 0, got {self.pr_minimum_events}")
        if self.max_name_len < 2:
            raise ValueError(f"max_name_len must be >= 2, got {self.max_name_len}")
        if self.max_name_len >= self.max_file_path_len:
            raise ValueError(
                f"max_name_len ({self.max_name_len}) must be smaller than "
                f"max_file_path_len ({self.max_file_path_len})"
            )

    @property
    def max_dir_len(self) -> int:
        return self.max_file_path_len - self.max_name_len

    @classmethod
    def from_env(cls) -> "PlayerDirConfig":
        """Build a config from ``PLAYERDIR_PATH`` and ``PLAYERDIR_MIN_EVENTS``."""

        return cls(
            player_dir=os.getenv(_PLAYER_DIR_ENV) or DEFAULT_PLAYER_DIR,
            pr_minimum_events=_env_int(_MIN_EVENTS_ENV, 0, min_value=0),
        )

    def with_overrides(self, **changes: Any) -> "PlayerDirConfig":
        """Return a copy with every non-None override applied."""

        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied) if applied else self
