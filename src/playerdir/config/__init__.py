"""Configuration helpers for the player directory."""

from .settings import (
    DEFAULT_MAX_FILE_PATH_LEN,
    DEFAULT_MAX_NAME_LEN,
    DEFAULT_PLAYER_DIR,
    PlayerDirConfig,
)

__all__ = [
    "DEFAULT_MAX_FILE_PATH_LEN",
    "DEFAULT_MAX_NAME_LEN",
    "DEFAULT_PLAYER_DIR",
    "PlayerDirConfig",
]
