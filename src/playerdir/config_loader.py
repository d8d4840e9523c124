"""Persist and load CLI configuration profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from playerdir.config import PlayerDirConfig


@dataclass
class ConfigProfile:
    player_dir: Optional[str] = None
    pr_minimum_events: Optional[int] = None

    @classmethod
    def load(cls, path: Path) -> "ConfigProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            player_dir=data.get("player_dir"),
            pr_minimum_events=data.get("pr_minimum_events"),
        )

    def save(self, path: Path) -> None:
        payload = {
            "player_dir": self.player_dir,
            "pr_minimum_events": self.pr_minimum_events,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def apply(self, config: PlayerDirConfig) -> PlayerDirConfig:
        return config.with_overrides(
            player_dir=self.player_dir,
            pr_minimum_events=self.pr_minimum_events,
        )
