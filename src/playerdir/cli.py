"""Command-line interface for managing the player record directory."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from playerdir.config import PlayerDirConfig
from playerdir.config_loader import ConfigProfile
from playerdir.directory import Ordering, PlayerDirectory, PlayerDirError
from playerdir.models import RecordEntry
from playerdir.records import RecordReadError, append_entry


logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage the player rating record directory")
    parser.add_argument("--player-dir", default=None, help="Player directory (default $PLAYERDIR_PATH or .players)")
    parser.add_argument(
        "--min-events",
        type=int,
        default=None,
        help="Minimum events attended for a player to be listed",
    )
    parser.add_argument("--config", type=Path, default=None, help="Load settings from a JSON profile")
    parser.add_argument("--save-config", type=Path, default=None, help="Save resolved settings to a JSON profile")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("ensure", help="Create the player directory if it is missing")
    commands.add_parser("count", help="Count player files")
    list_parser = commands.add_parser("list", help="List players meeting the minimum events")
    list_parser.add_argument(
        "--unordered",
        action="store_true",
        help="Keep directory order instead of sorting by name",
    )
    commands.add_parser("reset", help="Delete every player file")

    events_parser = commands.add_parser("events", help="Show how many events a player attended")
    events_parser.add_argument("name", help="Player name")

    entry_parser = commands.add_parser("add-entry", help="Append a rated game to a player's record")
    entry_parser.add_argument("name", help="Player name")
    entry_parser.add_argument("--opponent", required=True)
    entry_parser.add_argument("--event", required=True)
    entry_parser.add_argument("--rating", type=float, required=True)
    entry_parser.add_argument("--rd", type=float, required=True)
    entry_parser.add_argument("--volatility", type=float, required=True)
    entry_parser.add_argument("--outcome", type=float, required=True, help="1 win, 0.5 draw, 0 loss")
    entry_parser.add_argument("--played-on", type=date.fromisoformat, default=None, help="ISO date of the game")
    return parser.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> PlayerDirConfig:
    config = PlayerDirConfig.from_env()
    if args.config:
        config = ConfigProfile.load(args.config).apply(config)
    config = config.with_overrides(player_dir=args.player_dir, pr_minimum_events=args.min_events)
    if args.save_config:
        ConfigProfile(config.player_dir, config.pr_minimum_events).save(args.save_config)
        print(f"Saved config profile to {args.save_config}")
    logger.debug("Using player directory %s (minimum events %s)", config.player_dir, config.pr_minimum_events)
    return config


def _run(args: argparse.Namespace, directory: PlayerDirectory) -> int:
    if args.command == "ensure":
        created = directory.ensure_exists()
        state = "Created" if created else "Found existing"
        print(f"{state} player directory {directory.path}")
    elif args.command == "count":
        print(directory.count_players())
    elif args.command == "list":
        order = Ordering.UNORDERED if args.unordered else Ordering.LEXIO
        for name in directory.players_list(order):
            print(name)
    elif args.command == "reset":
        report = directory.reset_players()
        print(f"Deleted {len(report.deleted)}/{report.attempted} player files")
        if report.failed:
            return 1
    elif args.command == "events":
        print(directory.events_for(args.name))
    elif args.command == "add-entry":
        entry = RecordEntry(
            opponent=args.opponent,
            event=args.event,
            rating=args.rating,
            rd=args.rd,
            volatility=args.volatility,
            outcome=args.outcome,
            played_on=args.played_on,
        )
        record_path = directory.path_for(args.name)
        directory.ensure_exists()
        append_entry(record_path, entry)
        print(f"Recorded game for {args.name} at {args.event}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = _resolve_config(args)
        return _run(args, PlayerDirectory(config))
    except (PlayerDirError, RecordReadError) as exc:
        print(f"playerdir: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"playerdir: {exc.strerror or exc}: {exc.filename}", file=sys.stderr)
        return 1
    except (ValueError, ValidationError) as exc:
        print(f"playerdir: invalid input: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
