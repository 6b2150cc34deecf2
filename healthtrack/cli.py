# -*- coding: utf-8 -*-
"""
CLI for local reports over the healthtrack database.

Usage:
    python -m healthtrack.cli steps-history --user <id> [--start YYYY-MM-DD] [--end YYYY-MM-DD] [--limit N]
    python -m healthtrack.cli steps-stats --user <id> [--period week|month|year]
    python -m healthtrack.cli meal-history --user <id> [--start YYYY-MM-DD] [--end YYYY-MM-DD]
    python -m healthtrack.cli meal-stats --user <id> [--period week|month|year]
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any, List, Optional

from .app_db import init_app_db
from .config import settings
from .errors import HealthTrackError
from .providers import nutrition_analytics, steps_analytics

logger = logging.getLogger(__name__)


def _jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, date):
        return value.isoformat()
    return value


def _print(result: Any) -> int:
    print(json.dumps(_jsonable(result), ensure_ascii=False, indent=2))
    return 0


def cmd_steps_history(args: argparse.Namespace) -> int:
    return _print(steps_analytics().get_history(args.user, start=args.start, end=args.end, limit=args.limit))


def cmd_steps_stats(args: argparse.Namespace) -> int:
    return _print(steps_analytics().get_stats(args.user, args.period))


def cmd_meal_history(args: argparse.Namespace) -> int:
    return _print(nutrition_analytics().get_history(args.user, start=args.start, end=args.end))


def cmd_meal_stats(args: argparse.Namespace) -> int:
    return _print(nutrition_analytics().get_stats(args.user, args.period))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="healthtrack",
        description="Print steps/meal history and statistics as JSON",
    )
    parser.add_argument("--db", default=None, help="SQLite database path (default: HEALTHTRACK_DB_PATH)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    for name in ("steps-history", "meal-history"):
        sub = subparsers.add_parser(name, help=f"Show {name.replace('-', ' ')}")
        sub.add_argument("--user", required=True, help="User id")
        sub.add_argument("--start", default=None, help="YYYY-MM-DD")
        sub.add_argument("--end", default=None, help="YYYY-MM-DD")
        if name == "steps-history":
            sub.add_argument("--limit", type=int, default=30, help="Max days (default: 30, capped at 90)")

    for name in ("steps-stats", "meal-stats"):
        sub = subparsers.add_parser(name, help=f"Show {name.replace('-', ' ')}")
        sub.add_argument("--user", required=True, help="User id")
        sub.add_argument("--period", choices=["week", "month", "year"], default="week")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    if args.db:
        settings.app_db_path = Path(args.db).expanduser()
    init_app_db(settings.app_db_path)

    commands = {
        "steps-history": cmd_steps_history,
        "steps-stats": cmd_steps_stats,
        "meal-history": cmd_meal_history,
        "meal-stats": cmd_meal_stats,
    }
    try:
        return commands[args.command](args)
    except HealthTrackError as exc:
        logger.error("%s", exc.message)
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
