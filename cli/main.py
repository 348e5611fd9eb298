#!/usr/bin/env python3
"""
Command-line runner for Team Performance Analytics

Reads an exported season (games, quarter stats, opponents) from a JSON
file and prints the analytics snapshot.

Usage:
    python -m cli.main analyze season.json
    python -m cli.main summary season.json --config config/analytics.yaml
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from team_analytics.config import AnalyticsConfig, load_config
from team_analytics.exceptions import AnalyticsError, InputDataError
from team_analytics.models.game import Game, Opponent, QuarterStatLine
from team_analytics.service.aggregator import AnalyticsSnapshot, compute_analytics

_games_adapter = TypeAdapter(list[Game])
_stat_lines_adapter = TypeAdapter(list[QuarterStatLine])
_opponents_adapter = TypeAdapter(list[Opponent])


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI usage."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="<level>{level}</level>: {message}",
    )


def load_season(path: str | Path) -> dict[str, Any]:
    """
    Load and validate a season export.

    Expected shape::

        {"games": [...], "stats": {"<game_id>": [...]}, "opponents": [...]}

    Returns:
        Dict with ``games``, ``stats_by_game_id`` and ``opponents``

    Raises:
        InputDataError: If the file is missing, not JSON, or fails validation
    """
    path = Path(path)
    try:
        with open(path) as f:
            document = json.load(f)
    except OSError as e:
        raise InputDataError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InputDataError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(document, dict):
        raise InputDataError(f"Expected a JSON object in {path}")

    stats = document.get("stats") or {}
    if not isinstance(stats, dict):
        raise InputDataError(
            f"Expected \"stats\" in {path} to map game IDs to stat lines, "
            f"got {type(stats).__name__}"
        )

    try:
        games = _games_adapter.validate_python(document.get("games", []))
        opponents = _opponents_adapter.validate_python(document.get("opponents", []))
        stats_by_game_id = {
            int(game_id): _stat_lines_adapter.validate_python(
                [{"game_id": game_id, **line} for line in lines]
            )
            for game_id, lines in stats.items()
        }
    except (ValidationError, ValueError, TypeError) as e:
        raise InputDataError(f"Invalid season data in {path}: {e}") from e

    logger.debug(
        f"Loaded {len(games)} games, {len(stats_by_game_id)} stat sets, "
        f"{len(opponents)} opponents from {path}"
    )
    return {
        "games": games,
        "stats_by_game_id": stats_by_game_id,
        "opponents": opponents,
    }


def format_summary(snapshot: AnalyticsSnapshot) -> str:
    """Build a short human-readable report."""
    record = snapshot.record
    momentum = snapshot.momentum
    streak = snapshot.streaks.current_streak
    peak = snapshot.peak_window
    pressure = snapshot.pressure
    comeback = snapshot.comeback

    form = " ".join(result.value[0] for result in momentum.recent_form) or "-"

    lines = [
        "=" * 50,
        "TEAM PERFORMANCE SUMMARY",
        "=" * 50,
        f"  Games analyzed: {snapshot.games_analyzed}",
        f"  Record:         {record.wins}W-{record.losses}L-{record.draws}D "
        f"({record.win_rate:.1f}%)",
        f"  Momentum:       {momentum.trend.value.upper()} "
        f"(strength {momentum.strength:.1f}, form {form})",
        f"  Consistency:    {snapshot.consistency.score} "
        f"({snapshot.consistency.classification.value})",
        f"  Current streak: {streak.count} x {streak.type.value}",
        f"  Longest runs:   {snapshot.streaks.longest_win_streak} wins, "
        f"{snapshot.streaks.longest_loss_streak} losses",
        f"  Close games:    {pressure.close_game_record.wins}/{pressure.close_game_record.total}",
        f"  Best quarter:   Q{peak.best_quarter}  Worst quarter: Q{peak.worst_quarter}",
        f"  Comebacks:      {comeback.deficit_recoveries}/{comeback.total_deficits} "
        f"deficits recovered ({comeback.recovery_rate:.1f}%)",
        "-" * 50,
    ]
    return "\n".join(lines)


def _run(args: argparse.Namespace) -> AnalyticsSnapshot:
    config = load_config(args.config) if args.config else AnalyticsConfig()
    season = load_season(args.input)
    return compute_analytics(
        season["games"],
        season["stats_by_game_id"],
        season["opponents"],
        config=config,
    )


def cmd_analyze(args: argparse.Namespace) -> int:
    """Write the full snapshot as JSON."""
    snapshot = _run(args)
    output = json.dumps(snapshot.to_dict(), indent=2)

    if args.output:
        Path(args.output).write_text(output + "\n")
        logger.info(f"Snapshot written to {args.output}")
    else:
        print(output)
    return 0


def cmd_summary(args: argparse.Namespace) -> int:
    """Print a short text report."""
    print(format_summary(_run(args)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Team Performance Analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full snapshot as JSON
  python -m cli.main analyze season.json

  # Save to a file with custom thresholds
  python -m cli.main analyze season.json --config config/analytics.yaml --output snapshot.json

  # Text summary
  python -m cli.main summary season.json
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    for name, help_text in (
        ("analyze", "Compute the analytics snapshot as JSON"),
        ("summary", "Print a short performance summary"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("input", help="Season export JSON file")
        sub.add_argument(
            "--config",
            type=str,
            default=None,
            help="Analytics thresholds YAML (default: built-in values)",
        )
        sub.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable debug logging",
        )
        if name == "analyze":
            sub.add_argument(
                "--output",
                type=str,
                default=None,
                help="Write JSON here instead of stdout",
            )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(getattr(args, "verbose", False))

    commands = {"analyze": cmd_analyze, "summary": cmd_summary}
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 0

    try:
        return command(args)
    except AnalyticsError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
