"""
Pressure Performance Module

Splits results by game-state context:
- Close games (final margin within a few goals)
- Games led at halftime, and how many were converted into wins
- Games trailed at halftime, and how many were turned around
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from loguru import logger

from team_analytics.analytics.results import classify_result
from team_analytics.config import PressureConfig
from team_analytics.models.game import NormalizedGame, ResultLabel


def _percentage(part: int, total: int) -> float:
    return part / total * 100 if total > 0 else 0.0


@dataclass(frozen=True)
class PressureRecord:
    """Wins out of a subset of games."""

    wins: int = 0
    total: int = 0
    percentage: float = 0.0

    @classmethod
    def from_counts(cls, wins: int, total: int) -> "PressureRecord":
        return cls(wins=wins, total=total, percentage=_percentage(wins, total))


@dataclass(frozen=True)
class ComebackRecord:
    """Wins from a halftime deficit."""

    comebacks: int = 0
    total: int = 0
    percentage: float = 0.0

    @classmethod
    def from_counts(cls, comebacks: int, total: int) -> "ComebackRecord":
        return cls(comebacks=comebacks, total=total, percentage=_percentage(comebacks, total))


@dataclass(frozen=True)
class PressureResult:
    """Performance by game-state context."""

    close_game_record: PressureRecord = field(default_factory=PressureRecord)
    leading_performance: PressureRecord = field(default_factory=PressureRecord)
    trailing_performance: ComebackRecord = field(default_factory=ComebackRecord)


class PressurePerformanceAnalyzer:
    """
    Analyzer for performance under pressure.

    A game level at halftime counts as neither leading nor trailing.
    """

    def __init__(self, config: PressureConfig | None = None) -> None:
        self.config = config or PressureConfig()

    def is_close_game(self, game: NormalizedGame) -> bool:
        """Check if the final margin is within the close-game margin."""
        return abs(game.net_score) <= self.config.close_game_margin

    def analyze(self, games: Sequence[NormalizedGame]) -> PressureResult:
        """Calculate close-game, leading and trailing records."""
        won = [
            classify_result(g.team_score, g.opponent_score) == ResultLabel.WIN
            for g in games
        ]

        close = [w for g, w in zip(games, won) if self.is_close_game(g)]
        leading = [
            w for g, w in zip(games, won)
            if g.halftime_team_score > g.halftime_opponent_score
        ]
        trailing = [
            w for g, w in zip(games, won)
            if g.halftime_team_score < g.halftime_opponent_score
        ]

        logger.debug(
            f"Pressure: {len(close)} close, {len(leading)} led at half, "
            f"{len(trailing)} trailed at half"
        )

        return PressureResult(
            close_game_record=PressureRecord.from_counts(sum(close), len(close)),
            leading_performance=PressureRecord.from_counts(sum(leading), len(leading)),
            trailing_performance=ComebackRecord.from_counts(sum(trailing), len(trailing)),
        )
