"""
Comeback Analysis Module

Detects deficits at each quarter break and whether the team went on to
avoid defeat.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from loguru import logger

from team_analytics.models.game import NormalizedGame

# Quarter breaks checked for a deficit; the end of Q4 is the final score
DEFICIT_CHECKPOINTS = (1, 2, 3)


@dataclass(frozen=True)
class DeficitInstance:
    """A deficit at one quarter break of one game."""

    game_id: int
    after_quarter: int
    deficit_size: int
    recovered: bool


@dataclass(frozen=True)
class ComebackResult:
    """Deficit recovery summary across the season."""

    deficit_recoveries: int = 0
    total_deficits: int = 0
    recovery_rate: float = 0.0
    avg_deficit_size: float = 0.0


class ComebackAnalyzer:
    """
    Analyzer for comeback potential.

    One game can contribute a deficit at every checkpoint it trailed at,
    so the rate describes recovery per deficit point rather than per game.
    A deficit counts as recovered when the final score is a win or draw.
    """

    def deficits(self, game: NormalizedGame) -> Iterator[DeficitInstance]:
        """Yield each checkpoint at which the team was behind."""
        recovered = game.team_score >= game.opponent_score
        for quarter in DEFICIT_CHECKPOINTS:
            team, opponent = game.cumulative_after(quarter)
            if team < opponent:
                yield DeficitInstance(
                    game_id=game.game_id,
                    after_quarter=quarter,
                    deficit_size=opponent - team,
                    recovered=recovered,
                )

    def analyze(self, games: Sequence[NormalizedGame]) -> ComebackResult:
        """Aggregate deficits and recoveries over all games."""
        instances = [d for game in games for d in self.deficits(game)]
        total = len(instances)
        if total == 0:
            return ComebackResult()

        recoveries = sum(1 for d in instances if d.recovered)
        logger.debug(f"Comebacks: {recoveries}/{total} deficits recovered")

        return ComebackResult(
            deficit_recoveries=recoveries,
            total_deficits=total,
            recovery_rate=recoveries / total * 100,
            avg_deficit_size=sum(d.deficit_size for d in instances) / total,
        )
