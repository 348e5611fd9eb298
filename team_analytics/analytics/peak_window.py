"""
Peak Window Analysis Module

Per-quarter scoring averages across the season, identifying the team's
strongest and weakest quarter by average net score.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from loguru import logger

from team_analytics.analytics.rounding import round_half_up
from team_analytics.models.game import QUARTERS, NormalizedGame


@dataclass(frozen=True)
class QuarterPerformance:
    """Season averages for one quarter."""

    quarter: int
    games: int = 0
    avg_for: float = 0.0
    avg_against: float = 0.0
    net_score: float = 0.0


@dataclass(frozen=True)
class PeakWindowResult:
    """Quarter breakdown with best and worst quarters."""

    quarters: tuple[QuarterPerformance, ...] = ()
    best_quarter: int = 1
    worst_quarter: int = 1


class PeakWindowAnalyzer:
    """
    Analyzer for quarter-by-quarter performance.

    A game counts toward a quarter's average only when it has at least one
    recorded stat line for that quarter.
    """

    def quarter_performance(
        self, games: Sequence[NormalizedGame], quarter: int
    ) -> tuple[QuarterPerformance, float]:
        """
        Average one quarter across games.

        Returns:
            The rounded QuarterPerformance and its unrounded net score
        """
        scores = [g.quarter(quarter) for g in games if quarter in g.recorded_quarters]
        count = len(scores)
        if count == 0:
            return QuarterPerformance(quarter=quarter), 0.0

        avg_for = sum(s.team_score for s in scores) / count
        avg_against = sum(s.opponent_score for s in scores) / count
        net = avg_for - avg_against

        return (
            QuarterPerformance(
                quarter=quarter,
                games=count,
                avg_for=round_half_up(avg_for),
                avg_against=round_half_up(avg_against),
                net_score=round_half_up(net),
            ),
            net,
        )

    def analyze(self, games: Sequence[NormalizedGame]) -> PeakWindowResult:
        """
        Calculate per-quarter averages and pick the best and worst quarter.

        Ties go to the earliest quarter.
        """
        breakdown = [self.quarter_performance(games, q) for q in QUARTERS]
        nets = [net for _, net in breakdown]

        best = QUARTERS[nets.index(max(nets))]
        worst = QUARTERS[nets.index(min(nets))]

        logger.debug(f"Peak window: best Q{best}, worst Q{worst}")

        return PeakWindowResult(
            quarters=tuple(perf for perf, _ in breakdown),
            best_quarter=best,
            worst_quarter=worst,
        )
