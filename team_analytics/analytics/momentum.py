"""
Momentum Analysis Module

Recency-weighted form score over the most recent games. Wins and losses
are weighted asymmetrically and later games count for more, so the trend
follows recent swings without one result dominating.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from loguru import logger

from team_analytics.config import MomentumConfig
from team_analytics.models.game import ResultLabel


class MomentumTrend(str, Enum):
    """Direction of recent form."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


@dataclass(frozen=True)
class MomentumResult:
    """Form trend over the recent window."""

    trend: MomentumTrend = MomentumTrend.STABLE
    momentum: float = 0.0
    strength: float = 0.0
    recent_form: tuple[ResultLabel, ...] = ()


class MomentumAnalyzer:
    """
    Analyzer for recent-form momentum.

    The i-th game of an N-game window (oldest first, zero-based) carries
    weight (i + 1) / N, so the most recent game has weight 1.0.
    """

    def __init__(self, config: MomentumConfig | None = None) -> None:
        self.config = config or MomentumConfig()

    def result_value(self, result: ResultLabel) -> float:
        """Unweighted contribution of a single result."""
        if result == ResultLabel.WIN:
            return self.config.win_weight
        if result == ResultLabel.DRAW:
            return self.config.draw_weight
        return self.config.loss_weight

    def analyze(self, results: Sequence[ResultLabel]) -> MomentumResult:
        """
        Calculate momentum from a chronological result sequence.

        Args:
            results: All results, oldest first; only the last ``window`` are used

        Returns:
            MomentumResult (stable with strength 0 when there are no results)
        """
        window = tuple(results[-self.config.window:]) if results else ()
        if not window:
            return MomentumResult()

        n = len(window)
        momentum = sum(
            self.result_value(result) * (i + 1) for i, result in enumerate(window)
        ) / n

        threshold = self.config.trend_threshold
        if momentum > threshold:
            trend = MomentumTrend.UP
        elif momentum < -threshold:
            trend = MomentumTrend.DOWN
        else:
            trend = MomentumTrend.STABLE

        logger.debug(f"Momentum {momentum:.2f} over {n} games -> {trend.value}")

        return MomentumResult(
            trend=trend,
            momentum=momentum,
            strength=abs(momentum),
            recent_form=window,
        )
