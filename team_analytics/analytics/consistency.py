"""
Consistency Analysis Module

Maps the spread of a team's per-game scoring to a 0-100 index.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np
from loguru import logger

from team_analytics.analytics.rounding import round_half_up
from team_analytics.config import ConsistencyConfig


class ConsistencyBand(str, Enum):
    """Classification of scoring consistency."""

    VERY_CONSISTENT = "Very Consistent"
    CONSISTENT = "Consistent"
    MODERATE = "Moderate"
    INCONSISTENT = "Inconsistent"
    VERY_INCONSISTENT = "Very Inconsistent"


@dataclass(frozen=True)
class ConsistencyResult:
    """Scoring consistency over the analyzed games."""

    score: int = 100
    classification: ConsistencyBand = ConsistencyBand.MODERATE
    score_variance: float = 0.0
    average_score: float = 0.0
    games: int = 0


class ConsistencyAnalyzer:
    """
    Analyzer for scoring consistency.

    Uses the population variance (divide by N) of per-game goals scored:
    index = max(0, 100 - std_dev * multiplier), rounded to an integer.
    """

    MIN_GAMES = 2

    def __init__(self, config: ConsistencyConfig | None = None) -> None:
        self.config = config or ConsistencyConfig()

    def analyze(self, scores: Sequence[int]) -> ConsistencyResult:
        """
        Calculate the consistency index for a list of per-game scores.

        With fewer than two games the result is a fixed neutral value
        (index 100, "Moderate", variance 0).
        """
        if len(scores) < self.MIN_GAMES:
            return ConsistencyResult(
                average_score=round_half_up(float(scores[0])) if scores else 0.0,
                games=len(scores),
            )

        values = np.asarray(scores, dtype=float)
        variance = float(np.var(values))
        std_dev = float(np.sqrt(variance))
        index = int(round_half_up(max(0.0, 100.0 - std_dev * self.config.std_dev_multiplier), 0))

        result = ConsistencyResult(
            score=index,
            classification=self.classify(index),
            score_variance=round_half_up(variance),
            average_score=round_half_up(float(np.mean(values))),
            games=len(scores),
        )
        logger.debug(f"Consistency index {index} ({result.classification.value})")
        return result

    def classify(self, score: float) -> ConsistencyBand:
        """Classify a consistency index into a band."""
        if score >= self.config.very_consistent:
            return ConsistencyBand.VERY_CONSISTENT
        elif score >= self.config.consistent:
            return ConsistencyBand.CONSISTENT
        elif score >= self.config.moderate:
            return ConsistencyBand.MODERATE
        elif score >= self.config.inconsistent:
            return ConsistencyBand.INCONSISTENT
        return ConsistencyBand.VERY_INCONSISTENT
