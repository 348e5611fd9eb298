"""
Team Chemistry Module

Heuristic proxy for the impact of quarter-break changes. No rotation or
substitution data reaches this engine, so this only reports how the net
score moved from one quarter to the next. It does not attribute those
swings to any lineup change.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

from team_analytics.config import ChemistryConfig
from team_analytics.models.game import NormalizedGame


class ChemistryImpact(str, Enum):
    """Direction of a quarter-to-quarter net score change."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class ChemistryResult:
    """Counts of quarter transitions by impact. Heuristic, not causal."""

    positive: int = 0
    negative: int = 0
    neutral: int = 0
    transitions: int = 0


class TeamChemistryAnalyzer:
    """Classifies Q1->Q2, Q2->Q3 and Q3->Q4 net score deltas."""

    def __init__(self, config: ChemistryConfig | None = None) -> None:
        self.config = config or ChemistryConfig()

    def classify_delta(self, delta: float) -> ChemistryImpact:
        if delta > self.config.delta_threshold:
            return ChemistryImpact.POSITIVE
        if delta < -self.config.delta_threshold:
            return ChemistryImpact.NEGATIVE
        return ChemistryImpact.NEUTRAL

    def transitions(self, game: NormalizedGame) -> Iterator[ChemistryImpact]:
        nets = [q.net_score for q in game.quarters]
        for before, after in zip(nets, nets[1:]):
            yield self.classify_delta(after - before)

    def analyze(self, games: Sequence[NormalizedGame]) -> ChemistryResult:
        counts = Counter(impact for game in games for impact in self.transitions(game))
        return ChemistryResult(
            positive=counts[ChemistryImpact.POSITIVE],
            negative=counts[ChemistryImpact.NEGATIVE],
            neutral=counts[ChemistryImpact.NEUTRAL],
            transitions=sum(counts.values()),
        )
