"""
Analytics Aggregator Service

Runs the normalizer once and every analyzer over the shared game set,
assembling one immutable AnalyticsSnapshot.

The aggregator keeps no state between runs: callers decide when inputs
have changed and call ``compute_analytics`` again for a fresh snapshot.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping, Sequence

from loguru import logger

from team_analytics.analytics import (
    ChemistryResult,
    ComebackAnalyzer,
    ComebackResult,
    ConsistencyAnalyzer,
    ConsistencyResult,
    MomentumAnalyzer,
    MomentumResult,
    OpponentStrengthClassifier,
    OpponentStrengthResult,
    PeakWindowAnalyzer,
    PeakWindowResult,
    PositionEfficiency,
    PositionEfficiencyAnalyzer,
    PressurePerformanceAnalyzer,
    PressureResult,
    ResultClassifier,
    SeasonRecord,
    StreakAnalyzer,
    StreakResult,
    TeamChemistryAnalyzer,
)
from team_analytics.config import AnalyticsConfig
from team_analytics.models.game import Game, Opponent, QuarterStatLine
from team_analytics.processors.normalizer import GameDataNormalizer


def _to_jsonable(value: Any) -> Any:
    """Convert snapshot values into plain JSON-ready types."""
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {_to_jsonable(k): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    return value


@dataclass(frozen=True)
class AnalyticsSnapshot:
    """Complete performance analytics for one set of inputs."""

    games_analyzed: int = 0
    record: SeasonRecord = field(default_factory=SeasonRecord)
    momentum: MomentumResult = field(default_factory=MomentumResult)
    consistency: ConsistencyResult = field(default_factory=ConsistencyResult)
    streaks: StreakResult = field(default_factory=StreakResult)
    pressure: PressureResult = field(default_factory=PressureResult)
    peak_window: PeakWindowResult = field(default_factory=PeakWindowResult)
    comeback: ComebackResult = field(default_factory=ComebackResult)
    opponent_strength: OpponentStrengthResult = field(default_factory=OpponentStrengthResult)
    chemistry: ChemistryResult = field(default_factory=ChemistryResult)
    position_efficiency: tuple[PositionEfficiency, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to a JSON-ready dictionary.

        Position efficiency is keyed by position in court order.
        """
        data = _to_jsonable(self)
        data["position_efficiency"] = {
            entry.pop("position"): entry for entry in data["position_efficiency"]
        }
        return data


class AnalyticsAggregator:
    """
    Composes the analyzers into a single snapshot.

    Workflow:
    1. Normalize games (eligibility filter, date sort, quarter scores)
    2. Classify every game's result once
    3. Run each analyzer over the same normalized games
    4. Return an AnalyticsSnapshot
    """

    def __init__(self, config: AnalyticsConfig | None = None) -> None:
        """
        Initialize the aggregator.

        Args:
            config: Analyzer thresholds (defaults when not provided)
        """
        self.config = config or AnalyticsConfig()

        self.result_classifier = ResultClassifier()
        self.momentum_analyzer = MomentumAnalyzer(self.config.momentum)
        self.consistency_analyzer = ConsistencyAnalyzer(self.config.consistency)
        self.streak_analyzer = StreakAnalyzer()
        self.pressure_analyzer = PressurePerformanceAnalyzer(self.config.pressure)
        self.peak_window_analyzer = PeakWindowAnalyzer()
        self.comeback_analyzer = ComebackAnalyzer()
        self.opponent_classifier = OpponentStrengthClassifier(self.config.opponent_strength)
        self.chemistry_analyzer = TeamChemistryAnalyzer(self.config.chemistry)
        self.position_analyzer = PositionEfficiencyAnalyzer()

    def compute(
        self,
        games: Iterable[Game],
        stats_by_game_id: Mapping[int, Sequence[QuarterStatLine]] | None = None,
        opponents: Iterable[Opponent] | None = None,
    ) -> AnalyticsSnapshot:
        """
        Compute a full analytics snapshot.

        Args:
            games: All of the team's games
            stats_by_game_id: Quarter stat lines keyed by game ID (may be sparse)
            opponents: Known opponents, for games that carry only an opponent ID

        Returns:
            AnalyticsSnapshot over the completed, statistics-eligible games
        """
        normalized = GameDataNormalizer(opponents).normalize(games, stats_by_game_id)
        results = self.result_classifier.classify_games(normalized)

        snapshot = AnalyticsSnapshot(
            games_analyzed=len(normalized),
            record=self.result_classifier.season_record(results),
            momentum=self.momentum_analyzer.analyze(results),
            consistency=self.consistency_analyzer.analyze([g.team_score for g in normalized]),
            streaks=self.streak_analyzer.analyze(results),
            pressure=self.pressure_analyzer.analyze(normalized),
            peak_window=self.peak_window_analyzer.analyze(normalized),
            comeback=self.comeback_analyzer.analyze(normalized),
            opponent_strength=self.opponent_classifier.analyze(normalized),
            chemistry=self.chemistry_analyzer.analyze(normalized),
            position_efficiency=self.position_analyzer.analyze(normalized),
        )

        logger.info(
            f"Computed analytics over {snapshot.games_analyzed} games: "
            f"{snapshot.record.wins}W-{snapshot.record.losses}L-{snapshot.record.draws}D, "
            f"momentum {snapshot.momentum.trend.value}"
        )
        return snapshot


def compute_analytics(
    games: Iterable[Game],
    stats_by_game_id: Mapping[int, Sequence[QuarterStatLine]] | None = None,
    opponents: Iterable[Opponent] | None = None,
    config: AnalyticsConfig | None = None,
) -> AnalyticsSnapshot:
    """Compute an analytics snapshot with a one-off aggregator."""
    return AnalyticsAggregator(config).compute(games, stats_by_game_id, opponents)
