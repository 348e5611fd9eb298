"""
Opponent Strength Module

Tiers opponents by the team's own historical win rate against them and
aggregates performance per tier. The tiers answer "how do we do against
sides we usually beat versus sides we struggle with", not how strong an
opponent is in absolute terms.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from loguru import logger

from team_analytics.analytics.results import classify_result
from team_analytics.analytics.rounding import round_half_up
from team_analytics.config import OpponentStrengthConfig
from team_analytics.models.game import NormalizedGame, ResultLabel


class OpponentTier(str, Enum):
    """Opponent tier from our win rate against them."""

    STRONG = "vsStrong"
    MEDIUM = "vsMedium"
    WEAK = "vsWeak"


@dataclass(frozen=True)
class OpponentRecord:
    """Head-to-head totals against one opponent."""

    name: str
    wins: int = 0
    games_played: int = 0
    total_scored_for: int = 0
    win_rate: float = 0.0
    tier: OpponentTier = OpponentTier.MEDIUM


@dataclass(frozen=True)
class TierPerformance:
    """Results against all opponents in a tier."""

    wins: int = 0
    total: int = 0
    avg_score: float = 0.0


@dataclass(frozen=True)
class OpponentStrengthResult:
    """Per-tier performance plus the per-opponent records behind it."""

    vs_strong: TierPerformance = field(default_factory=TierPerformance)
    vs_medium: TierPerformance = field(default_factory=TierPerformance)
    vs_weak: TierPerformance = field(default_factory=TierPerformance)
    opponents: tuple[OpponentRecord, ...] = ()

    def tier(self, tier: OpponentTier) -> TierPerformance:
        """Get the performance for a tier."""
        return {
            OpponentTier.STRONG: self.vs_strong,
            OpponentTier.MEDIUM: self.vs_medium,
            OpponentTier.WEAK: self.vs_weak,
        }[tier]


class OpponentStrengthClassifier:
    """
    Two-pass opponent tiering.

    Pass 1 builds win rates per opponent name. Pass 2 assigns every game
    the tier of its opponent, so a team we beat 4 of 5 times is "strong"
    in all five games, including the loss. Byes and games without a
    resolvable opponent are skipped.
    """

    def __init__(self, config: OpponentStrengthConfig | None = None) -> None:
        self.config = config or OpponentStrengthConfig()

    def classify_win_rate(self, win_rate: float) -> OpponentTier:
        """Map a head-to-head win rate (percent) to a tier."""
        if win_rate >= self.config.strong_win_rate:
            return OpponentTier.STRONG
        if win_rate < self.config.weak_win_rate:
            return OpponentTier.WEAK
        return OpponentTier.MEDIUM

    def has_real_opponent(self, game: NormalizedGame) -> bool:
        """Check if the game was played against an actual opponent."""
        return game.opponent_name is not None and not self.config.is_bye(game.opponent_name)

    def opponent_records(self, games: Sequence[NormalizedGame]) -> dict[str, OpponentRecord]:
        """
        Pass 1: head-to-head totals per opponent name.

        Returns:
            Records keyed by opponent name, in order of first meeting
        """
        names = list(dict.fromkeys(g.opponent_name for g in games))
        records = {}
        for name in names:
            meetings = [g for g in games if g.opponent_name == name]
            wins = sum(
                1 for g in meetings
                if classify_result(g.team_score, g.opponent_score) == ResultLabel.WIN
            )
            win_rate = wins / len(meetings) * 100
            records[name] = OpponentRecord(
                name=name,
                wins=wins,
                games_played=len(meetings),
                total_scored_for=sum(g.team_score for g in meetings),
                win_rate=win_rate,
                tier=self.classify_win_rate(win_rate),
            )
        return records

    def analyze(self, games: Sequence[NormalizedGame]) -> OpponentStrengthResult:
        """Build per-tier performance over games with a real opponent."""
        played = [g for g in games if self.has_real_opponent(g)]
        records = self.opponent_records(played)

        tiers = {}
        for tier in OpponentTier:
            tier_games = [g for g in played if records[g.opponent_name].tier == tier]
            total = len(tier_games)
            tiers[tier] = TierPerformance(
                wins=sum(
                    1 for g in tier_games
                    if classify_result(g.team_score, g.opponent_score) == ResultLabel.WIN
                ),
                total=total,
                avg_score=round_half_up(sum(g.team_score for g in tier_games) / total) if total else 0.0,
            )

        logger.debug(
            f"Opponent tiers over {len(records)} opponents: "
            + ", ".join(f"{t.value}={tiers[t].total}" for t in OpponentTier)
        )

        return OpponentStrengthResult(
            vs_strong=tiers[OpponentTier.STRONG],
            vs_medium=tiers[OpponentTier.MEDIUM],
            vs_weak=tiers[OpponentTier.WEAK],
            opponents=tuple(records.values()),
        )
