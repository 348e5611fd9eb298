"""
Position Efficiency Module

Average net goals per quarter for each court position, built from
position-tagged stat lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from team_analytics.analytics.rounding import round_half_up
from team_analytics.models.game import QUARTERS, NormalizedGame

# Attack end to defence end
POSITIONS = ("GS", "GA", "WA", "C", "WD", "GD", "GK")


@dataclass(frozen=True)
class PositionEfficiency:
    """Per-quarter efficiency (goals for minus against per stat line) for one position."""

    position: str
    quarter1: float = 0.0
    quarter2: float = 0.0
    quarter3: float = 0.0
    quarter4: float = 0.0
    overall: float = 0.0

    def quarter(self, number: int) -> float:
        if number not in QUARTERS:
            raise ValueError(f"Quarter must be one of {QUARTERS}, got {number}")
        return (self.quarter1, self.quarter2, self.quarter3, self.quarter4)[number - 1]


class PositionEfficiencyAnalyzer:
    """
    Analyzer for position efficiency by quarter.

    Stat lines without a known position are ignored. ``overall`` averages
    only the quarters that have data for the position.
    """

    def analyze_position(
        self, games: Sequence[NormalizedGame], position: str
    ) -> PositionEfficiency:
        lines = [
            line
            for game in games
            for line in game.stat_lines
            if (line.position or "").upper() == position
        ]

        averages: dict[int, float] = {}
        for quarter in QUARTERS:
            nets = [l.goals_for - l.goals_against for l in lines if l.quarter == quarter]
            if nets:
                averages[quarter] = sum(nets) / len(nets)

        overall = sum(averages.values()) / len(averages) if averages else 0.0

        return PositionEfficiency(
            position=position,
            quarter1=round_half_up(averages.get(1, 0.0)),
            quarter2=round_half_up(averages.get(2, 0.0)),
            quarter3=round_half_up(averages.get(3, 0.0)),
            quarter4=round_half_up(averages.get(4, 0.0)),
            overall=round_half_up(overall),
        )

    def analyze(self, games: Sequence[NormalizedGame]) -> tuple[PositionEfficiency, ...]:
        """Efficiency for every position, in court order."""
        return tuple(self.analyze_position(games, position) for position in POSITIONS)
