"""
Result Classification Module

The single Win/Loss/Draw policy used by every analyzer, and the season
win-loss record built on it.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from team_analytics.models.game import NormalizedGame, ResultLabel


def classify_result(team_score: int, opponent_score: int) -> ResultLabel:
    """Classify a final score from the team's point of view."""
    if team_score > opponent_score:
        return ResultLabel.WIN
    if team_score < opponent_score:
        return ResultLabel.LOSS
    return ResultLabel.DRAW


@dataclass(frozen=True)
class SeasonRecord:
    """Win/loss/draw totals over the analyzed games."""

    wins: int = 0
    losses: int = 0
    draws: int = 0
    total_games: int = 0
    win_rate: float = 0.0


class ResultClassifier:
    """Applies ``classify_result`` to normalized games."""

    def classify_game(self, game: NormalizedGame) -> ResultLabel:
        """Classify one game by its summed final score."""
        return classify_result(game.team_score, game.opponent_score)

    def classify_games(self, games: Iterable[NormalizedGame]) -> tuple[ResultLabel, ...]:
        """Classify games, preserving their order."""
        return tuple(self.classify_game(game) for game in games)

    def season_record(self, results: Iterable[ResultLabel]) -> SeasonRecord:
        """
        Build the season record from a result sequence.

        Returns:
            SeasonRecord with win_rate as a percentage (0 when no games)
        """
        counts = Counter(results)
        total = sum(counts.values())
        wins = counts[ResultLabel.WIN]

        return SeasonRecord(
            wins=wins,
            losses=counts[ResultLabel.LOSS],
            draws=counts[ResultLabel.DRAW],
            total_games=total,
            win_rate=wins / total * 100 if total > 0 else 0.0,
        )
