"""
Streak Analysis Module

Current streak and longest win/loss runs over the season's results.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import reduce
from itertools import groupby
from typing import Sequence

from team_analytics.models.game import ResultLabel


@dataclass(frozen=True)
class CurrentStreak:
    """Run of identical results ending with the most recent game."""

    type: ResultLabel = ResultLabel.WIN
    count: int = 0


@dataclass(frozen=True)
class StreakResult:
    """Streak summary for a season."""

    current_streak: CurrentStreak = field(default_factory=CurrentStreak)
    longest_win_streak: int = 0
    longest_loss_streak: int = 0


@dataclass(frozen=True)
class _StreakState:
    win_run: int = 0
    loss_run: int = 0
    longest_win: int = 0
    longest_loss: int = 0


def _advance(state: _StreakState, result: ResultLabel) -> _StreakState:
    # A draw breaks both kinds of streak
    if result == ResultLabel.WIN:
        win_run = state.win_run + 1
        return replace(
            state,
            win_run=win_run,
            loss_run=0,
            longest_win=max(state.longest_win, win_run),
        )
    if result == ResultLabel.LOSS:
        loss_run = state.loss_run + 1
        return replace(
            state,
            win_run=0,
            loss_run=loss_run,
            longest_loss=max(state.longest_loss, loss_run),
        )
    return replace(state, win_run=0, loss_run=0)


class StreakAnalyzer:
    """Analyzer for win/loss streaks."""

    def analyze(self, results: Sequence[ResultLabel]) -> StreakResult:
        """
        Calculate streaks from a chronological result sequence.

        Args:
            results: Results, oldest first

        Returns:
            StreakResult; an empty sequence gives a zero-length "Win" streak
        """
        state = reduce(_advance, results, _StreakState())
        return StreakResult(
            current_streak=self.current_streak(results),
            longest_win_streak=state.longest_win,
            longest_loss_streak=state.longest_loss,
        )

    def current_streak(self, results: Sequence[ResultLabel]) -> CurrentStreak:
        """Count consecutive identical results back from the latest game."""
        if not results:
            return CurrentStreak()
        latest, run = next(groupby(reversed(results)))
        return CurrentStreak(type=latest, count=sum(1 for _ in run))
