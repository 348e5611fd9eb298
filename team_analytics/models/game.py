"""
Game Data Models

Pydantic models for the game records and quarter stat lines supplied by
the club application, plus the derived score types the analyzers share.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

QUARTERS = (1, 2, 3, 4)


class ResultLabel(str, Enum):
    """Outcome of a game from the team's point of view."""

    WIN = "Win"
    LOSS = "Loss"
    DRAW = "Draw"


class Opponent(BaseModel):
    """An opposing team known to the club."""

    model_config = ConfigDict(frozen=True)

    id: int
    team_name: str


class Game(BaseModel):
    """
    A fixture as recorded by the club application.

    Only games that are completed and allow statistics are analyzed.
    The opponent is identified by name; ``opponent_name`` is used when
    present, otherwise ``opponent_id`` is resolved against the opponent list.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    date: datetime.date
    is_completed: bool = False
    allows_statistics: bool = True
    opponent_id: int | None = None
    opponent_name: str | None = None

    @property
    def is_eligible(self) -> bool:
        """Check if the game enters analysis."""
        return self.is_completed and self.allows_statistics


class QuarterStatLine(BaseModel):
    """Goals for and against recorded for one quarter of one game."""

    model_config = ConfigDict(frozen=True)

    game_id: int
    quarter: int
    goals_for: int = 0
    goals_against: int = 0
    position: str | None = None

    @field_validator("goals_for", "goals_against", mode="before")
    @classmethod
    def _none_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


@dataclass(frozen=True)
class QuarterScore:
    """Summed scores for one quarter of a game."""

    quarter: int
    team_score: int = 0
    opponent_score: int = 0

    @property
    def net_score(self) -> int:
        """Team score minus opponent score."""
        return self.team_score - self.opponent_score


@dataclass(frozen=True)
class NormalizedGame:
    """
    An eligible game with its per-quarter scores resolved.

    ``quarters`` always holds four entries (quarters 1-4, zero when no stat
    line was recorded). ``recorded_quarters`` lists the quarters that had at
    least one stat line.
    """

    game: Game
    quarters: tuple[QuarterScore, ...]
    opponent_name: str | None = None
    recorded_quarters: frozenset[int] = frozenset()
    stat_lines: tuple[QuarterStatLine, ...] = field(default=(), repr=False)

    @property
    def game_id(self) -> int:
        return self.game.id

    @property
    def team_score(self) -> int:
        """Final team score."""
        return sum(q.team_score for q in self.quarters)

    @property
    def opponent_score(self) -> int:
        """Final opponent score."""
        return sum(q.opponent_score for q in self.quarters)

    @property
    def net_score(self) -> int:
        return self.team_score - self.opponent_score

    @property
    def halftime_team_score(self) -> int:
        """Team score after quarters 1 and 2."""
        return sum(q.team_score for q in self.quarters[:2])

    @property
    def halftime_opponent_score(self) -> int:
        """Opponent score after quarters 1 and 2."""
        return sum(q.opponent_score for q in self.quarters[:2])

    def quarter(self, number: int) -> QuarterScore:
        """Get the score for a quarter (1-4)."""
        if number not in QUARTERS:
            raise ValueError(f"Quarter must be one of {QUARTERS}, got {number}")
        return self.quarters[number - 1]

    def cumulative_after(self, number: int) -> tuple[int, int]:
        """Running (team, opponent) score at the end of a quarter."""
        if number not in QUARTERS:
            raise ValueError(f"Quarter must be one of {QUARTERS}, got {number}")
        played = self.quarters[:number]
        return (
            sum(q.team_score for q in played),
            sum(q.opponent_score for q in played),
        )
