"""
Pytest Configuration and Fixtures

Shared fixtures and configuration for the team analytics test suite.

The sample season (eligible games, oldest first):

    2024-04-06  Eagles  20-14  Win   quarters 5-3, 4-4, 6-2, 5-5
    2024-04-13  Hawks   14-18  Loss  quarters 2-6, 3-5, 4-4, 5-3
    2024-04-20  Eagles  18-16  Win   quarters 3-5, 5-4, 6-3, 4-4
    2024-05-04  Hawks   16-16  Draw  quarters 4-4, 4-4, 4-4, 4-4

plus a bye round that does not allow statistics and an unplayed game.
"""

import datetime
from typing import Callable, Sequence

import pytest

from team_analytics.models.game import Game, Opponent, QuarterStatLine
from team_analytics.processors.normalizer import GameDataNormalizer


def quarter_lines(
    game_id: int, scores: Sequence[tuple[int, int]], position: str | None = None
) -> list[QuarterStatLine]:
    """Build one stat line per quarter from (for, against) pairs."""
    return [
        QuarterStatLine(
            game_id=game_id,
            quarter=quarter,
            goals_for=goals_for,
            goals_against=goals_against,
            position=position,
        )
        for quarter, (goals_for, goals_against) in enumerate(scores, start=1)
    ]


@pytest.fixture
def sample_opponents() -> list[Opponent]:
    """Opponents referenced by ID from the sample games."""
    return [
        Opponent(id=1, team_name="Eagles"),
        Opponent(id=2, team_name="Hawks"),
    ]


@pytest.fixture
def sample_games() -> list[Game]:
    """Sample fixture list, deliberately out of date order."""
    return [
        Game(id=3, date=datetime.date(2024, 4, 20), is_completed=True, opponent_name="Eagles"),
        Game(id=1, date=datetime.date(2024, 4, 6), is_completed=True, opponent_name="Eagles"),
        Game(id=6, date=datetime.date(2024, 5, 11), is_completed=False, opponent_id=1),
        Game(id=2, date=datetime.date(2024, 4, 13), is_completed=True, opponent_id=2),
        Game(
            id=4,
            date=datetime.date(2024, 4, 27),
            is_completed=True,
            allows_statistics=False,
            opponent_name="Bye",
        ),
        Game(id=5, date=datetime.date(2024, 5, 4), is_completed=True, opponent_id=2),
    ]


@pytest.fixture
def sample_stats() -> dict[int, list[QuarterStatLine]]:
    """Quarter stat lines keyed by game ID."""
    return {
        1: quarter_lines(1, [(5, 3), (4, 4), (6, 2), (5, 5)]),
        2: quarter_lines(2, [(2, 6), (3, 5), (4, 4), (5, 3)]),
        3: quarter_lines(3, [(3, 5), (5, 4), (6, 3), (4, 4)]),
        4: quarter_lines(4, [(9, 0), (9, 0), (9, 0), (9, 0)]),
        5: quarter_lines(5, [(4, 4), (4, 4), (4, 4), (4, 4)]),
    }


@pytest.fixture
def normalized_season(sample_games, sample_stats, sample_opponents):
    """The sample season after normalization."""
    return GameDataNormalizer(sample_opponents).normalize(sample_games, sample_stats)


@pytest.fixture
def make_game() -> Callable[..., object]:
    """
    Factory for a single normalized game from quarter (for, against) pairs.

    Games get consecutive dates in creation order.
    """
    normalizer = GameDataNormalizer()
    counter = {"n": 0}

    def _make(
        scores: Sequence[tuple[int, int]],
        opponent: str | None = "Rivals",
        position: str | None = None,
    ):
        counter["n"] += 1
        game_id = counter["n"]
        game = Game(
            id=game_id,
            date=datetime.date(2024, 1, 1) + datetime.timedelta(days=7 * game_id),
            is_completed=True,
            opponent_name=opponent,
        )
        return normalizer.normalize_game(game, quarter_lines(game_id, scores, position))

    return _make
