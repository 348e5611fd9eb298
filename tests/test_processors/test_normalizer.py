"""
Tests for Game Data Normalizer

Tests eligibility filtering, chronological ordering and quarter score resolution.
"""

import datetime

import pytest

from team_analytics.models.game import Game, Opponent, QuarterStatLine
from team_analytics.processors.normalizer import GameDataNormalizer


class TestGameDataNormalizer:
    """Tests for GameDataNormalizer class."""

    @pytest.fixture
    def normalizer(self, sample_opponents):
        """Create a normalizer with the sample opponents."""
        return GameDataNormalizer(sample_opponents)

    def test_filters_ineligible_games(self, normalized_season):
        """Test unplayed games and games without statistics are dropped."""
        game_ids = [g.game_id for g in normalized_season]

        assert 6 not in game_ids  # not completed
        assert 4 not in game_ids  # bye, statistics not allowed

    def test_sorted_by_date(self, normalized_season):
        """Test games come back oldest first."""
        assert [g.game_id for g in normalized_season] == [1, 2, 3, 5]

    def test_same_date_keeps_input_order(self, normalizer):
        """Test the date sort is stable."""
        day = datetime.date(2024, 6, 1)
        games = [
            Game(id=20, date=day, is_completed=True),
            Game(id=10, date=day, is_completed=True),
            Game(id=30, date=datetime.date(2024, 5, 1), is_completed=True),
        ]

        result = normalizer.normalize(games, {})

        assert [g.game_id for g in result] == [30, 20, 10]

    def test_quarter_scores_summed(self, normalizer):
        """Test multiple stat lines in one quarter are summed."""
        game = Game(id=1, date=datetime.date(2024, 4, 6), is_completed=True)
        lines = [
            QuarterStatLine(game_id=1, quarter=1, goals_for=2, goals_against=1, position="GS"),
            QuarterStatLine(game_id=1, quarter=1, goals_for=3, goals_against=0, position="GA"),
            QuarterStatLine(game_id=1, quarter=3, goals_for=1, goals_against=4),
        ]

        result = normalizer.normalize_game(game, lines)

        assert result.quarter(1).team_score == 5
        assert result.quarter(1).opponent_score == 1
        assert result.quarter(2).team_score == 0
        assert result.quarter(3).opponent_score == 4
        assert result.recorded_quarters == frozenset({1, 3})

    def test_game_without_stats_kept_as_zero(self, normalizer):
        """Test games with no stat lines stay in with a 0-0 score."""
        games = [Game(id=9, date=datetime.date(2024, 4, 6), is_completed=True)]

        result = normalizer.normalize(games, {})

        assert len(result) == 1
        assert result[0].team_score == 0
        assert result[0].opponent_score == 0
        assert len(result[0].quarters) == 4
        assert result[0].recorded_quarters == frozenset()

    def test_out_of_range_quarters_ignored(self, normalizer):
        """Test stat lines for quarters outside 1-4 are dropped."""
        game = Game(id=1, date=datetime.date(2024, 4, 6), is_completed=True)
        lines = [
            QuarterStatLine(game_id=1, quarter=0, goals_for=5),
            QuarterStatLine(game_id=1, quarter=2, goals_for=3),
            QuarterStatLine(game_id=1, quarter=5, goals_against=7),
        ]

        result = normalizer.normalize_game(game, lines)

        assert result.team_score == 3
        assert result.opponent_score == 0
        assert len(result.stat_lines) == 1

    def test_missing_stats_map(self, normalizer, sample_games):
        """Test a missing stats map means every game is scoreless."""
        result = normalizer.normalize(sample_games)

        assert len(result) == 4
        assert all(g.team_score == 0 and g.opponent_score == 0 for g in result)

    def test_opponent_name_resolution(self, normalized_season):
        """Test names come from the game first, then the opponent list."""
        names = {g.game_id: g.opponent_name for g in normalized_season}

        assert names[1] == "Eagles"
        assert names[2] == "Hawks"
        assert names[5] == "Hawks"

    def test_unknown_opponent_id(self):
        """Test an unknown opponent ID resolves to no name."""
        normalizer = GameDataNormalizer([Opponent(id=1, team_name="Eagles")])
        game = Game(id=1, date=datetime.date(2024, 4, 6), is_completed=True, opponent_id=99)

        assert normalizer.resolve_opponent_name(game) is None

    def test_input_not_mutated(self, normalizer, sample_games, sample_stats):
        """Test normalizing leaves the caller's lists untouched."""
        games_before = list(sample_games)
        stats_before = {k: list(v) for k, v in sample_stats.items()}

        normalizer.normalize(sample_games, sample_stats)

        assert sample_games == games_before
        assert sample_stats == stats_before
