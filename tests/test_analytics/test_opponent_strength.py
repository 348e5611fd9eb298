"""
Tests for Opponent Strength Module

Validates two-pass opponent tiering and per-tier aggregation.
"""

import pytest

from team_analytics.analytics.opponent_strength import (
    OpponentStrengthClassifier,
    OpponentTier,
    TierPerformance,
)
from team_analytics.config import OpponentStrengthConfig

WIN = [(5, 1), (0, 0), (0, 0), (0, 0)]
LOSS = [(1, 5), (0, 0), (0, 0), (0, 0)]
DRAW = [(3, 3), (0, 0), (0, 0), (0, 0)]


class TestOpponentStrengthClassifier:
    """Tests for OpponentStrengthClassifier class."""

    @pytest.fixture
    def classifier(self):
        """Create an opponent classifier with default cutoffs."""
        return OpponentStrengthClassifier()

    @pytest.mark.parametrize(
        "win_rate,tier",
        [
            (100.0, OpponentTier.STRONG),
            (70.0, OpponentTier.STRONG),
            (69.9, OpponentTier.MEDIUM),
            (30.0, OpponentTier.MEDIUM),
            (29.9, OpponentTier.WEAK),
            (0.0, OpponentTier.WEAK),
        ],
    )
    def test_classify_win_rate(self, classifier, win_rate, tier):
        """Test tier cutoffs."""
        assert classifier.classify_win_rate(win_rate) == tier

    def test_tier_applies_to_every_meeting(self, classifier, make_game):
        """Test an opponent beaten 4 of 5 times is strong even in the loss."""
        games = [make_game(WIN, "Eagles") for _ in range(4)] + [make_game(LOSS, "Eagles")]

        result = classifier.analyze(games)

        assert result.vs_strong.total == 5
        assert result.vs_strong.wins == 4
        assert result.vs_medium.total == 0
        assert result.vs_weak.total == 0
        assert result.opponents[0].win_rate == pytest.approx(80.0)
        assert result.opponents[0].tier == OpponentTier.STRONG

    def test_sample_season(self, classifier, normalized_season):
        """Test Eagles (2/2) are strong and Hawks (0/2) are weak."""
        result = classifier.analyze(normalized_season)

        assert result.vs_strong == TierPerformance(wins=2, total=2, avg_score=19.0)
        assert result.vs_weak == TierPerformance(wins=0, total=2, avg_score=15.0)
        assert result.vs_medium == TierPerformance()
        assert [r.name for r in result.opponents] == ["Eagles", "Hawks"]

    def test_medium_tier(self, classifier, make_game):
        """Test a 50% record is medium and draws do not count as wins."""
        games = [make_game(WIN, "Kites"), make_game(DRAW, "Kites")]

        result = classifier.analyze(games)

        assert result.vs_medium.total == 2
        assert result.vs_medium.wins == 1
        assert result.vs_medium.avg_score == 4.0

    def test_byes_excluded(self, classifier, make_game):
        """Test bye rounds and unresolved opponents are skipped."""
        games = [
            make_game(WIN, "Bye"),
            make_game(WIN, "BYE"),
            make_game(WIN, None),
            make_game(LOSS, "Owls"),
        ]

        result = classifier.analyze(games)

        assert [r.name for r in result.opponents] == ["Owls"]
        assert result.vs_weak.total == 1
        assert result.vs_strong.total == 0

    def test_no_games(self, classifier):
        """Test empty input gives zeroed tiers."""
        result = classifier.analyze([])

        for tier in OpponentTier:
            assert result.tier(tier) == TierPerformance()

    def test_custom_cutoffs(self, make_game):
        """Test tier cutoffs are configurable."""
        classifier = OpponentStrengthClassifier(
            OpponentStrengthConfig(strong_win_rate=50.0, weak_win_rate=10.0)
        )
        games = [make_game(WIN, "Kites"), make_game(LOSS, "Kites")]

        result = classifier.analyze(games)

        assert result.vs_strong.total == 2
