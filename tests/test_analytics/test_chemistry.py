"""
Tests for Team Chemistry Module
"""

import pytest

from team_analytics.analytics.chemistry import (
    ChemistryImpact,
    ChemistryResult,
    TeamChemistryAnalyzer,
)


class TestTeamChemistryAnalyzer:
    """Tests for TeamChemistryAnalyzer class."""

    @pytest.fixture
    def analyzer(self):
        """Create a chemistry analyzer."""
        return TeamChemistryAnalyzer()

    @pytest.mark.parametrize(
        "delta,impact",
        [
            (2, ChemistryImpact.POSITIVE),
            (1, ChemistryImpact.NEUTRAL),
            (0, ChemistryImpact.NEUTRAL),
            (-1, ChemistryImpact.NEUTRAL),
            (-2, ChemistryImpact.NEGATIVE),
        ],
    )
    def test_classify_delta(self, analyzer, delta, impact):
        """Test the threshold is exclusive in both directions."""
        assert analyzer.classify_delta(delta) == impact

    def test_three_transitions_per_game(self, analyzer, make_game):
        """Test each game yields Q1->Q2, Q2->Q3 and Q3->Q4."""
        # Nets 2, 0, 4, 0 -> deltas -2, +4, -4
        game = make_game([(5, 3), (4, 4), (6, 2), (5, 5)])

        assert list(analyzer.transitions(game)) == [
            ChemistryImpact.NEGATIVE,
            ChemistryImpact.POSITIVE,
            ChemistryImpact.NEGATIVE,
        ]

    def test_sample_season(self, analyzer, normalized_season):
        """Test counts over the sample season."""
        result = analyzer.analyze(normalized_season)

        assert result == ChemistryResult(positive=6, negative=3, neutral=3, transitions=12)

    def test_no_games(self, analyzer):
        """Test empty input."""
        assert analyzer.analyze([]) == ChemistryResult()
