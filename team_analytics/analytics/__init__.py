"""
Analytics Module

Independent analyzers that all consume the same normalized game set.

Components:
    - ResultClassifier: Win/Loss/Draw policy and season record
    - MomentumAnalyzer: Recency-weighted form trend
    - ConsistencyAnalyzer: Scoring spread mapped to a 0-100 index
    - StreakAnalyzer: Current and longest win/loss streaks
    - PressurePerformanceAnalyzer: Close games, halftime leads and deficits
    - PeakWindowAnalyzer: Strongest and weakest quarter
    - ComebackAnalyzer: Deficit recovery at quarter breaks
    - OpponentStrengthClassifier: Self-referential opponent tiers
    - TeamChemistryAnalyzer: Quarter-transition heuristic
    - PositionEfficiencyAnalyzer: Net goals by position and quarter
"""

from team_analytics.analytics.results import (
    ResultClassifier,
    SeasonRecord,
    classify_result,
)
from team_analytics.analytics.momentum import (
    MomentumAnalyzer,
    MomentumResult,
    MomentumTrend,
)
from team_analytics.analytics.consistency import (
    ConsistencyAnalyzer,
    ConsistencyBand,
    ConsistencyResult,
)
from team_analytics.analytics.streaks import CurrentStreak, StreakAnalyzer, StreakResult
from team_analytics.analytics.pressure import (
    ComebackRecord,
    PressurePerformanceAnalyzer,
    PressureRecord,
    PressureResult,
)
from team_analytics.analytics.peak_window import (
    PeakWindowAnalyzer,
    PeakWindowResult,
    QuarterPerformance,
)
from team_analytics.analytics.comeback import (
    ComebackAnalyzer,
    ComebackResult,
    DeficitInstance,
)
from team_analytics.analytics.opponent_strength import (
    OpponentRecord,
    OpponentStrengthClassifier,
    OpponentStrengthResult,
    OpponentTier,
    TierPerformance,
)
from team_analytics.analytics.chemistry import (
    ChemistryImpact,
    ChemistryResult,
    TeamChemistryAnalyzer,
)
from team_analytics.analytics.position_efficiency import (
    POSITIONS,
    PositionEfficiency,
    PositionEfficiencyAnalyzer,
)

__all__ = [
    # Results
    "ResultClassifier",
    "SeasonRecord",
    "classify_result",
    # Momentum
    "MomentumAnalyzer",
    "MomentumResult",
    "MomentumTrend",
    # Consistency
    "ConsistencyAnalyzer",
    "ConsistencyBand",
    "ConsistencyResult",
    # Streaks
    "CurrentStreak",
    "StreakAnalyzer",
    "StreakResult",
    # Pressure
    "ComebackRecord",
    "PressurePerformanceAnalyzer",
    "PressureRecord",
    "PressureResult",
    # Peak window
    "PeakWindowAnalyzer",
    "PeakWindowResult",
    "QuarterPerformance",
    # Comebacks
    "ComebackAnalyzer",
    "ComebackResult",
    "DeficitInstance",
    # Opponent strength
    "OpponentRecord",
    "OpponentStrengthClassifier",
    "OpponentStrengthResult",
    "OpponentTier",
    "TierPerformance",
    # Chemistry
    "ChemistryImpact",
    "ChemistryResult",
    "TeamChemistryAnalyzer",
    # Position efficiency
    "POSITIONS",
    "PositionEfficiency",
    "PositionEfficiencyAnalyzer",
]
