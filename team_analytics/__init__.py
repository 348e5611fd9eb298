"""
Team Performance Analytics

A deterministic analytics engine that turns a team's completed match
results (per-quarter scoring lines) into a performance snapshot:
momentum, consistency, streaks, pressure performance, peak quarters,
comeback potential and opponent-strength tiering.
"""

from team_analytics.service.aggregator import (
    AnalyticsAggregator,
    AnalyticsSnapshot,
    compute_analytics,
)

__version__ = "0.1.0"
__author__ = "Team Analytics Developers"

__all__ = ["AnalyticsAggregator", "AnalyticsSnapshot", "compute_analytics"]
