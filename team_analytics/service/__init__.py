"""
Service Module

Provides the entry point that composes the analyzers into one snapshot.
"""

from team_analytics.service.aggregator import (
    AnalyticsAggregator,
    AnalyticsSnapshot,
    compute_analytics,
)

__all__ = ["AnalyticsAggregator", "AnalyticsSnapshot", "compute_analytics"]
