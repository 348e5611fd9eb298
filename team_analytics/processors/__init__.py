"""
Data Processors Module

Processors that turn raw fixture data into the normalized game set.

Processors:
    - GameDataNormalizer: Eligibility filter, chronological sort, quarter score resolution
"""

from team_analytics.processors.normalizer import GameDataNormalizer

__all__ = ["GameDataNormalizer"]
