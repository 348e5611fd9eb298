"""
Data Models Module

This module contains the models for games, stat lines and derived scores.

Models:
    - Game: A fixture with completion and eligibility flags
    - QuarterStatLine: Goals for/against for one quarter of a game
    - Opponent: An opposing team
    - QuarterScore / NormalizedGame: Resolved per-quarter and final scores
    - ResultLabel: Win, Loss or Draw
"""

from team_analytics.models.game import (
    QUARTERS,
    Game,
    NormalizedGame,
    Opponent,
    QuarterScore,
    QuarterStatLine,
    ResultLabel,
)

__all__ = [
    "QUARTERS",
    "Game",
    "NormalizedGame",
    "Opponent",
    "QuarterScore",
    "QuarterStatLine",
    "ResultLabel",
]
