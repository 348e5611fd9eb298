"""
CLI Module for Team Performance Analytics

Runs the analytics engine over an exported season file.

Usage:
    python -m cli.main analyze season.json
"""

from cli.main import main

__all__ = ["main"]
