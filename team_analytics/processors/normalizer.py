"""
Game Data Normalizer

Filters a club's fixture list down to the games that count for analysis
and resolves each one's per-quarter and final scores from its stat lines.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from loguru import logger

from team_analytics.models.game import (
    QUARTERS,
    Game,
    NormalizedGame,
    Opponent,
    QuarterScore,
    QuarterStatLine,
)


class GameDataNormalizer:
    """
    Builds the chronologically sorted game set every analyzer consumes.

    Workflow:
    1. Keep games that are completed and allow statistics
    2. Sort by date ascending (stable, so same-day games keep input order)
    3. Sum stat lines per quarter; games with no stat lines score 0-0
    4. Resolve the opponent name from the game or the opponent list
    """

    def __init__(self, opponents: Iterable[Opponent] | None = None) -> None:
        """
        Initialize the normalizer.

        Args:
            opponents: Known opponents, used when a game carries only an opponent_id
        """
        self.opponent_names: dict[int, str] = {
            opponent.id: opponent.team_name for opponent in (opponents or ())
        }

    def normalize(
        self,
        games: Iterable[Game],
        stats_by_game_id: Mapping[int, Sequence[QuarterStatLine]] | None = None,
    ) -> tuple[NormalizedGame, ...]:
        """
        Normalize a game list.

        Args:
            games: All games for the team, in any order
            stats_by_game_id: Stat lines keyed by game ID (may be sparse)

        Returns:
            Eligible games, oldest first, with scores resolved
        """
        stats_by_game_id = stats_by_game_id or {}
        all_games = list(games)
        eligible = sorted(
            (game for game in all_games if game.is_eligible),
            key=lambda game: game.date,
        )

        normalized = tuple(
            self.normalize_game(game, stats_by_game_id.get(game.id, ()))
            for game in eligible
        )

        logger.debug(
            f"Normalized {len(normalized)} eligible games "
            f"({len(all_games) - len(normalized)} skipped)"
        )
        return normalized

    def normalize_game(
        self,
        game: Game,
        stat_lines: Sequence[QuarterStatLine],
    ) -> NormalizedGame:
        """
        Resolve one game's quarter scores.

        Stat lines for quarters outside 1-4 are dropped.

        Args:
            game: The game
            stat_lines: Its recorded stat lines (may be empty)

        Returns:
            NormalizedGame with four quarter entries
        """
        valid_lines = tuple(line for line in stat_lines if line.quarter in QUARTERS)
        if len(valid_lines) != len(stat_lines):
            logger.debug(
                f"Game {game.id}: ignored {len(stat_lines) - len(valid_lines)} "
                f"stat lines with out-of-range quarters"
            )

        quarters = tuple(
            QuarterScore(
                quarter=quarter,
                team_score=sum(l.goals_for for l in valid_lines if l.quarter == quarter),
                opponent_score=sum(l.goals_against for l in valid_lines if l.quarter == quarter),
            )
            for quarter in QUARTERS
        )

        return NormalizedGame(
            game=game,
            quarters=quarters,
            opponent_name=self.resolve_opponent_name(game),
            recorded_quarters=frozenset(line.quarter for line in valid_lines),
            stat_lines=valid_lines,
        )

    def resolve_opponent_name(self, game: Game) -> str | None:
        """Get the opponent's name, preferring the name stored on the game."""
        if game.opponent_name:
            return game.opponent_name
        if game.opponent_id is not None:
            return self.opponent_names.get(game.opponent_id)
        return None
