"""
Greedy player implementation - heads for the food along safe cells.
"""

from typing import Optional, Tuple

from domain.constants import TOROIDAL
from domain.game_state import GameState
from .base import Player, safe_moves


def _axis_distance(a: int, b: int, size: int, wraps: bool) -> int:
    d = abs(a - b)
    return min(d, size - d) if wraps else d


def grid_distance(a: Tuple[int, int], b: Tuple[int, int], cols: int, rows: int, wraps: bool) -> int:
    """Manhattan distance, taking the short way around on a toroidal board."""
    return (
        _axis_distance(a[0], b[0], cols, wraps)
        + _axis_distance(a[1], b[1], rows, wraps)
    )


class GreedyPlayer(Player):
    """
    Picks the safe move that lands closest to the food. Ties keep the current
    heading when possible, otherwise fall back to alphabetical order so the
    choice is deterministic. With no food on the board it just survives.
    """

    name = "greedy"

    def get_move(self, game_state: GameState) -> Optional[str]:
        moves = safe_moves(game_state)
        if not moves:
            return None

        if game_state.food is None:
            return sorted(moves)[0]

        wraps = game_state.boundary == TOROIDAL

        def score(move: str):
            target = moves[move]
            distance = grid_distance(target, game_state.food, game_state.cols, game_state.rows, wraps)
            straight = target == _straight_ahead(game_state)
            return (distance, not straight, move)

        return min(moves, key=score)


def _straight_ahead(game_state: GameState) -> Tuple[int, int]:
    hx, hy = game_state.head
    dx, dy = game_state.direction
    x, y = hx + dx, hy + dy
    if game_state.boundary == TOROIDAL:
        return (x % game_state.cols, y % game_state.rows)
    return (x, y)
