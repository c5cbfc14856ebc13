"""
Base player interface for the game engine.
"""

from typing import Dict, Optional

from domain.constants import BOUNDED, DIRECTIONS
from domain.game_state import GameState
from domain.position import Position, add, in_bounds, is_reversal, wrap


class Player:
    """
    Base class/interface for player logic.

    A player is an input collaborator: once per tick it looks at a snapshot
    of the board and names the direction it wants, or None to keep course.
    """

    name = "player"

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", or None to keep the current heading
        """
        raise NotImplementedError

    def reset(self) -> None:
        """Called when the round restarts. Stateless players ignore it."""


def possible_moves(game_state: GameState) -> Dict[str, Position]:
    """
    Map every move that is not a reversal to the cell the head would land on,
    with the board's boundary policy already applied. Cells off a bounded board
    are left out.
    """
    moves: Dict[str, Position] = {}
    for move, vector in DIRECTIONS.items():
        if is_reversal(game_state.direction, vector):
            continue
        target = add(game_state.head, vector)
        if game_state.boundary == BOUNDED:
            if not in_bounds(target, game_state.cols, game_state.rows):
                continue
        else:
            target = wrap(target, game_state.cols, game_state.rows)
        moves[move] = target
    return moves


def safe_moves(game_state: GameState) -> Dict[str, Position]:
    """
    Filter possible_moves() down to cells that are not an obstacle or any
    snake segment. The tail counts as occupied, matching the engine.
    """
    blocked = set(game_state.snake) | set(game_state.obstacles)
    return {
        move: target
        for move, target in possible_moves(game_state).items()
        if target not in blocked
    }
