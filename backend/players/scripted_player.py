"""
Scripted player implementation - replays a fixed list of moves.
"""

from typing import Iterable, List, Optional

from domain.constants import direction_from_name
from domain.game_state import GameState
from .base import Player


class ScriptedPlayer(Player):
    """
    Plays the given moves one per tick, then keeps course.

    Entries may be None to skip a tick. Moves are validated up front so a typo
    fails when the script is built rather than halfway through a game.
    """

    name = "scripted"

    def __init__(self, moves: Iterable[Optional[str]] = ()):
        self.moves: List[Optional[str]] = []
        for move in moves:
            if move is not None:
                direction_from_name(move)
                move = move.strip().upper()
            self.moves.append(move)
        self.index = 0

    def get_move(self, game_state: GameState) -> Optional[str]:
        if self.index >= len(self.moves):
            return None
        move = self.moves[self.index]
        self.index += 1
        return move

    def reset(self) -> None:
        self.index = 0

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.moves)
