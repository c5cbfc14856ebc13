"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Optional, Tuple

from .position import Position


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Position from head at index 0 to tail at the end
        alive: whether the snake is still alive
        death_reason: e.g., 'wall', 'self', 'obstacle'
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(Position(x, y) for x, y in positions)
        if not self.positions:
            raise ValueError("Snake needs at least one segment.")
        self.alive = True
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Position:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def grow_head(self, position: Tuple[int, int]) -> None:
        self.positions.appendleft(Position(*position))

    def drop_tail(self) -> Position:
        return self.positions.pop()

    def kill(self, reason: str) -> None:
        self.alive = False
        self.death_reason = reason

    def __contains__(self, position) -> bool:
        return position in self.positions

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self):
        return iter(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self)} alive={self.alive}>"
