"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from .constants import name_of


class GameState:
    """
    A read-only snapshot of the engine, handed to players and renderers.

    Attributes:
        cols, rows: board dimensions
        snake: list of (x, y) from head to tail
        food: (x, y) of the food, or None when the board is full
        obstacles: frozenset of (x, y) obstacle cells
        direction: the vector applied on the last step
        score: food eaten this round
        over: whether the round has ended in a collision
        won: whether the board is full (no cell left for food)
        ticks: number of completed steps this round
        boundary: 'bounded' or 'toroidal'
    """

    def __init__(
        self,
        cols: int,
        rows: int,
        snake: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        obstacles: FrozenSet[Tuple[int, int]],
        direction: Tuple[int, int],
        score: int,
        over: bool,
        won: bool = False,
        ticks: int = 0,
        boundary: Optional[str] = None,
    ):
        self.cols = cols
        self.rows = rows
        self.snake = snake
        self.food = food
        self.obstacles = obstacles
        self.direction = direction
        self.score = score
        self.over = over
        self.won = won
        self.ticks = ticks
        self.boundary = boundary

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = apple (food)
        # = obstacle
        T = snake body
        H = snake head
        Row 0 is at the top, matching the screen convention, with x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.cols)] for _ in range(self.rows)]

        for ox, oy in self.obstacles:
            board[oy][ox] = '#'

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'A'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = []
        for y in range(self.rows):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Single-digit labels keep the columns aligned on wide boards
        result.append("   " + " ".join(str(i % 10) for i in range(self.cols)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-friendly view of the snapshot. Tuples become [x, y] lists once dumped.
        """
        return {
            "cols": self.cols,
            "rows": self.rows,
            "snake": [list(p) for p in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "obstacles": sorted(list(p) for p in self.obstacles),
            "direction": name_of(self.direction),
            "score": self.score,
            "over": self.over,
            "won": self.won,
            "ticks": self.ticks,
            "boundary": self.boundary,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.ticks}, score={self.score}, food={self.food}, "
            f"length={len(self.snake)}, over={self.over}>"
        )
