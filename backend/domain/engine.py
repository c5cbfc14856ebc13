"""
Simulation engine for a single snake.

The engine owns all round state and only advances when step() is called.
It knows nothing about wall-clock time, frames or input devices; a driver
calls set_direction() and step() once per logical tick and renderers read
the public attributes (or get_current_state()) afterwards.
"""

import logging
import random
from typing import FrozenSet, List, Optional, Tuple, Union

from .constants import (
    BOUNDARY_POLICIES,
    BOUNDED,
    DEFAULT_BOUNDARY,
    DEFAULT_COLS,
    DEFAULT_ROWS,
    INITIAL_SNAKE_LENGTH,
    OBSTACLE,
    RIGHT,
    SELF,
    TOROIDAL,
    WALL,
    coerce_direction,
    default_obstacle_count,
)
from .game_state import GameState
from .outcome import StepOutcome
from .position import Position, add, in_bounds, is_reversal, wrap
from .snake import Snake

logger = logging.getLogger(__name__)

DirectionLike = Union[str, Tuple[int, int]]


class SnakeEngine:
    """
    Manages:
      - Board (cols, rows) and boundary policy
      - The snake and its two direction slots
      - Food and obstacles
      - Score, growth tokens and the terminal flag
    """

    def __init__(
        self,
        cols: int = DEFAULT_COLS,
        rows: int = DEFAULT_ROWS,
        obstacle_count: Optional[int] = None,
        boundary: str = DEFAULT_BOUNDARY,
        rng: Optional[random.Random] = None,
    ):
        if cols <= 0 or rows <= 0:
            raise ValueError(f"Board dimensions must be positive, got {cols}x{rows}.")
        min_cols = 2 * (INITIAL_SNAKE_LENGTH - 1)
        if cols < min_cols:
            raise ValueError(
                f"Board needs at least {min_cols} columns for the starting snake, got {cols}."
            )
        if boundary not in BOUNDARY_POLICIES:
            raise ValueError(
                f"Unknown boundary policy '{boundary}'. Expected one of {sorted(BOUNDARY_POLICIES)}"
            )

        self.cols = cols
        self.rows = rows
        self.boundary = boundary
        if obstacle_count is None:
            obstacle_count = default_obstacle_count(cols, rows)
        self.obstacle_count = max(0, int(obstacle_count))
        self.rng = rng or random.Random()

        self.body: Snake
        self.direction: Position
        self.next_direction: Position
        self.food: Optional[Position] = None
        self.obstacles: FrozenSet[Position] = frozenset()
        self.score = 0
        self.over = False
        self.grow_amount = 0
        self.ticks = 0

        self.reset()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def snake(self) -> List[Position]:
        """Snake segments, head first. A copy; mutate the engine through step() only."""
        return list(self.body.positions)

    @property
    def head(self) -> Position:
        return self.body.head

    @property
    def death_reason(self) -> Optional[str]:
        return self.body.death_reason

    @property
    def won(self) -> bool:
        """The board is full: the round is still live but there is nowhere left to put food."""
        return not self.over and self.food is None

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            cols=self.cols,
            rows=self.rows,
            snake=self.snake,
            food=self.food,
            obstacles=self.obstacles,
            direction=self.direction,
            score=self.score,
            over=self.over,
            won=self.won,
            ticks=self.ticks,
            boundary=self.boundary,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Start a new round from the canonical position: centred, three segments, heading right."""
        mid_x = self.cols // 2
        mid_y = self.rows // 2
        self.body = Snake([(mid_x - i, mid_y) for i in range(INITIAL_SNAKE_LENGTH)])
        self.direction = RIGHT
        self.next_direction = RIGHT
        self.score = 0
        self.over = False
        self.grow_amount = 0
        self.ticks = 0

        # Obstacles first so food placement can avoid them
        self.generate_obstacles(self.obstacle_count)
        self.place_food()

        logger.debug(
            "Reset %dx%d %s board: snake=%s obstacles=%d food=%s",
            self.cols, self.rows, self.boundary, self.snake, len(self.obstacles), self.food,
        )

    def generate_obstacles(self, count: int) -> None:
        """
        Pick `count` distinct cells not covered by the snake, uniformly at random.
        The count is clamped to the number of free cells.
        """
        if count <= 0:
            self.obstacles = frozenset()
            return

        free = self._free_cells(include_obstacles=False)
        self.obstacles = frozenset(self.rng.sample(free, min(count, len(free))))

    def place_food(self) -> Optional[Position]:
        """
        Put the food on a random cell that holds neither the snake nor an obstacle.
        Sets food to None when the board is full.
        """
        free = self._free_cells(include_obstacles=True)
        if not free:
            self.food = None
            logger.info("No free cell left for food (score %d)", self.score)
            return None

        self.food = self.rng.choice(free)
        return self.food

    def _free_cells(self, include_obstacles: bool) -> List[Position]:
        occupied = set(self.body.positions)
        if include_obstacles:
            occupied.update(self.obstacles)
        return [
            Position(x, y)
            for x in range(self.cols)
            for y in range(self.rows)
            if (x, y) not in occupied
        ]

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_direction(self, direction: DirectionLike) -> bool:
        """
        Queue a direction for the next step.

        Reversing straight into the neck is ignored. Several calls between two
        steps are fine: the last accepted one wins.

        Args:
            direction: a unit vector such as (0, -1), or a name such as "UP"

        Returns:
            True if the direction was queued, False if it was rejected as a reversal.

        Raises:
            ValueError: If the value is not one of the four unit directions.
        """
        vector = coerce_direction(direction)
        if is_reversal(self.direction, vector):
            return False
        self.next_direction = vector
        return True

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def step(self) -> StepOutcome:
        """
        Advance the round by one tick:
          1) No-op if the round is already over
          2) Commit the queued direction
          3) Resolve the boundary (wall or wrap)
          4) Check obstacles, then every current segment including the tail
          5) Move, eat and grow
        """
        if self.over:
            return StepOutcome(ate=False, died=True)

        self.direction = self.next_direction
        candidate = add(self.body.head, self.direction)

        if self.boundary == TOROIDAL:
            candidate = wrap(candidate, self.cols, self.rows)
        elif self.boundary == BOUNDED and not in_bounds(candidate, self.cols, self.rows):
            return self._die(WALL, candidate)

        if candidate in self.obstacles:
            return self._die(OBSTACLE, candidate)

        # The tail still counts as occupied here; it has not moved yet.
        if candidate in self.body:
            return self._die(SELF, candidate)

        self.body.grow_head(candidate)

        ate = False
        if self.food is not None and candidate == self.food:
            ate = True
            self.score += 1
            self.grow_amount += 1
            self.place_food()

        if self.grow_amount > 0:
            self.grow_amount -= 1
        else:
            self.body.drop_tail()

        self.ticks += 1
        return StepOutcome(ate=ate, died=False)

    def _die(self, reason: str, candidate: Position) -> StepOutcome:
        self.over = True
        self.body.kill(reason)
        logger.info(
            "Snake died (%s) moving to %s after %d ticks with score %d",
            reason, tuple(candidate), self.ticks, self.score,
        )
        return StepOutcome(ate=False, died=True, reason=reason)

    def __repr__(self):
        return (
            f"<SnakeEngine {self.cols}x{self.rows} {self.boundary} "
            f"score={self.score} length={len(self.body)} over={self.over}>"
        )
