"""
Game constants for the Snake engine.
"""

from typing import Dict, Optional, Sequence, Tuple, Union

from .position import Position

# Movement directions (screen convention: y grows downwards)
UP = Position(0, -1)
DOWN = Position(0, 1)
LEFT = Position(-1, 0)
RIGHT = Position(1, 0)

DIRECTIONS: Dict[str, Position] = {
    "UP": UP,
    "DOWN": DOWN,
    "LEFT": LEFT,
    "RIGHT": RIGHT,
}
VALID_MOVES = set(DIRECTIONS)

# Boundary policies
BOUNDED = "bounded"
TOROIDAL = "toroidal"
BOUNDARY_POLICIES = {BOUNDED, TOROIDAL}

# Death reasons
WALL = "wall"
SELF = "self"
OBSTACLE = "obstacle"

# Game settings
DEFAULT_COLS = 24
DEFAULT_ROWS = 24
DEFAULT_BOUNDARY = TOROIDAL
DEFAULT_TICK_MS = 120
INITIAL_SNAKE_LENGTH = 3
OBSTACLE_DENSITY = 50  # one obstacle per this many cells


def default_obstacle_count(cols: int, rows: int) -> int:
    """Roughly 2% of the board."""
    return (cols * rows) // OBSTACLE_DENSITY


def direction_from_name(name: str) -> Position:
    """
    Map a move name such as "UP" (case-insensitive) to its unit vector.

    Raises:
        ValueError: If the name is not one of UP, DOWN, LEFT, RIGHT.
    """
    key = str(name).strip().upper()
    if key not in DIRECTIONS:
        raise ValueError(f"Unknown direction '{name}'. Expected one of {sorted(VALID_MOVES)}")
    return DIRECTIONS[key]


def coerce_direction(direction: Union[str, Sequence[int]]) -> Position:
    """
    Turn a move name or a unit vector into one of UP, DOWN, LEFT, RIGHT.

    The canonical constant is returned, so an equal-but-float vector such as
    (0.0, -1.0) never reaches the grid.

    Raises:
        ValueError: If the value is not a name or one of the four unit vectors.
    """
    if isinstance(direction, str):
        return direction_from_name(direction)
    try:
        x, y = direction
    except (TypeError, ValueError):
        raise ValueError(f"Direction must be a unit vector, got {direction!r}.") from None
    for vector in DIRECTIONS.values():
        if vector == (x, y):
            return vector
    raise ValueError(f"Direction must be a unit vector, got {direction!r}.")


def name_of(direction: Tuple[int, int]) -> Optional[str]:
    for name, vector in DIRECTIONS.items():
        if vector == direction:
            return name
    return None
