"""
Grid position value type and the small amount of vector math the engine needs.
"""

from typing import NamedTuple, Tuple


class Position(NamedTuple):
    """An immutable (x, y) grid cell. Compares equal to a plain (x, y) tuple."""

    x: int
    y: int


def add(a: Tuple[int, int], b: Tuple[int, int]) -> Position:
    return Position(a[0] + b[0], a[1] + b[1])


def wrap(pos: Tuple[int, int], cols: int, rows: int) -> Position:
    """Normalize a position onto a toroidal grid (floored modulo keeps negatives in range)."""
    return Position(pos[0] % cols, pos[1] % rows)


def in_bounds(pos: Tuple[int, int], cols: int, rows: int) -> bool:
    x, y = pos
    return 0 <= x < cols and 0 <= y < rows


def is_reversal(current: Tuple[int, int], candidate: Tuple[int, int]) -> bool:
    """True when candidate points exactly opposite to current."""
    return candidate[0] == -current[0] and candidate[1] == -current[1]
