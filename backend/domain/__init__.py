"""
Domain entities for the Snake simulation engine.

This module contains the core game entities that are independent of
infrastructure concerns (timing, input devices, rendering).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, DIRECTIONS, VALID_MOVES,
    BOUNDED, TOROIDAL, WALL, SELF, OBSTACLE,
)
from .position import Position
from .snake import Snake
from .outcome import StepOutcome
from .game_state import GameState
from .engine import SnakeEngine

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'DIRECTIONS', 'VALID_MOVES',
    'BOUNDED', 'TOROIDAL', 'WALL', 'SELF', 'OBSTACLE',
    'Position',
    'Snake',
    'StepOutcome',
    'GameState',
    'SnakeEngine',
]
