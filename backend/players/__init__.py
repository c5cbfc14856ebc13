"""
Player implementations for the Snake engine.

This module contains the player abstractions and implementations
that decide which way the snake turns each tick.
"""

from .base import Player, possible_moves, safe_moves
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .scripted_player import ScriptedPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'possible_moves',
    'safe_moves',
    'RandomPlayer',
    'GreedyPlayer',
    'ScriptedPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
