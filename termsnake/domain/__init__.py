"""
Domain entities for the termsnake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (terminal, keyboard, files).
"""

from .constants import (
    Direction, Outcome, UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITES,
    BASE_SPEED, LEVEL_SPEED_FACTOR, SPEED_INCREMENT, BASE_LENGTH,
    is_opposite,
)
from .geometry import advance, in_bounds
from .snake import Snake
from .food import generate_food_position
from .game_state import GameState

__all__ = [
    'Direction', 'Outcome',
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITES',
    'BASE_SPEED', 'LEVEL_SPEED_FACTOR', 'SPEED_INCREMENT', 'BASE_LENGTH',
    'is_opposite',
    'advance', 'in_bounds',
    'Snake',
    'generate_food_position',
    'GameState',
]
