"""
Game constants for termsnake.
"""

from enum import Enum


class Direction(Enum):
    LEFT = "LEFT"
    UP = "UP"
    RIGHT = "RIGHT"
    DOWN = "DOWN"


LEFT = Direction.LEFT
UP = Direction.UP
RIGHT = Direction.RIGHT
DOWN = Direction.DOWN
VALID_MOVES = {LEFT, UP, RIGHT, DOWN}

# Unit displacement per direction; y grows downwards (terminal rows)
DISPLACEMENTS = {
    LEFT: (-1, 0),
    RIGHT: (1, 0),
    UP: (0, -1),
    DOWN: (0, 1),
}

OPPOSITES = {
    LEFT: RIGHT,
    RIGHT: LEFT,
    UP: DOWN,
    DOWN: UP,
}


class Outcome(Enum):
    CONTINUE = "continue"
    ATE_FOOD = "ate_food"
    CRASHED = "crashed"


# Speed settings (ticks per second)
BASE_SPEED = 5.0
LEVEL_SPEED_FACTOR = 0.1
SPEED_INCREMENT = 0.1

# The snake starts with this many cells plus one per starting level
BASE_LENGTH = 3


def is_opposite(a: Direction, b: Direction) -> bool:
    return OPPOSITES[a] is b
