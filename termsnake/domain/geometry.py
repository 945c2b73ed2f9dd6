"""
Board geometry: movement on a wrap-around grid.
"""

from typing import Tuple

from .constants import DISPLACEMENTS, Direction

Position = Tuple[int, int]


def advance(position: Position, direction: Direction, width: int, height: int) -> Position:
    """
    Return the cell one step from `position` in `direction`.

    Leaving the board on one edge re-enters on the opposite edge. The bound
    is added before the modulo so negative intermediates never leak out.
    """
    dx, dy = DISPLACEMENTS[direction]
    x, y = position
    return ((x + dx + width) % width, (y + dy + height) % height)


def in_bounds(position: Position, width: int, height: int) -> bool:
    x, y = position
    return 0 <= x < width and 0 <= y < height
