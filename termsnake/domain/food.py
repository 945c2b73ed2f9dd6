"""
Food placement.
"""

import random
from typing import Container, Optional, Tuple


def generate_food_position(
    body: Container[Tuple[int, int]],
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
) -> Tuple[int, int]:
    """
    Return a random cell (x, y) not occupied by the snake.

    Samples uniformly and rejects occupied cells. Never returns when the
    body covers the whole board; callers must leave at least one free cell.
    """
    rng = rng or random
    while True:
        x = rng.randint(0, width - 1)
        y = rng.randint(0, height - 1)
        if (x, y) not in body:
            return (x, y)
