"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import Direction


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: how many ticks have been applied (0-based)
        snake_positions: tuple of (x, y) from tail to head
        food: (x, y) of the food cell, None once the snake fills the board
        score: current score
        speed: ticks per second
        direction: current travel direction
        width, height: playable board dimensions
        crashed: whether the last tick ended the game
        crash_position: cell the head tried to enter on the fatal tick
    """

    tick_number: int
    snake_positions: Tuple[Tuple[int, int], ...]
    food: Optional[Tuple[int, int]]
    score: int
    speed: float
    direction: Direction
    width: int
    height: int
    crashed: bool = False
    crash_position: Optional[Tuple[int, int]] = None

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[-1]

    def status_line(self) -> str:
        return f"Score: {self.score}"

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        * = food
        # = snake body
        @ = snake head
        X = the cell the snake crashed into
        (0,0) is the top left, followed by the status line.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = '*'

        for x, y in self.snake_positions:
            board[y][x] = '#'
        hx, hy = self.head
        board[hy][hx] = '@'

        if self.crash_position is not None:
            cx, cy = self.crash_position
            board[cy][cx] = 'X'

        result = ["".join(row) for row in board]
        result.append(self.status_line())
        return "\n".join(result)

    def to_dict(self) -> dict:
        return {
            "tick_number": self.tick_number,
            "snake_positions": [list(p) for p in self.snake_positions],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "speed": self.speed,
            "direction": self.direction.value,
            "width": self.width,
            "height": self.height,
            "crashed": self.crashed,
            "crash_position": list(self.crash_position) if self.crash_position is not None else None,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, food={self.food}, "
            f"length={len(self.snake_positions)}, score={self.score}>"
        )
