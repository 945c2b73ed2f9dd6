"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Iterator, Optional, Set, Tuple


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from tail at index 0 to head at the end
        occupied: set mirror of `positions` for O(1) membership tests
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions: deque = deque()
        self.occupied: Set[Tuple[int, int]] = set()
        for position in positions:
            self.push_head(position)
        if not self.positions:
            raise ValueError("A snake needs at least one cell.")

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (last element)."""
        return self.positions[-1]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (first element)."""
        return self.positions[0]

    def push_head(self, position: Tuple[int, int]) -> None:
        if position in self.occupied:
            raise ValueError(f"Cell {position} is already part of the snake.")
        self.positions.append(position)
        self.occupied.add(position)

    def pop_tail(self) -> Tuple[int, int]:
        position = self.positions.popleft()
        self.occupied.remove(position)
        return position

    def collides(self, position: Tuple[int, int], ignore: Optional[Tuple[int, int]] = None) -> bool:
        """
        Check whether `position` is occupied, treating `ignore` as already vacated.
        """
        if ignore is not None and position == ignore:
            return False
        return position in self.occupied

    def __contains__(self, position: Tuple[int, int]) -> bool:
        return position in self.occupied

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake length={len(self.positions)} head={self.head}>"
