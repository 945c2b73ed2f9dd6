"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from termsnake.domain import VALID_MOVES, Direction, advance, is_opposite
from termsnake.domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that neither reverses nor runs into
    the snake's own body.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Direction:
        snake_positions = game_state.snake_positions
        head = snake_positions[-1]
        # The tail cell (index 0) is vacated on a normal move, and food is
        # never on the body, so only the rest of the body blocks
        blocked = set(snake_positions[1:])

        valid_moves: List[Direction] = []
        for move in sorted(VALID_MOVES, key=lambda d: d.value):
            if is_opposite(game_state.direction, move):
                continue
            target = advance(head, move, game_state.width, game_state.height)
            if target in blocked:
                continue
            valid_moves.append(move)

        # If no valid moves, keep going (we'll crash anyway)
        if not valid_moves:
            return game_state.direction

        return self.rng.choice(valid_moves)
