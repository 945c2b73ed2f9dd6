"""
Base player interface for the game engine.
"""

from typing import Optional

from termsnake.domain.game_state import GameState
from .controls import Intent


class Player:
    """
    Base class/interface for player logic.

    A player is polled once per tick and answers with a direction, a
    game command, or None to keep the current course.
    """

    def get_move(self, game_state: GameState) -> Optional[Intent]:
        """
        Return the player's intent for the next tick.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction, a Command (QUIT or PAUSE), or None
        """
        raise NotImplementedError
