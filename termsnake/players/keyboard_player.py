"""
Keyboard player - reads pending key presses from a curses window.
"""

import logging
from typing import List, Optional

from termsnake.domain.game_state import GameState
from .base import Player
from .controls import Intent, fold_events

logger = logging.getLogger(__name__)


class KeyboardPlayer(Player):
    """
    Drains every key pressed since the last tick and keeps the last one that
    maps to a direction or command.

    The window must be in non-blocking mode (`nodelay(True)`), where
    `getch()` returns -1 once the input queue is empty.
    """

    def __init__(self, window):
        self.window = window

    def drain(self) -> List[int]:
        keys = []
        while True:
            key = self.window.getch()
            if key == -1:
                return keys
            keys.append(key)

    def get_move(self, game_state: GameState) -> Optional[Intent]:
        keys = self.drain()
        intent = fold_events(keys)
        if keys:
            logger.debug(f"Read keys {keys} -> {intent}")
        return intent
