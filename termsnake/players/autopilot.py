"""
Autopilot - lets a computer player steer while the keyboard keeps control
of quitting and pausing.
"""

from typing import Optional

from termsnake.domain.game_state import GameState
from .base import Player
from .controls import Command, Intent


class Autopilot(Player):
    def __init__(self, keyboard: Player, pilot: Player):
        self.keyboard = keyboard
        self.pilot = pilot

    def get_move(self, game_state: GameState) -> Optional[Intent]:
        intent = self.keyboard.get_move(game_state)
        if isinstance(intent, Command):
            return intent
        return self.pilot.get_move(game_state)
