"""
Player implementations for termsnake.

This module contains the input side of the game: the player abstraction,
the keyboard controls and an autoplaying random player.
"""

from .autopilot import Autopilot
from .base import Player
from .controls import Command, Intent, KEY_BINDINGS, fold_events
from .keyboard_player import KeyboardPlayer
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'Command',
    'Intent',
    'KEY_BINDINGS',
    'fold_events',
    'KeyboardPlayer',
    'RandomPlayer',
    'Autopilot',
]
