"""
Keyboard controls: key codes to directions and game commands.

All keys pressed between two ticks are folded into one intent; the last
recognized key wins and everything else is discarded.
"""

import curses
from enum import Enum
from typing import Dict, Iterable, Optional, Union

from termsnake.domain import Direction, UP, DOWN, LEFT, RIGHT


class Command(Enum):
    QUIT = "QUIT"
    PAUSE = "PAUSE"


Intent = Union[Direction, Command]

CTRL_C = 3
ESCAPE = 27

KEY_BINDINGS: Dict[int, Intent] = {
    # Arrows
    curses.KEY_LEFT: LEFT,
    curses.KEY_DOWN: DOWN,
    curses.KEY_RIGHT: RIGHT,
    curses.KEY_UP: UP,
    # WASD
    ord('a'): LEFT,
    ord('s'): DOWN,
    ord('d'): RIGHT,
    ord('w'): UP,
    # Vim
    ord('h'): LEFT,
    ord('j'): DOWN,
    ord('l'): RIGHT,
    ord('k'): UP,
    # Game control
    ord('q'): Command.QUIT,
    CTRL_C: Command.QUIT,
    ESCAPE: Command.PAUSE,
    ord('p'): Command.PAUSE,
}


def fold_events(keys: Iterable[int], bindings: Optional[Dict[int, Intent]] = None) -> Optional[Intent]:
    """
    Reduce a batch of key codes to the last recognized intent.

    Returns None when no key in the batch is bound.
    """
    bindings = KEY_BINDINGS if bindings is None else bindings
    intent = None
    for key in keys:
        bound = bindings.get(key)
        if bound is not None:
            intent = bound
    return intent
