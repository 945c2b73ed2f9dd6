"""
Terminal handling: curses session, board size and frame rendering.

Each board cell is two terminal columns wide so cells look square, and the
bottom row of the terminal is reserved for the status line. The engine is
only ever given the remaining playable grid.
"""

import curses
import logging
import os
from typing import Tuple

from termsnake.domain.game_state import GameState

logger = logging.getLogger(__name__)

CELL_WIDTH = 2
STATUS_ROWS = 1

# Color pairs (curses color pairs start at 1)
COLOR_SNAKE = 1
COLOR_FOOD = 2
COLOR_STATUS = 3
COLOR_CRASH = 4


class TerminalSizeError(RuntimeError):
    """Raised when the terminal cannot hold a playable board."""


class TerminalSession:
    """
    Puts the terminal into raw, non-blocking, cursor-less mode for the
    duration of a `with` block and restores it on every exit path.

    Usage:
        with TerminalSession() as window:
            ...
    """

    def __init__(self):
        self.window = None

    def __enter__(self):
        # Esc toggles pause; don't wait the default second for an escape sequence
        os.environ.setdefault("ESCDELAY", "25")
        try:
            self.window = curses.initscr()
        except curses.error as e:
            raise TerminalSizeError(f"Can't open the terminal: {e}") from e
        try:
            curses.noecho()
            # Raw mode delivers Ctrl-C as a key press instead of a signal
            curses.raw()
            self.window.keypad(True)
            self.window.nodelay(True)
            try:
                curses.curs_set(0)
            except curses.error:
                logger.debug("Terminal does not support hiding the cursor")
        except Exception:
            self._restore()
            raise
        return self.window

    def __exit__(self, exc_type, exc, tb):
        self._restore()
        return False

    def _restore(self):
        if self.window is None:
            return
        self.window.keypad(False)
        curses.noraw()
        curses.echo()
        curses.endwin()
        self.window = None


def board_size(window) -> Tuple[int, int]:
    """
    Return the playable (width, height) of the board for this window.

    Raises:
        TerminalSizeError: if the size is unknown or leaves no room to play
    """
    try:
        rows, cols = window.getmaxyx()
    except curses.error as e:
        raise TerminalSizeError(f"Can't get terminal size: {e}") from e

    width = cols // CELL_WIDTH
    height = rows - STATUS_ROWS
    if width < 1 or height < 1:
        raise TerminalSizeError(f"Terminal too small to play ({cols}x{rows}).")
    return width, height


class CursesRenderer:
    """
    Draws GameState snapshots: snake, food and empty cells plus a centered
    status line. Falls back to monochrome glyphs when colors are unavailable.
    """

    def __init__(self, window):
        self.window = window
        self.use_colors = self.init_colors()

    def init_colors(self) -> bool:
        """Initialize color pairs for curses"""
        if not curses.has_colors():
            return False
        curses.start_color()
        curses.init_pair(COLOR_SNAKE, curses.COLOR_WHITE, curses.COLOR_WHITE)
        curses.init_pair(COLOR_FOOD, curses.COLOR_GREEN, curses.COLOR_GREEN)
        curses.init_pair(COLOR_STATUS, curses.COLOR_BLACK, curses.COLOR_BLUE)
        curses.init_pair(COLOR_CRASH, curses.COLOR_RED, curses.COLOR_RED)
        return True

    def _cell(self, kind: int) -> Tuple[str, int]:
        if self.use_colors:
            return "  ", curses.color_pair(kind)
        if kind == COLOR_FOOD:
            return "()", curses.A_BOLD
        if kind == COLOR_CRASH:
            return "XX", curses.A_BOLD
        return "  ", curses.A_REVERSE

    def _put(self, y: int, x: int, kind: int):
        text, attr = self._cell(kind)
        self.window.addstr(y, x * CELL_WIDTH, text, attr)

    def draw(self, state: GameState, paused: bool = False):
        self.window.erase()

        for x, y in state.snake_positions:
            self._put(y, x, COLOR_SNAKE)

        if state.food is not None:
            fx, fy = state.food
            self._put(fy, fx, COLOR_FOOD)

        if state.crash_position is not None:
            cx, cy = state.crash_position
            self._put(cy, cx, COLOR_CRASH)

        self._draw_status(state, paused)
        self.window.refresh()

        if state.crashed:
            curses.beep()

    def _draw_status(self, state: GameState, paused: bool):
        rows, cols = self.window.getmaxyx()
        status_text = state.status_line()
        if paused:
            status_text += "  (paused)"
        # Writing the very last cell of the screen moves the cursor off it
        line = status_text.center(cols)[:cols - 1]
        attr = curses.color_pair(COLOR_STATUS) if self.use_colors else curses.A_REVERSE
        self.window.addstr(state.height, 0, line, attr)
