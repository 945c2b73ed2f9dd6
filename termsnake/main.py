import argparse
import logging
import random
import sys
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from termsnake.config import ConfigurationError, Settings, configure_logging
from termsnake.domain import Outcome
from termsnake.engine import SnakeGame
from termsnake.players import Autopilot, Command, KeyboardPlayer, Player, RandomPlayer
from termsnake.services.high_scores import HighScoreStore, end_message, finish_game
from termsnake.services.terminal import (
    CursesRenderer,
    TerminalSession,
    TerminalSizeError,
    board_size,
)

logger = logging.getLogger(__name__)


@dataclass
class GameSummary:
    score: int
    ticks: int
    reason: str  # 'crashed' or 'quit'


# -------------------------------
# Game Loop
# -------------------------------

def run_game(
    game: SnakeGame,
    player: Player,
    renderer,
    sleep: Callable[[float], None] = time.sleep,
) -> GameSummary:
    """
    Drive a game until the snake crashes or the player quits.

    Each iteration polls the player once (it folds every key pressed since
    the previous poll into one intent), applies pause/quit, ticks the engine
    unless paused, draws the frame and waits one tick interval.

    Args:
        game: The engine to drive.
        player: Source of directions and commands.
        renderer: Anything with a `draw(state, paused)` method.
        sleep: Called with the tick interval in seconds.

    Returns:
        A GameSummary with the final score and why the game ended.
    """
    paused = False
    renderer.draw(game.get_current_state(), paused)

    while True:
        intent = player.get_move(game.get_current_state())

        if intent is Command.QUIT:
            logger.info(f"Player quit on tick {game.tick_number}")
            return GameSummary(score=game.score, ticks=game.tick_number, reason="quit")

        if intent is Command.PAUSE:
            paused = not paused
            intent = None

        outcome = None
        if not paused:
            outcome = game.tick(intent)

        state = game.get_current_state()
        renderer.draw(state, paused)

        if outcome is Outcome.CRASHED:
            logger.debug(f"Final board:\n{state.print_board()}")
            return GameSummary(score=game.score, ticks=game.tick_number, reason="crashed")

        sleep(game.tick_interval)


# -------------------------------
# Command Line
# -------------------------------

def parse_level(value: str) -> int:
    try:
        level = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a number: {value!r}")
    if level < 0:
        raise argparse.ArgumentTypeError(f"Level must be zero or more, got {level}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description="Play snake in the terminal. The board wraps around at the edges.",
    )
    parser.add_argument("level", nargs="?", type=parse_level, default=0,
                        help="Starting level: adds to the starting length, score and speed (default: 0)")
    parser.add_argument("--high-score-file", type=str, default=None,
                        help="File holding the high score (default: $SNAKE_HIGH_SCORE_FILE or ~/.snake)")
    parser.add_argument("--autoplay", action="store_true",
                        help="Let a random player steer; q still quits and Esc/p still pauses")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and autoplay")
    parser.add_argument("--replay", type=str, default=None,
                        help="Write a JSON replay of every tick to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    configure_logging(settings)

    store = HighScoreStore(args.high_score_file or settings.high_score_file)
    rng = random.Random(args.seed)

    startup_error = None
    try:
        with TerminalSession() as window:
            try:
                width, height = board_size(window)
                game = SnakeGame(
                    width=width,
                    height=height,
                    level=args.level,
                    rng=rng,
                    keep_history=args.replay is not None,
                )
            except (TerminalSizeError, ValueError) as e:
                startup_error = e
            else:
                player: Player = KeyboardPlayer(window)
                if args.autoplay:
                    player = Autopilot(player, RandomPlayer(rng))
                summary = run_game(game, player, CursesRenderer(window))
    except TerminalSizeError as e:
        # No usable terminal at all
        startup_error = e

    # Report only once the terminal is back to normal
    if startup_error is not None:
        logger.error(f"Could not start a game: {startup_error}")
        print(f"error: {startup_error}", file=sys.stderr)
        return 2

    if args.replay:
        try:
            game.save_history_to_json(args.replay)
        except OSError as e:
            logger.error(f"Failed to write replay to {args.replay}: {e}")

    result, previous = finish_game(summary.score, store.load, store.save)
    print(end_message(summary.score, result, previous))
    return 0


if __name__ == "__main__":
    sys.exit(main())
