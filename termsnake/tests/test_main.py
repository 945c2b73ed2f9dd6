"""
Tests for main.py - the game loop and command line.
"""

import argparse
import curses
import logging
import random
from unittest.mock import MagicMock, Mock, patch

import pytest

from termsnake import main as main_module
from termsnake.domain import LEFT, RIGHT, UP
from termsnake.engine import SnakeGame
from termsnake.main import GameSummary, build_parser, main, parse_level, run_game
from termsnake.players import Command, Player


class ScriptedPlayer(Player):
    """Replays a fixed list of intents, then keeps returning None."""

    def __init__(self, intents):
        self.intents = list(intents)

    def get_move(self, game_state):
        if self.intents:
            return self.intents.pop(0)
        return None


def make_game(**kwargs):
    kwargs.setdefault("rng", random.Random(0))
    return SnakeGame(**kwargs)


class TestRunGame:
    """Tests for the driver loop."""

    def test_runs_until_crash(self):
        """The loop ends with the crash and reports the score."""
        game = make_game(width=10, height=10,
                         body=[(1, 1), (2, 1), (3, 1), (3, 2), (2, 2)],
                         direction=LEFT, food=(9, 9))
        renderer = Mock()
        sleep = Mock()

        summary = run_game(game, ScriptedPlayer([UP]), renderer, sleep=sleep)

        assert summary == GameSummary(score=0, ticks=1, reason="crashed")
        # Initial frame plus the crash frame
        assert renderer.draw.call_count == 2
        final_state = renderer.draw.call_args[0][0]
        assert final_state.crashed is True
        assert final_state.crash_position == (2, 1)
        sleep.assert_not_called()

    def test_crash_logs_final_board(self, caplog):
        """The last frame is written to the debug log as a text board."""
        game = make_game(width=10, height=10,
                         body=[(1, 1), (2, 1), (3, 1), (3, 2), (2, 2)],
                         direction=LEFT, food=(9, 9))

        with caplog.at_level(logging.DEBUG, logger="termsnake.main"):
            run_game(game, ScriptedPlayer([UP]), Mock(), sleep=Mock())

        assert "Final board:" in caplog.text
        assert game.get_current_state().print_board() in caplog.text

    def test_quit_stops_without_ticking(self):
        game = make_game(width=10, height=10)
        renderer = Mock()

        summary = run_game(game, ScriptedPlayer([Command.QUIT]), renderer, sleep=Mock())

        assert summary.reason == "quit"
        assert summary.ticks == 0
        assert game.tick_number == 0

    def test_sleeps_one_tick_interval(self):
        game = make_game(width=10, height=10, body=[(0, 0), (1, 0), (2, 0)],
                         direction=RIGHT, food=(9, 9))
        sleep = Mock()

        run_game(game, ScriptedPlayer([None, Command.QUIT]), Mock(), sleep=sleep)

        sleep.assert_called_once_with(pytest.approx(0.2))

    def test_pause_skips_ticks_until_resumed(self):
        """While paused the engine is left untouched but input is still read."""
        game = make_game(width=10, height=10, body=[(0, 0), (1, 0), (2, 0)],
                         direction=RIGHT, food=(9, 9))
        renderer = Mock()
        intents = [Command.PAUSE, None, UP, Command.PAUSE, None, Command.QUIT]

        summary = run_game(game, ScriptedPlayer(intents), renderer, sleep=Mock())

        # Only the tick after resuming and the one following it moved the snake
        assert summary.ticks == 2
        assert game.snake.head == (4, 0)
        paused_flags = [c[0][1] for c in renderer.draw.call_args_list]
        assert paused_flags == [False, True, True, True, False, False]

    def test_directions_are_forwarded_to_the_engine(self):
        game = make_game(width=10, height=10, body=[(0, 5), (1, 5), (2, 5)],
                         direction=RIGHT, food=(9, 9))

        run_game(game, ScriptedPlayer([UP, None, Command.QUIT]), Mock(), sleep=Mock())

        assert game.direction is UP
        assert game.snake.head == (2, 3)


class TestParseLevel:
    """Tests for the starting level argument."""

    def test_numeric(self):
        assert parse_level("3") == 3

    def test_not_a_number(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_level("three")

    def test_negative(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_level("-1")

    def test_defaults_to_zero(self):
        assert build_parser().parse_args([]).level == 0

    def test_bad_level_exits_with_usage_error(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["abc"])
        assert excinfo.value.code == 2
        assert "Not a number" in capsys.readouterr().err


class TestMain:
    """Tests for the entry point with the terminal replaced by fakes."""

    @pytest.fixture(autouse=True)
    def environment(self, monkeypatch, tmp_path):
        monkeypatch.setattr("termsnake.config.load_dotenv", lambda *args, **kwargs: False)
        monkeypatch.setattr(main_module, "configure_logging", lambda settings: None)
        monkeypatch.delenv("SNAKE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("SNAKE_LOG_FILE", raising=False)
        monkeypatch.setenv("SNAKE_HIGH_SCORE_FILE", str(tmp_path / ".snake"))
        self.score_file = tmp_path / ".snake"

    def _patch_terminal(self, rows=11, cols=20):
        window = MagicMock()
        window.getmaxyx.return_value = (rows, cols)
        session = MagicMock()
        session.return_value.__enter__.return_value = window
        session.return_value.__exit__.return_value = False
        return window, session

    def test_quit_reports_score_and_records_it(self, capsys):
        window, session = self._patch_terminal()
        window.getch.side_effect = [ord('q'), -1]

        with patch.object(main_module, "TerminalSession", session), \
                patch.object(main_module, "CursesRenderer"):
            code = main(["2"])

        assert code == 0
        assert capsys.readouterr().out.strip() == "You got 2!"
        assert self.score_file.read_text() == "2"
        session.return_value.__exit__.assert_called_once()

    def test_reports_beaten_high_score(self, capsys):
        self.score_file.write_text("30")
        window, session = self._patch_terminal()
        window.getch.side_effect = [ord('q'), -1]

        with patch.object(main_module, "TerminalSession", session), \
                patch.object(main_module, "CursesRenderer"):
            main([])

        assert capsys.readouterr().out.strip() == "You got 0, the high score is 30. Try again!"
        assert self.score_file.read_text() == "30"

    def test_corrupt_high_score_file_is_not_fatal(self, capsys):
        self.score_file.write_text("garbage")
        window, session = self._patch_terminal()
        window.getch.side_effect = [ord('q'), -1]

        with patch.object(main_module, "TerminalSession", session), \
                patch.object(main_module, "CursesRenderer"):
            code = main(["1"])

        assert code == 0
        assert capsys.readouterr().out.strip() == "You got 1!"

    def test_terminal_too_small(self, capsys):
        window, session = self._patch_terminal(rows=1, cols=20)

        with patch.object(main_module, "TerminalSession", session):
            code = main([])

        assert code == 2
        assert "too small" in capsys.readouterr().err
        assert not self.score_file.exists()

    def test_level_too_large_for_terminal(self, capsys):
        window, session = self._patch_terminal(rows=3, cols=6)  # 3x2 board

        with patch.object(main_module, "TerminalSession", session):
            code = main(["10"])

        assert code == 2
        assert "Level 10" in capsys.readouterr().err

    def test_no_usable_terminal(self, capsys):
        """A terminal curses cannot open is reported, not raised."""
        with patch("termsnake.services.terminal.curses.initscr",
                   side_effect=curses.error("setupterm: could not find terminal")):
            code = main([])

        assert code == 2
        err = capsys.readouterr().err
        assert err.startswith("error: ")
        assert "could not find terminal" in err
        assert not self.score_file.exists()

    def test_writes_replay(self, tmp_path, capsys):
        window, session = self._patch_terminal()
        window.getch.side_effect = [-1, ord('q'), -1]
        replay = tmp_path / "replay.json"

        with patch.object(main_module, "TerminalSession", session), \
                patch.object(main_module, "CursesRenderer"), \
                patch("termsnake.main.time.sleep"):
            main(["--seed", "1", "--replay", str(replay)])

        assert replay.exists()


class TestBoardSize:
    """Tests for mapping the terminal size onto the board."""

    def test_two_columns_per_cell_and_a_status_row(self):
        from termsnake.services.terminal import board_size

        window = Mock()
        window.getmaxyx.return_value = (24, 81)
        assert board_size(window) == (40, 23)

    def test_too_narrow(self):
        from termsnake.services.terminal import TerminalSizeError, board_size

        window = Mock()
        window.getmaxyx.return_value = (24, 1)
        with pytest.raises(TerminalSizeError):
            board_size(window)


class TestTerminalSession:
    """Tests for opening the curses session."""

    def test_initscr_failure_becomes_terminal_size_error(self):
        from termsnake.services.terminal import TerminalSession, TerminalSizeError

        with patch("termsnake.services.terminal.curses.initscr",
                   side_effect=curses.error("setupterm: could not find terminal")):
            with pytest.raises(TerminalSizeError):
                with TerminalSession():
                    pass
