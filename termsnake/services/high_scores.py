"""
High score persistence.

The high score is a single integer stored as plain text (by default in
~/.snake). Keeping score is an amenity: a missing, unreadable or corrupt
file counts as "no high score yet" and a failed write is logged, never
raised.
"""

import logging
import os
from enum import Enum
from typing import Callable, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_HIGH_SCORE_FILE = os.path.join("~", ".snake")


class HighScoreResult(Enum):
    NEW_HIGH_SCORE = "new_high_score"
    BEATEN = "beaten"
    NO_RECORD = "no_record"


class HighScoreStore:
    """
    File-backed high score.

    Attributes:
        path: location of the score file (`~` is expanded)
    """

    def __init__(self, path: str = DEFAULT_HIGH_SCORE_FILE):
        self.path = os.path.expanduser(path)

    def load(self) -> Optional[int]:
        """
        Read the recorded high score.

        Returns:
            The stored score, or None if there is no usable record
        """
        if not os.path.exists(self.path):
            return None

        try:
            with open(self.path, "r") as f:
                content = f.read().strip()
        except OSError as e:
            logger.warning(f"Could not read high score file {self.path}: {e}")
            return None

        try:
            score = int(content)
        except ValueError:
            logger.warning(f"Ignoring non-numeric high score in {self.path}: {content!r}")
            return None

        if score < 0:
            logger.warning(f"Ignoring negative high score in {self.path}: {score}")
            return None
        return score

    def save(self, score: int) -> bool:
        """
        Write `score` as the new high score.

        Returns:
            True if written successfully, False otherwise
        """
        try:
            with open(self.path, "w") as f:
                f.write(str(score))
            logger.info(f"Saved high score {score} to {self.path}")
            return True

        except OSError as e:
            logger.error(f"Failed to save high score to {self.path}: {e}")
            return False


def finish_game(
    score: int,
    load_high_score: Callable[[], Optional[int]],
    save_high_score: Callable[[int], object],
) -> Tuple[HighScoreResult, Optional[int]]:
    """
    Compare the final score with the recorded one and save it if it is better.

    Returns:
        (result, previous high score or None)
    """
    previous = load_high_score()

    if previous is None:
        save_high_score(score)
        return HighScoreResult.NO_RECORD, None

    # A tie counts as a new high score, but the file already holds it
    if score >= previous:
        if score > previous:
            save_high_score(score)
        return HighScoreResult.NEW_HIGH_SCORE, previous

    return HighScoreResult.BEATEN, previous


def end_message(score: int, result: HighScoreResult, previous: Optional[int]) -> str:
    if result is HighScoreResult.NEW_HIGH_SCORE:
        return f"New high score! You got {score}"
    if result is HighScoreResult.BEATEN:
        return f"You got {score}, the high score is {previous}. Try again!"
    return f"You got {score}!"
