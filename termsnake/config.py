"""
Runtime settings.

Values come from the environment, after loading a `.env` file from the
working directory if one exists:

- SNAKE_HIGH_SCORE_FILE: where the high score is kept (default ~/.snake)
- SNAKE_LOG_LEVEL: logging level name (default WARNING)
- SNAKE_LOG_FILE: log destination; stderr when unset. The game screen owns
  the terminal, so set this to see debug output while playing.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from termsnake.services.high_scores import DEFAULT_HIGH_SCORE_FILE

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ConfigurationError(ValueError):
    """Raised when a setting cannot be used."""


@dataclass(frozen=True)
class Settings:
    high_score_file: str = DEFAULT_HIGH_SCORE_FILE
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        log_level = os.getenv("SNAKE_LOG_LEVEL", "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"Unknown log level in SNAKE_LOG_LEVEL: {log_level!r}")

        return cls(
            high_score_file=os.getenv("SNAKE_HIGH_SCORE_FILE") or DEFAULT_HIGH_SCORE_FILE,
            log_level=log_level,
            log_file=os.getenv("SNAKE_LOG_FILE") or None,
        )


def configure_logging(settings: Settings) -> None:
    if settings.log_file:
        logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, filename=settings.log_file)
    else:
        logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
