"""
Snake game engine.

`SnakeGame` owns the snake, the food, the score and the speed, and exposes a
single `tick()` step. Terminal, keyboard and file handling live elsewhere;
the engine only needs a direction per tick and the playable board size.
"""

import json
import logging
import os
import random
from typing import Dict, Iterable, List, Optional, Tuple, Any

from .domain import (
    BASE_LENGTH,
    BASE_SPEED,
    DOWN,
    LEFT,
    LEVEL_SPEED_FACTOR,
    RIGHT,
    SPEED_INCREMENT,
    UP,
    Direction,
    GameState,
    Outcome,
    Snake,
    advance,
    generate_food_position,
    in_bounds,
    is_opposite,
)

logger = logging.getLogger(__name__)


def initial_body(level: int, width: int) -> List[Tuple[int, int]]:
    """
    Lay out `BASE_LENGTH + level` cells from tail to head.

    Cells run along the top row and continue on the next row when the snake
    is longer than the board is wide. Each new row is shifted by one column
    so consecutive cells stay adjacent through the wrap-around edge:

        width 4, length 15
        | 0| 1| 2| 3|
        | 5| 6| 7| 4|
        |10|11| 8| 9|
        |  |12|13|14|
    """
    return [((i - i // width) % width, i // width) for i in range(BASE_LENGTH + level)]


class SnakeGame:
    """
    Manages:
      - Board (width, height)
      - Snake body and travel direction
      - Food
      - Score and speed
      - Optional per-tick history for replays
    """

    def __init__(
        self,
        width: int,
        height: int,
        level: int = 0,
        body: Optional[Iterable[Tuple[int, int]]] = None,
        direction: Optional[Direction] = None,
        food: Optional[Tuple[int, int]] = None,
        rng: Optional[random.Random] = None,
        keep_history: bool = False,
    ):
        if width < 1 or height < 1:
            raise ValueError(f"Board must be at least 1x1, got {width}x{height}.")
        if level < 0:
            raise ValueError(f"Level must be non-negative, got {level}.")

        self.width = width
        self.height = height
        self.level = level
        self.rng = rng or random.Random()

        if body is None:
            length = BASE_LENGTH + level
            if length >= width * height:
                raise ValueError(
                    f"Level {level} needs {length} cells plus one for food, "
                    f"but the board only has {width * height}."
                )
            body = initial_body(level, width)

        self.snake = Snake(body)
        for position in self.snake:
            if not in_bounds(position, width, height):
                raise ValueError(f"Snake cell {position} is outside the {width}x{height} board.")
        if len(self.snake) >= width * height:
            raise ValueError("The snake leaves no free cell for food.")

        if direction is None:
            direction = self._start_direction()
        self.direction = direction

        if food is None:
            food = generate_food_position(self.snake, width, height, self.rng)
        elif food in self.snake or not in_bounds(food, width, height):
            raise ValueError(f"Food cell {food} must be a free cell on the board.")
        self.food: Optional[Tuple[int, int]] = food

        self.score = level
        self.speed = BASE_SPEED + level * LEVEL_SPEED_FACTOR
        self.tick_number = 0
        self.crashed = False
        self.crash_position: Optional[Tuple[int, int]] = None

        self.keep_history = keep_history
        self.history: List[GameState] = []
        if keep_history:
            self.record_history()

        logger.info(
            f"New game on {width}x{height} board, level {level}, "
            f"length {len(self.snake)}, food at {self.food}"
        )

    def _start_direction(self) -> Direction:
        """Prefer heading right, turning down when a wrapped body blocks the way."""
        for candidate in (RIGHT, DOWN, LEFT, UP):
            target = advance(self.snake.head, candidate, self.width, self.height)
            if not self.snake.collides(target, ignore=self.snake.tail):
                return candidate
        return RIGHT

    @property
    def tick_interval(self) -> float:
        """Seconds between ticks at the current speed."""
        return 1.0 / self.speed

    def resolve_direction(self, requested: Optional[Direction]) -> Direction:
        """Apply the anti-reversal rule to a requested direction."""
        if requested is None or is_opposite(self.direction, requested):
            return self.direction
        return requested

    def tick(self, requested_direction: Optional[Direction] = None) -> Outcome:
        """
        Advance the game by one step.

          1) Resolve the direction (a 180 degree turn is ignored)
          2) Compute the new head on the wrap-around board
          3) Decide growth: the tail stays only when the head lands on food
          4) Check collision against the body as it will be after this tick
          5) Commit the move, or record the crash without touching the body
        """
        if self.crashed:
            return Outcome.CRASHED

        effective = self.resolve_direction(requested_direction)
        new_head = advance(self.snake.head, effective, self.width, self.height)
        grows = new_head == self.food

        # On a normal tick the tail cell is vacated before the head arrives
        vacated = None if grows else self.snake.tail
        if self.snake.collides(new_head, ignore=vacated):
            self.crashed = True
            self.crash_position = new_head
            self.tick_number += 1
            logger.info(f"Crashed into {new_head} on tick {self.tick_number} with score {self.score}")
            if self.keep_history:
                self.record_history()
            return Outcome.CRASHED

        if not grows:
            self.snake.pop_tail()
        self.snake.push_head(new_head)
        self.direction = effective
        self.tick_number += 1

        outcome = Outcome.CONTINUE
        if grows:
            self.score += 1
            self.speed += SPEED_INCREMENT
            if len(self.snake) < self.width * self.height:
                self.food = generate_food_position(self.snake, self.width, self.height, self.rng)
            else:
                # No cell left for food; the snake can only chase its tail now
                self.food = None
                logger.info("The snake fills the whole board")
            outcome = Outcome.ATE_FOOD
            logger.debug(f"Ate food at {new_head}, score {self.score}, new food at {self.food}")

        if self.keep_history:
            self.record_history()
        return outcome

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            snake_positions=tuple(self.snake),
            food=self.food,
            score=self.score,
            speed=self.speed,
            direction=self.direction,
            width=self.width,
            height=self.height,
            crashed=self.crashed,
            crash_position=self.crash_position,
        )

    def record_history(self):
        self.history.append(self.get_current_state())

    def serialize_history(self, history: List[GameState]) -> List[Dict[str, Any]]:
        """
        Convert the list of GameState objects to a JSON-serializable list of dicts.
        """
        return [state.to_dict() for state in history]

    def save_history_to_json(self, filename: str) -> None:
        metadata = {
            "width": self.width,
            "height": self.height,
            "level": self.level,
            "final_score": self.score,
            "ticks": self.tick_number,
            "crashed": self.crashed,
            "crash_position": list(self.crash_position) if self.crash_position else None,
        }
        data = {
            "metadata": metadata,
            "ticks": self.serialize_history(self.history),
        }

        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(filename, "w") as f:
            json.dump(data, f, indent=2)
        logger.info(f"Saved {len(self.history)} recorded ticks to {filename}")

    def __repr__(self):
        return (
            f"<SnakeGame {self.width}x{self.height} tick={self.tick_number} "
            f"score={self.score} crashed={self.crashed}>"
        )
