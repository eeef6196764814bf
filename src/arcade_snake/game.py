"""Snake simulation: grid state, the public control API and the tick step."""

from __future__ import annotations

import logging
import random
from typing import Callable

from .clock import TickTimer
from .config import (
    BASE_SPEED_MS,
    DIRECTIONS,
    FOOD_PLACEMENT_ATTEMPTS,
    FOOD_POINTS,
    HIGHSCORE_KEY,
    MIN_SPEED_MS,
    OPPOSITE,
    SPEED_STEP_MS,
    SPEED_UP_EVERY,
)
from .effects import EffectState, arm_eat_burst
from .storage import KeyValueStore

logger = logging.getLogger(__name__)

Cell = tuple[int, int]
ScoreCallback = Callable[[int, int], None]


class SnakeGame:
    """Owns game state and advances it one grid cell per timer tick.

    Rendering only reads from this object (apart from ``effects``), so a frame
    loop may draw it at any time: before the first ``start()``, while paused and
    after game over.
    """

    def __init__(
        self,
        surface_size: int,
        grid_size: int,
        *,
        store: KeyValueStore,
        timer: TickTimer,
        rng: random.Random | None = None,
    ) -> None:
        if not isinstance(grid_size, int) or grid_size < 1:
            raise ValueError(f"grid_size must be a positive integer, got {grid_size!r}")
        self.surface_size = surface_size
        self.grid_size = grid_size
        self.cell_size: float = surface_size / grid_size
        self.store = store
        self.timer = timer
        self.rng = rng or random.Random()

        self.snake: list[Cell] = []
        self.food: Cell | None = (0, 0)
        self.direction = "right"
        self.pending_direction = "right"
        self.score = 0
        self.speed = BASE_SPEED_MS
        self.state = "ready"
        self.high_score: int = store.get_int(HIGHSCORE_KEY, 0)
        self.effects = EffectState()

        self.on_score_change: ScoreCallback | None = None
        self.on_game_over: ScoreCallback | None = None

    @property
    def is_running(self) -> bool:
        """True for a live run, paused or not."""
        return self.state in ("running", "paused")

    @property
    def is_paused(self) -> bool:
        return self.state == "paused"

    # --- Public control API --------------------------------------------

    def start(self) -> None:
        """Reset the board and begin ticking at the base speed."""
        center = self.grid_size // 2
        self.snake = [(center, center)]
        self.direction = "right"
        self.pending_direction = "right"
        self.score = 0
        self.speed = BASE_SPEED_MS
        self.state = "running"
        self.spawn_food()
        logger.debug("Game started on a %dx%d grid", self.grid_size, self.grid_size)

        self._notify(self.on_score_change)
        self.timer.start(self.speed)

    def change_direction(self, direction: str) -> None:
        """Queue a turn for the next tick; 180° reversals are ignored."""
        if not self.is_running or direction not in DIRECTIONS:
            return
        if direction == OPPOSITE[self.direction]:
            return
        self.pending_direction = direction

    def toggle_pause(self) -> bool:
        """Pause or resume the run and return the new paused flag."""
        if not self.is_running:
            return False
        if self.state == "paused":
            self.state = "running"
            self.timer.start(self.speed)
        else:
            self.state = "paused"
            self.timer.stop()
        logger.debug("Paused: %s", self.is_paused)
        return self.is_paused

    # --- Food ----------------------------------------------------------

    def spawn_food(self) -> None:
        """Place food on a uniformly random cell the snake does not cover."""
        self.food = self._random_food_cell()

    def _random_food_cell(self) -> Cell | None:
        occupied = set(self.snake)
        for _ in range(FOOD_PLACEMENT_ATTEMPTS):
            cell = (
                self.rng.randrange(self.grid_size),
                self.rng.randrange(self.grid_size),
            )
            if cell not in occupied:
                return cell

        # Crowded board: sample from the free cells directly.
        free = [
            (x, y)
            for x in range(self.grid_size)
            for y in range(self.grid_size)
            if (x, y) not in occupied
        ]
        if not free:
            return None
        return self.rng.choice(free)

    # --- Logic step ----------------------------------------------------

    def tick(self) -> None:
        """Advance the game state by exactly one grid cell."""
        if self.state != "running":
            return

        self.direction = self.pending_direction
        dx, dy = DIRECTIONS[self.direction]
        head_x, head_y = self.snake[0]
        new_head = (head_x + dx, head_y + dy)

        if not (
            0 <= new_head[0] < self.grid_size and 0 <= new_head[1] < self.grid_size
        ):
            self.game_over()
            return
        if new_head in self.snake:
            self.game_over()
            return

        self.snake.insert(0, new_head)

        if new_head == self.food:
            self._eat(new_head)
        else:
            self.snake.pop()

    def _eat(self, cell: Cell) -> None:
        self.score += FOOD_POINTS
        arm_eat_burst(
            self.effects,
            cell[0] * self.cell_size + self.cell_size / 2,
            cell[1] * self.cell_size + self.cell_size / 2,
        )

        if self.score > self.high_score:
            self.high_score = self.score
            self.store.set_int(HIGHSCORE_KEY, self.high_score)
            logger.info("New high score: %d", self.high_score)

        if self.score % SPEED_UP_EVERY == 0 and self.speed > MIN_SPEED_MS:
            self.speed -= SPEED_STEP_MS
            self.timer.start(self.speed)
            logger.debug("Speed up: tick every %d ms", self.speed)

        self._notify(self.on_score_change)
        self.spawn_food()

    # --- Game over -----------------------------------------------------

    def game_over(self) -> None:
        """Freeze the run and report the final score once."""
        if self.state == "game_over":
            return
        self.state = "game_over"
        self.timer.stop()
        logger.info("Game over: score=%d high=%d", self.score, self.high_score)
        self._notify(self.on_game_over)

    def _notify(self, callback: ScoreCallback | None) -> None:
        if callback is not None:
            callback(self.score, self.high_score)
