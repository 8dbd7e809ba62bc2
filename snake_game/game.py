"""Game state machine and tick update rules.

``GameLoop`` owns the snake, the food and the score counters. Input reaches it
through ``change_direction``, ``toggle_pause``, ``start`` and ``restart``; the
tick timer drives ``tick``. Collaborators (renderer, sounds, status display)
only ever receive read-only snapshots.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .food import FoodSpawner, GridFullError
from .grid import NONE, direction_to_text, is_move, opposite
from .settings import INITIAL_SPEED_MS, MIN_SPEED_MS, POINTS_PER_LEVEL, SPEED_INCREMENT_MS
from .snake import Snake

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot of everything a display needs."""

    score: int
    level: int
    speed_ms: int
    phase: Phase
    snake: Tuple[Tuple[int, int], ...]
    food: Tuple[int, int]
    direction: Tuple[int, int]
    game_over_reason: Optional[str] = None
    best_score: int = 0


OVERLAY_TITLES = {
    Phase.NOT_STARTED: "Ready to Play?",
    Phase.PAUSED: "Paused",
    Phase.GAME_OVER: "Game Over!",
}


def speed_for_level(level):
    """Milliseconds per move at ``level``, clamped to the speed floor."""
    return max(MIN_SPEED_MS, INITIAL_SPEED_MS - (level - 1) * SPEED_INCREMENT_MS)


class GameLoop:
    """Single-player snake rules driven by a periodic tick."""

    def __init__(self, grid, timer, spawner=None, renderer=None, sounds=None, on_status=None):
        self.grid = grid
        self.timer = timer
        self.spawner = spawner or FoodSpawner(grid)
        self.renderer = renderer
        self.sounds = sounds
        self.on_status = on_status
        self.best_score = 0
        self._reset()

    def _reset(self):
        self.snake = Snake.at(self.grid.center)
        self.direction = NONE
        self.score = 0
        self.level = 1
        self.speed_ms = INITIAL_SPEED_MS
        self.phase = Phase.NOT_STARTED
        self.game_over_reason = None
        self.food = self.spawner.spawn(self.snake.cells)

    @property
    def state(self):
        return GameState(
            score=self.score,
            level=self.level,
            speed_ms=self.speed_ms,
            phase=self.phase,
            snake=self.snake.cells,
            food=self.food,
            direction=self.direction,
            game_over_reason=self.game_over_reason,
            best_score=self.best_score,
        )

    @property
    def can_pause(self):
        return self.phase in (Phase.RUNNING, Phase.PAUSED)

    @property
    def can_restart(self):
        return self.phase is not Phase.NOT_STARTED

    @property
    def overlay_title(self):
        """Title for the centered overlay, or None while the game is running."""
        return OVERLAY_TITLES.get(self.phase)

    @property
    def start_label(self):
        return "Play Again" if self.phase is Phase.GAME_OVER else "Start to Play"

    @property
    def pause_label(self):
        return "Resume" if self.phase is Phase.PAUSED else "Pause"

    def change_direction(self, new_direction):
        """Steer the snake. Returns True if the direction was accepted."""
        if not is_move(new_direction):
            logger.debug("Ignoring malformed direction %r", new_direction)
            return False
        if self.phase in (Phase.PAUSED, Phase.GAME_OVER):
            logger.debug("Ignoring direction while %s", self.phase.value)
            return False

        moving = self.direction != NONE
        if len(self.snake) > 1 and moving and new_direction == opposite(self.direction):
            logger.debug("Rejected reversal to %s", direction_to_text(new_direction))
            return False

        self.direction = new_direction
        if self.phase is Phase.NOT_STARTED:
            self.phase = Phase.RUNNING
            self.timer.start(self.speed_ms)
            logger.info("Game started heading %s", direction_to_text(new_direction))
            self._notify()
        return True

    def toggle_pause(self):
        """Flip between running and paused. No-op before start and after game over."""
        if self.phase is Phase.RUNNING:
            self.phase = Phase.PAUSED
            self.timer.cancel()
            logger.info("Paused at score %d", self.score)
            self._play("on_pause")
        elif self.phase is Phase.PAUSED:
            self.phase = Phase.RUNNING
            self.timer.start(self.speed_ms)
            logger.info("Resumed at %d ms per move", self.speed_ms)
            self._play("on_resume")
        else:
            return
        self._notify()

    def restart(self):
        """Cancel the timer and return to the not-started baseline."""
        self.timer.cancel()
        self._reset()
        logger.info("Game reset")
        self._notify()

    def start(self):
        """Start/Play Again button: a fresh board waiting for the first direction."""
        self.restart()

    def tick(self):
        """Advance the snake one cell. Only runs while the game is running."""
        if self.phase is not Phase.RUNNING:
            return

        new_head = self.snake.move(self.direction)

        if not self.grid.contains(new_head):
            self._end_game("wall")
            return
        if self.snake.occupies_body(new_head):
            self._end_game("self")
            return

        if new_head == self.food:
            self._eat(new_head)
            if self.phase is Phase.GAME_OVER:
                return
        else:
            self.snake.advance(new_head)

        self._notify()

    def _eat(self, new_head):
        self.score += 1
        self.best_score = max(self.best_score, self.score)
        self.snake.grow(new_head)

        try:
            self.food = self.spawner.spawn(self.snake.cells)
        except GridFullError:
            self._play("on_eat")
            self._end_game("board_full")
            return
        self._play("on_eat")

        if self.score % POINTS_PER_LEVEL == 0:
            self._level_up()

    def _level_up(self):
        self.level += 1
        self.speed_ms = speed_for_level(self.level)
        # Replaces the running interval; the tick in progress is unaffected.
        self.timer.start(self.speed_ms)
        logger.info("Level %d: %d ms per move", self.level, self.speed_ms)

    def _end_game(self, reason):
        self.phase = Phase.GAME_OVER
        self.game_over_reason = reason
        self.timer.cancel()
        self.best_score = max(self.best_score, self.score)
        logger.info("Game over (%s) with score %d at level %d", reason, self.score, self.level)
        self._play("on_game_over")
        self._notify()

    def _play(self, name):
        """Fire a sound hook. Audio problems never reach the game state."""
        if self.sounds is None:
            return
        try:
            getattr(self.sounds, name)()
        except Exception as exc:
            logger.warning("Sound hook %s failed: %s", name, exc)

    def _notify(self):
        if self.renderer is not None:
            self.renderer.render(self.snake.cells, self.food, self.direction)
        if self.on_status is not None:
            self.on_status(self.state)
