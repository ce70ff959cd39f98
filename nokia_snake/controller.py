"""
The game state machine: one play session of Nokia Snake.

The controller has no clock of its own. Something outside it (the
Ticker in the application, or a test calling ``tick()`` directly) decides
when the snake moves.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .config import SCORE_PER_FOOD
from .food import BoardFullError, FoodSpawner
from .grid import Cell, Direction, GridModel
from .render import NullRenderer, Renderer
from .snake import Snake
from .sound import NullSoundEffects, SoundEffects

logger = logging.getLogger(__name__)

START_PROMPT = "Press SPACE to start"
PLAYING = "Playing..."
PAUSED = "Paused - Press SPACE to continue"


class GamePhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Command(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    TOGGLE_PLAY = "toggle_play"
    RESTART = "restart"


MOVES = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the session handed to renderers."""

    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    grid_size: int
    tile_count: int
    score: int
    phase: GamePhase
    status: str
    blink: bool


class GameController:
    """
    Owns the snake, food, score, direction and phase of one session.

    Rendering and sound go through the ``renderer`` and ``sound``
    capabilities. Both are best effort: an exception from either is
    logged and dropped so it can never change game state.
    """

    def __init__(
        self,
        grid: GridModel,
        spawner: Optional[FoodSpawner] = None,
        sound: Optional[SoundEffects] = None,
        renderer: Optional[Renderer] = None,
    ):
        self.grid = grid
        self.spawner = spawner if spawner is not None else FoodSpawner()
        self.sound = sound if sound is not None else NullSoundEffects()
        self.renderer = renderer if renderer is not None else NullRenderer()
        self.restart()

    # ----- Commands ---------------------------------------------------------

    def toggle_play(self) -> None:
        """Start, pause or resume; after game over this restarts instead."""
        if self.phase is GamePhase.GAME_OVER:
            self.restart()
            return

        if self.phase is GamePhase.RUNNING:
            self._enter(GamePhase.PAUSED, PAUSED)
        else:
            self._enter(GamePhase.RUNNING, PLAYING)
        self._render()

    def set_direction(self, requested: Direction) -> bool:
        """Steer the snake. Ignored unless running or if it would reverse."""
        if self.phase is not GamePhase.RUNNING:
            return False
        if requested is Direction.NONE:
            return False
        # Compare against the last move made, not the last key pressed.
        applied = self.heading if self.heading is not Direction.NONE else self.direction
        if requested is applied.opposite:
            return False
        self.direction = requested
        return True

    def handle(self, command: Command) -> bool:
        """Apply an input command; returns whether it was accepted."""
        if command is Command.TOGGLE_PLAY:
            self.toggle_play()
            return True
        if command is Command.RESTART:
            if self.phase is not GamePhase.GAME_OVER:
                return False
            self.restart()
            return True
        return self.set_direction(MOVES[command])

    def restart(self) -> None:
        self.snake = Snake([self.grid.center])
        self.direction = Direction.NONE
        self.heading = Direction.NONE
        self.score = 0
        self.phase = GamePhase.IDLE
        self.status = START_PROMPT
        self.blink = False
        self.game_over_reason: Optional[str] = None
        self.food: Optional[Cell] = self.spawner.spawn(self.grid, self.snake)
        logger.info("Session reset")
        self._render()

    # ----- Simulation -------------------------------------------------------

    def tick(self) -> None:
        """Advance the snake by one cell."""
        if self.phase is not GamePhase.RUNNING:
            return
        if self.direction is Direction.NONE:
            return

        new_head = self.snake.advance(self.direction)
        self.heading = self.direction

        if not self.grid.in_bounds(new_head):
            self._end_game("wall")
            return

        # The tail has not moved yet, so stepping into it counts as a hit.
        if self.snake.occupies(new_head):
            self._end_game("self")
            return

        self.snake.grow_to(new_head)

        if new_head == self.food:
            self.score += SCORE_PER_FOOD
            self._best_effort(self.sound.on_eat)
            try:
                self.food = self.spawner.spawn(self.grid, self.snake)
            except BoardFullError:
                self.food = None
                self._end_game("board_full")
                return
        else:
            self.snake.shrink()

        self._render()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self.snake.body,
            food=self.food,
            grid_size=self.grid.tile_size,
            tile_count=self.grid.tile_count,
            score=self.score,
            phase=self.phase,
            status=self.status,
            blink=self.blink,
        )

    # ----- Internals --------------------------------------------------------

    def _enter(self, phase: GamePhase, status: str) -> None:
        logger.info(f"Phase {self.phase.value} -> {phase.value}")
        self.phase = phase
        self.status = status

    def _end_game(self, reason: str) -> None:
        self.game_over_reason = reason
        self._enter(GamePhase.GAME_OVER, f"Game Over! Score: {self.score} - Press R to restart")
        self.blink = True
        logger.info(f"Game over ({reason}) with score {self.score}, length {len(self.snake)}")
        self._best_effort(self.sound.on_game_over)
        self._render()

    def _render(self) -> None:
        self._best_effort(self.renderer.draw, self.snapshot())

    def _best_effort(self, call, *args) -> None:
        try:
            call(*args)
        except Exception as e:
            logger.debug(f"Ignoring {type(e).__name__} from {getattr(call, '__qualname__', call)}: {e}")
