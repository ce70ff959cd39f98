"""
Food placement on free cells of the grid.
"""

import logging
import random
from typing import Optional

from .config import SPAWN_MAX_ATTEMPTS
from .grid import Cell, GridModel
from .snake import Snake

logger = logging.getLogger(__name__)


class BoardFullError(RuntimeError):
    """Raised when the snake covers every cell and food has nowhere to go."""


class FoodSpawner:
    """
    Picks a random cell that the snake does not occupy.

    Random draws are retried up to ``max_attempts`` times. After that the
    free cells are enumerated and one is chosen uniformly, so a crowded
    board still terminates quickly and a full board is reported instead
    of looping forever.
    """

    def __init__(self, rng: Optional[random.Random] = None, max_attempts: int = SPAWN_MAX_ATTEMPTS):
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts

    def spawn(self, grid: GridModel, snake: Snake) -> Cell:
        for _ in range(self.max_attempts):
            cell = grid.random_cell(self.rng)
            if not snake.occupies(cell):
                logger.debug(f"Food placed at {cell}")
                return cell

        free = [cell for cell in grid.cells() if not snake.occupies(cell)]
        if not free:
            raise BoardFullError(
                f"snake of length {len(snake)} fills the {grid.tile_count}x{grid.tile_count} grid"
            )
        cell = self.rng.choice(free)
        logger.debug(f"Food placed at {cell} from {len(free)} free cells after {self.max_attempts} misses")
        return cell
