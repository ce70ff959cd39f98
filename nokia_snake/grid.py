"""
Playfield geometry: cells, directions and the square tile grid.
"""

from enum import Enum
from typing import Iterator, Tuple

Cell = Tuple[int, int]


class Direction(Enum):
    """Movement vector (dx, dy); NONE means the snake holds position."""

    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))


class GridModel:
    """
    An N x N tile grid laid over a square drawing surface.

    Attributes:
        tile_size: edge of one tile in pixels
        tile_count: number of tiles along each axis
    """

    def __init__(self, surface_size: int, tile_size: int):
        if tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {tile_size}")
        self.surface_size = surface_size
        self.tile_size = tile_size
        self.tile_count = surface_size // tile_size
        if self.tile_count < 1:
            raise ValueError(
                f"surface of {surface_size}px holds no {tile_size}px tiles"
            )

    @property
    def center(self) -> Cell:
        return (self.tile_count // 2, self.tile_count // 2)

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.tile_count and 0 <= y < self.tile_count

    def random_cell(self, rng) -> Cell:
        """Draw a uniformly random cell."""
        return (rng.randrange(self.tile_count), rng.randrange(self.tile_count))

    def cells(self) -> Iterator[Cell]:
        for y in range(self.tile_count):
            for x in range(self.tile_count):
                yield (x, y)

    def __repr__(self):
        return f"<GridModel {self.tile_count}x{self.tile_count} tile={self.tile_size}px>"
