"""
Snake body for the game engine.
"""

from typing import Iterable, Iterator, List, Tuple

from .grid import Cell, Direction


class Snake:
    """
    The snake's body, head first.

    Attributes:
        segments: list of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, segments: Iterable[Cell]):
        self.segments: List[Cell] = list(segments)
        if not self.segments:
            raise ValueError("a snake needs at least one segment")

    def head(self) -> Cell:
        return self.segments[0]

    def advance(self, direction: Direction) -> Cell:
        """Return the cell one step ahead of the head; the body is not moved."""
        x, y = self.head()
        return (x + direction.dx, y + direction.dy)

    def grow_to(self, new_head: Cell) -> None:
        self.segments.insert(0, new_head)

    def shrink(self) -> None:
        """Drop the tail; paired with grow_to this moves the snake one step."""
        if len(self.segments) == 1:
            raise ValueError("cannot shrink a one-segment snake")
        self.segments.pop()

    def occupies(self, cell: Cell) -> bool:
        return cell in self.segments

    @property
    def body(self) -> Tuple[Cell, ...]:
        return tuple(self.segments)

    def __len__(self):
        return len(self.segments)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.segments)

    def __repr__(self):
        return f"<Snake head={self.head()} length={len(self)}>"
