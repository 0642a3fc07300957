# geometry.py
from enum import Enum
from typing import NamedTuple

from .config import GRID_W, GRID_H


class Direction(Enum):
    """Heading of the snake, valued by its (dx, dy) step."""

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

    def is_opposite(self, other: "Direction") -> bool:
        return other is self.opposite


class Position(NamedTuple):
    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        return Position(self.x + direction.dx, self.y + direction.dy)


def in_bounds(pos: Position, width: int = GRID_W, height: int = GRID_H) -> bool:
    """Check if a cell is inside the grid."""
    x, y = pos
    return 0 <= x < width and 0 <= y < height
