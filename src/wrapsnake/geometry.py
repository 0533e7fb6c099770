# geometry.py
from enum import Enum
from typing import Tuple

from .config import GRID_W, GRID_H

Position = Tuple[int, int]


# ----- Directions (dx, dy) -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self) -> Position:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


def direction_vector(direction: Direction) -> Position:
    return direction.vector


def opposite(direction: Direction) -> Direction:
    return direction.opposite


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.opposite is b


def add(pos: Position, vector: Position, width: int = GRID_W, height: int = GRID_H) -> Position:
    """Move `pos` by `vector` on the torus; x wraps on width, y on height."""
    # Python's % already maps negatives into [0, n)
    return ((pos[0] + vector[0]) % width, (pos[1] + vector[1]) % height)
