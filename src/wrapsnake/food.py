# food.py
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Callable, Optional

from .config import GRID_W, GRID_H
from .geometry import Position

logger = logging.getLogger(__name__)


class Purpose(Enum):
    SNAKE = "snake"   # seed cell of a new snake
    FOOD = "food"


@dataclass(frozen=True)
class PositionRequest:
    """Token for one outstanding random-position request."""
    id: int
    purpose: Purpose


def random_position(rng: Optional[random.Random] = None, width: int = GRID_W, height: int = GRID_H) -> Position:
    rng = rng or random
    return (rng.randrange(width), rng.randrange(height))


def accepts(candidate: Position, occupied: AbstractSet[Position]) -> bool:
    return candidate not in occupied


def place_food(occupied: AbstractSet[Position], draw: Callable[[], Position] = random_position) -> Position:
    """Draw candidates until one lands on a free cell. Never returns on a full board."""
    while True:
        cand = draw()
        if accepts(cand, occupied):
            return cand
        logger.debug("Food candidate %s occupied, retrying", cand)
