# keys.py
from enum import Enum
from typing import Optional

from .geometry import Direction


class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    MENU = "menu"
    ACCEPT = "accept"
    OTHER = "other"

    @property
    def direction(self) -> Optional[Direction]:
        """Direction for arrow keys, None otherwise."""
        return _DIRECTIONS.get(self)


_DIRECTIONS = {
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
}

# Browser KeyboardEvent.key names; must stay exactly as they are
KEY_NAMES = {
    "ArrowLeft": Key.LEFT,
    "ArrowRight": Key.RIGHT,
    "ArrowUp": Key.UP,
    "ArrowDown": Key.DOWN,
    "Escape": Key.MENU,
    "Enter": Key.ACCEPT,
}


def decode_key(name: str) -> Key:
    return KEY_NAMES.get(name, Key.OTHER)
