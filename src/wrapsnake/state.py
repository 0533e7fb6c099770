"""
Game state and the top-level modes it can be in.

GameMode is a tagged union: `Playing`, `Menu(option)` or `GameOver`. Only the
menu carries extra data (the highlighted option).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional, Set, Union

from .config import CFG, Config, GRID_W, GRID_H
from .food import PositionRequest
from .geometry import Direction, Position
from .input_buffer import InputBuffer


class MenuOption(Enum):
    SPEED = "speed"
    RESTART = "restart"


@dataclass(frozen=True)
class Playing:
    pass


@dataclass(frozen=True)
class Menu:
    option: MenuOption = MenuOption.SPEED


@dataclass(frozen=True)
class GameOver:
    pass


GameMode = Union[Playing, Menu, GameOver]


@dataclass
class GameState:
    snake: List[Position]          # head at index 0
    direction: Direction
    inputs: InputBuffer
    length: int                    # target body length; snake grows toward it
    points: int
    speed: int                     # ticks per second
    food: Optional[Position]       # None while a placement is in flight
    mode: GameMode = field(default_factory=Playing)
    obstacles: FrozenSet[Position] = frozenset()
    pending: Optional[PositionRequest] = None
    width: int = GRID_W
    height: int = GRID_H

    @property
    def head(self) -> Position:
        return self.snake[0] if self.snake else (0, 0)

    def occupied(self) -> Set[Position]:
        """Cells food may not be placed on."""
        return set(self.snake) | set(self.obstacles)

    def print_board(self) -> str:
        """
        ASCII dump of the board, row 0 at the top:
        . = empty, F = food, # = obstacle, o = body, H = head
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]
        for x, y in self.obstacles:
            board[y][x] = '#'
        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'
        for i, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if i == 0 else 'o'
        return "\n".join(''.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState mode={type(self.mode).__name__}, snake={self.snake}, "
            f"food={self.food}, points={self.points}, speed={self.speed}>"
        )


def new_game_state(cfg: Config = CFG) -> GameState:
    """Fresh state with no snake yet; the caller requests the seed cell."""
    return GameState(
        snake=[],
        direction=Direction.RIGHT,
        inputs=InputBuffer(cfg.input_queue_size),
        length=cfg.initial_length,
        points=0,
        speed=cfg.initial_speed,
        food=None,
    )
