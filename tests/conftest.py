import pytest

from wrapsnake.config import Config
from wrapsnake.geometry import Direction
from wrapsnake.state import new_game_state


@pytest.fixture
def cfg():
    return Config(seed=0, initial_speed=5)


@pytest.fixture
def make_state(cfg):
    """Build a GameState with the given snake and overrides."""
    def _make(snake, direction=Direction.RIGHT, food=(10, 0), **overrides):
        state = new_game_state(cfg)
        state.snake = list(snake)
        state.direction = direction
        state.food = food
        for name, value in overrides.items():
            setattr(state, name, value)
        return state
    return _make
