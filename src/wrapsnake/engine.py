# engine.py
from enum import Enum

from .geometry import add
from .state import GameOver, GameState


class Outcome(Enum):
    MOVED = "moved"
    ATE = "ate"
    DIED = "died"


def step(state: GameState) -> Outcome:
    """
    Advance the snake one cell. Mutates `state` and reports what happened.
    The caller is responsible for requesting new food after ATE.
    """
    # Commit direction once per tick
    state.direction = state.inputs.resolve(state.direction)

    new_head = add(state.head, state.direction.vector, state.width, state.height)
    body = [new_head] + state.snake

    # Move / grow
    if new_head == state.food:
        state.points += state.speed
        state.length += 1
        state.snake = body[:state.length]
        state.food = None
        return Outcome.ATE

    state.snake = body[:state.length]

    # Self / obstacle collision; snake is left as computed for the final frame
    if new_head in state.snake[1:] or new_head in state.obstacles:
        state.mode = GameOver()
        return Outcome.DIED

    return Outcome.MOVED
