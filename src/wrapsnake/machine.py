"""
Top-level game flow: Playing, Menu and GameOver, and what moves between them.

`Game.handle_event` is the only way the state changes. It never performs side
effects itself; rendering, tick scheduling and random positions are returned
as intents for the host to carry out. Random positions come back later as a
`PositionReady` event.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .config import CFG, Config
from .engine import Outcome, step
from .food import PositionRequest, Purpose, accepts
from .geometry import Position
from .keys import Key
from .state import GameOver, GameState, Menu, MenuOption, Playing, new_game_state

logger = logging.getLogger(__name__)


# ---------- Events ----------
@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class KeyPressed:
    key: Key


@dataclass(frozen=True)
class PositionReady:
    request: PositionRequest
    position: Position


Event = Union[Tick, KeyPressed, PositionReady]


# ---------- Intents ----------
@dataclass(frozen=True)
class Render:
    pass


@dataclass(frozen=True)
class ScheduleTick:
    delay_ms: float


@dataclass(frozen=True)
class RequestPosition:
    request: PositionRequest


Intent = Union[Render, ScheduleTick, RequestPosition]


class Game:
    """Owns the single live GameState and applies events to it."""

    def __init__(self, cfg: Config = CFG):
        self.cfg = cfg
        self._ids = itertools.count(1)
        self.state: Optional[GameState] = None

    # ---------- Lifecycle ----------
    def start(self) -> Tuple[GameState, List[Intent]]:
        """Create the first game and start the clock."""
        intents = self._reset()
        intents.append(ScheduleTick(self.cfg.tick_ms(self.state.speed)))
        return self.state, intents

    def _reset(self) -> List[Intent]:
        self.state = new_game_state(self.cfg)
        return [self._request(Purpose.SNAKE), Render()]

    def _request(self, purpose: Purpose) -> RequestPosition:
        request = PositionRequest(next(self._ids), purpose)
        self.state.pending = request
        return RequestPosition(request)

    # ---------- Dispatch ----------
    def handle_event(self, event: Event) -> Tuple[GameState, List[Intent]]:
        if self.state is None:
            raise RuntimeError("Game.start() must be called before handling events")

        if isinstance(event, Tick):
            intents = self._on_tick()
        elif isinstance(event, KeyPressed):
            intents = self._on_key(event.key)
        elif isinstance(event, PositionReady):
            intents = self._on_position(event.request, event.position)
        else:
            raise TypeError(f"Unknown event: {event!r}")
        return self.state, intents

    def _on_tick(self) -> List[Intent]:
        state = self.state
        # Period is read now so a speed change only affects later ticks
        intents: List[Intent] = [ScheduleTick(self.cfg.tick_ms(state.speed))]

        if not isinstance(state.mode, Playing) or not state.snake:
            return intents

        outcome = step(state)
        if outcome is Outcome.ATE:
            logger.debug("Ate at %s, points=%d length=%d", state.head, state.points, state.length)
            intents.append(self._request(Purpose.FOOD))
        elif outcome is Outcome.DIED:
            logger.info("Game over: points=%d length=%d", state.points, state.length)
        intents.append(Render())
        return intents

    def _on_key(self, key: Key) -> List[Intent]:
        state = self.state
        mode = state.mode

        if isinstance(mode, Playing):
            if key.direction is not None:
                state.inputs.push(key.direction)
                return []
            if key is Key.MENU:
                return self._set_mode(Menu(MenuOption.SPEED))
            return []

        if isinstance(mode, Menu):
            if key is Key.MENU:
                return self._set_mode(Playing())
            if key is Key.UP:
                return self._set_mode(Menu(MenuOption.SPEED))
            if key is Key.DOWN:
                return self._set_mode(Menu(MenuOption.RESTART))
            if mode.option is MenuOption.SPEED and key in (Key.LEFT, Key.RIGHT):
                delta = 1 if key is Key.RIGHT else -1
                speed = self.cfg.clamp_speed(state.speed + delta)
                if speed == state.speed:
                    return []
                state.speed = speed
                logger.debug("Speed set to %d", state.speed)
                return [Render()]
            if mode.option is MenuOption.RESTART and key is Key.ACCEPT:
                logger.info("Restarting from menu")
                return self._reset()
            return []

        if isinstance(mode, GameOver) and key is Key.ACCEPT:
            logger.info("Restarting after game over")
            return self._reset()
        return []

    def _set_mode(self, mode) -> List[Intent]:
        if mode == self.state.mode:
            return []
        logger.info("Mode %s -> %s", self.state.mode, mode)
        self.state.mode = mode
        return [Render()]

    def _on_position(self, request: PositionRequest, position: Position) -> List[Intent]:
        state = self.state
        if request != state.pending:
            logger.debug("Dropping stale position response %s", request)
            return []

        x, y = position
        position = (x % state.width, y % state.height)

        if request.purpose is Purpose.SNAKE:
            if position in state.obstacles:
                return [self._request(Purpose.SNAKE)]
            state.snake = [position]
            logger.debug("Snake placed at %s", position)
            return [self._request(Purpose.FOOD), Render()]

        if not accepts(position, state.occupied()):
            logger.debug("Food candidate %s occupied, requesting another", position)
            return [self._request(Purpose.FOOD)]
        state.food = position
        state.pending = None
        return [Render()]
