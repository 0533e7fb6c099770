# main.py
import argparse
import dataclasses
import logging
import random
from collections import deque
from typing import Iterable, Optional

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, GRID_W, GRID_H, CFG
from .food import random_position
from .keys import Key
from .machine import (
    Game, KeyPressed, PositionReady, Render, RequestPosition, ScheduleTick, Tick,
)
from .render import draw

logger = logging.getLogger(__name__)

PYGAME_KEYS = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_ESCAPE: Key.MENU,
    pygame.K_RETURN: Key.ACCEPT,
    pygame.K_KP_ENTER: Key.ACCEPT,
}


class Host:
    """Carries out the intents the game returns: clock, random source, redraws."""

    def __init__(self, game: Game, seed: Optional[int]):
        self.game = game
        self.rng = random.Random(seed)
        self.responses: deque = deque()   # delivered on the next loop iteration
        self.next_tick: Optional[int] = None
        self.dirty = True

    def apply(self, intents: Iterable, now_ms: int) -> None:
        for intent in intents:
            if isinstance(intent, Render):
                self.dirty = True
            elif isinstance(intent, ScheduleTick):
                self.next_tick = now_ms + int(intent.delay_ms)
            elif isinstance(intent, RequestPosition):
                pos = random_position(self.rng, GRID_W, GRID_H)
                self.responses.append(PositionReady(intent.request, pos))

    def dispatch(self, event, now_ms: int) -> None:
        _, intents = self.game.handle_event(event)
        self.apply(intents, now_ms)

    def pump(self, now_ms: int) -> None:
        """Deliver position responses queued before this call, then a due tick."""
        for _ in range(len(self.responses)):
            self.dispatch(self.responses.popleft(), now_ms)
        if self.next_tick is not None and now_ms >= self.next_tick:
            self.next_tick = None
            self.dispatch(Tick(), now_ms)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake on a wrap-around board.")
    parser.add_argument("--speed", type=int, default=CFG.initial_speed,
                        help="starting speed in ticks per second")
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed for snake and food placement")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = dataclasses.replace(CFG, seed=args.seed, initial_speed=CFG.clamp_speed(args.speed))

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    game = Game(cfg)
    host = Host(game, cfg.seed)
    _, intents = game.start()
    host.apply(intents, pygame.time.get_ticks())
    logger.info("Started with speed=%d seed=%s", cfg.initial_speed, cfg.seed)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                key = PYGAME_KEYS.get(event.key, Key.OTHER)
                host.dispatch(KeyPressed(key), pygame.time.get_ticks())
        if not running:
            break

        # 2) update
        host.pump(pygame.time.get_ticks())

        # 3) render
        if host.dirty:
            draw(screen, font, game.state)
            pygame.display.flip()
            host.dirty = False
        clock.tick(60)  # movement is gated by scheduled ticks, not frame rate

    pygame.quit()


if __name__ == "__main__":
    main()
