# render.py
from typing import Tuple

import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE, GRID_W, HUD_TOP,
    BG, GRID, GREEN, HEAD, RED, TEXT, DIM,
)
from .state import GameOver, GameState, Menu, MenuOption


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect.inflate(-2, -2))


def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    screen.fill(BG)
    pygame.draw.rect(screen, GRID, pygame.Rect(0, 0, GRID_W * CELL_SIZE, HUD_TOP), 1)
    # food
    if state.food is not None:
        draw_cell(screen, state.food[0], state.food[1], RED)
    # snake, tail first so the head is drawn on top
    for i, (x, y) in reversed(list(enumerate(state.snake))):
        draw_cell(screen, x, y, HEAD if i == 0 else GREEN)
    # HUD
    pts = font.render(f"Points: {state.points}", True, TEXT)
    spd = font.render(f"Speed: {state.speed}", True, TEXT)
    screen.blit(pts, (8, HUD_TOP + 8))
    screen.blit(spd, spd.get_rect(topright=(WIDTH - 8, HUD_TOP + 8)))


def _overlay(screen: pygame.Surface) -> None:
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))


def draw_menu(screen: pygame.Surface, font: pygame.font.Font, state: GameState, option: MenuOption) -> None:
    _overlay(screen)
    rows = [
        (MenuOption.SPEED, f"Speed: < {state.speed} >"),
        (MenuOption.RESTART, "Restart"),
    ]
    for n, (opt, label) in enumerate(rows):
        color = TEXT if opt is option else DIM
        prefix = "> " if opt is option else "  "
        surf = font.render(prefix + label, True, color)
        screen.blit(surf, surf.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 16 + n * 32)))


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, points: int) -> None:
    _overlay(screen)

    title = font.render("GAME OVER", True, (240, 240, 250))
    sub   = font.render("Press Enter to restart", True, TEXT)
    sco   = font.render(f"Points: {points}", True, TEXT)

    screen.blit(title, title.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 16)))
    screen.blit(sub, sub.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 16)))
    screen.blit(sco, sco.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 44)))


def draw(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    """Draw one full frame for whatever mode the game is in."""
    draw_game(screen, font, state)
    if isinstance(state.mode, Menu):
        draw_menu(screen, font, state, state.mode.option)
    elif isinstance(state.mode, GameOver):
        draw_game_over(screen, font, state.points)
