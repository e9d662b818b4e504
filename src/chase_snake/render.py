from __future__ import annotations

from functools import lru_cache

import pygame

from . import config
from .state import GameState

PAUSED_TEXT = "Paused. Press [enter] to continue."
GAME_OVER_TEXT = "Game Over. Press [enter] to play again."


def board_layout(width: int, height: int, squares: int = config.SQUARES) -> tuple[float, float, float]:
    """Return (cell size, board left, board top) for a window of the given size."""
    side = min(width, height - config.HUD_HEIGHT)
    cell = max(side - config.BOARD_MARGIN, squares) / squares
    side = cell * squares
    offset_x = (width - side) / 2
    offset_y = (height - side) / 2 + config.HUD_HEIGHT
    return cell, offset_x, offset_y


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _cell_rect(x: int, y: int, cell: float, ox: float, oy: float) -> pygame.Rect:
    size = max(1, round(cell))
    return pygame.Rect(round(ox + x * cell), round(oy + y * cell), size, size)


def _draw_centered(screen: pygame.Surface, text: str, y: float, above: bool) -> None:
    surf = _font(config.FONT_SIZE).render(text, True, config.TEXT_COLOR)
    rect = surf.get_rect(centerx=screen.get_width() // 2)
    if above:
        rect.bottom = round(y)
    else:
        rect.top = round(y)
    screen.blit(surf, rect)


def draw_state(screen: pygame.Surface, state: GameState) -> None:
    screen.fill(config.BACKGROUND_COLOR)

    cell, ox, oy = board_layout(screen.get_width(), screen.get_height(), state.squares)
    side = cell * state.squares
    pygame.draw.rect(screen, config.BOARD_COLOR, pygame.Rect(round(ox), round(oy), round(side), round(side)))

    for p in state.snake.body:
        pygame.draw.rect(screen, config.BODY_COLOR, _cell_rect(p.x, p.y, cell, ox, oy))

    head = state.snake.head
    pygame.draw.rect(screen, config.HEAD_COLOR, _cell_rect(head.x, head.y, cell, ox, oy))

    fruit = state.fruit
    center = (ox + fruit.x * cell + cell / 2, oy + fruit.y * cell + cell / 2)
    pygame.draw.circle(screen, config.FRUIT_COLOR, center, cell / 2)

    _draw_centered(screen, f"Score: {state.score}", oy, above=True)
    if state.game_over:
        _draw_centered(screen, GAME_OVER_TEXT, oy, above=False)
    elif state.paused:
        _draw_centered(screen, PAUSED_TEXT, oy, above=False)
