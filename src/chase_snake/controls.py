from __future__ import annotations

import pygame

KEY_BINDINGS: dict[str, tuple[int, ...]] = {
    "right": (pygame.K_RIGHT, pygame.K_d),
    "left": (pygame.K_LEFT, pygame.K_a),
    "up": (pygame.K_UP, pygame.K_w),
    "down": (pygame.K_DOWN, pygame.K_s),
    "pause": (pygame.K_SPACE,),
    "confirm": (pygame.K_RETURN, pygame.K_KP_ENTER),
    "quit": (pygame.K_ESCAPE,),
}


def _is_down(pressed, key: int) -> bool:
    try:
        return bool(pressed[key])
    except (IndexError, KeyError):
        return False


def read_held(pressed, bindings: dict[str, tuple[int, ...]] = KEY_BINDINGS) -> dict[str, bool]:
    """Map a ``pygame.key.get_pressed()`` table to held actions."""
    return {action: any(_is_down(pressed, key) for key in keys) for action, keys in bindings.items()}
