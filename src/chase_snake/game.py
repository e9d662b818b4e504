from __future__ import annotations

import logging
import random
import sys
import time

import pygame

from . import config
from .controls import read_held
from .logic import frame
from .render import draw_state
from .state import new_game

log = logging.getLogger(__name__)


def _quit(score: int) -> None:
    log.info("quit with score %d", score)
    pygame.quit()
    sys.exit(0)


def run(
    seed: int | None = None,
    fps: int = config.FPS,
    width: int = config.WIDTH,
    height: int = config.HEIGHT,
) -> None:
    now = time.monotonic
    if seed is None:
        seed = int(time.time())
    log.info("seed %d", seed)
    rng = random.Random(seed)

    pygame.init()
    screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    state = new_game(now(), rng)

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                _quit(state.score)

        held = read_held(pygame.key.get_pressed())
        state, quit_requested = frame(state, held, now(), rng)
        if quit_requested:
            _quit(state.score)

        draw_state(screen, state)
        pygame.display.flip()
        clock.tick(fps)
