from __future__ import annotations

import logging
import random
from collections.abc import Mapping

from . import config
from .state import DOWN, LEFT, RIGHT, UP, GameState, new_game, opposite, random_point

log = logging.getLogger(__name__)

# First held key wins.
DIRECTION_RULES = [
    ("right", RIGHT),
    ("left", LEFT),
    ("up", UP),
    ("down", DOWN),
]


def is_held(held: Mapping[str, bool], action: str) -> bool:
    return bool(held.get(action, False))


def resolve_direction(odir: tuple[int, int], held: Mapping[str, bool]) -> tuple[int, int] | None:
    for action, direction in DIRECTION_RULES:
        if is_held(held, action) and odir != opposite(direction):
            return direction
    return None


def handle_running_input(state: GameState, held: Mapping[str, bool]) -> bool:
    """Apply direction/pause keys while running. Returns True when quit was requested."""
    if not state.running:
        return False

    direction = resolve_direction(state.snake.odir, held)
    if direction is not None:
        state.snake.dir = direction
    elif is_held(held, "pause"):
        state.paused = True
        log.info("paused at score %d", state.score)
    elif config.ALLOW_QUIT and is_held(held, "quit"):
        return True
    return False


def tick_due(state: GameState, now: float) -> bool:
    return state.running and now - state.last_update > state.speed


def advance_snake(state: GameState) -> None:
    snake = state.snake
    snake.head = snake.head + snake.dir

    old_tail = snake.tail()
    old_tail = old_tail.clone() if old_tail is not None else None

    target = snake.head
    for segment in snake.body:
        segment.follow(target)
        target = segment

    if old_tail != snake.tail():
        state.score += config.TAIL_MOVE_SCORE


def eat_fruit(state: GameState, rng: random.Random) -> bool:
    snake = state.snake
    if snake.head != state.fruit:
        return False

    # May land on the snake; no re-roll.
    state.fruit = random_point(rng, state.squares)
    last = snake.tail() or snake.head
    snake.body.append(last.clone())

    state.score += config.FRUIT_SCORE
    state.speed = max(state.speed * config.SPEED_FACTOR, config.MIN_SPEED)
    log.debug("fruit eaten: length=%d speed=%.4f next=%s", len(snake), state.speed, state.fruit.to_tuple())
    return True


def check_collisions(state: GameState) -> bool:
    head = state.snake.head
    if not head.in_bounds(state.squares) or head in state.snake.body:
        if not state.game_over:
            log.info("game over at %r, score %d", head, state.score)
        state.game_over = True
    return state.game_over


def tick(state: GameState, now: float, rng: random.Random) -> None:
    state.last_update = now
    advance_snake(state)
    eat_fruit(state, rng)
    check_collisions(state)
    state.snake.odir = state.snake.dir


def frame(
    state: GameState,
    held: Mapping[str, bool],
    now: float,
    rng: random.Random,
) -> tuple[GameState, bool]:
    """Advance one rendered frame.

    Returns the state to draw (a fresh one after "play again") and whether
    the quit key ended the game.
    """
    if state.running:
        if handle_running_input(state, held):
            return state, True
        if tick_due(state, now):
            tick(state, now, rng)

    if state.game_over:
        if is_held(held, "confirm"):
            log.info("new game")
            return new_game(now, rng, state.squares), False
        if config.ALLOW_QUIT and is_held(held, "quit"):
            return state, True
    elif state.paused:
        if is_held(held, "confirm"):
            state.paused = False
            log.info("resumed")
        elif config.ALLOW_QUIT and is_held(held, "quit"):
            return state, True

    return state, False
