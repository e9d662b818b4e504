from __future__ import annotations

import random

from . import config

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)

RUNNING = "running"
PAUSED = "paused"
GAME_OVER = "game_over"


def opposite(direction: tuple[int, int]) -> tuple[int, int]:
    return (-direction[0], -direction[1])


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


class Point:
    """Integer grid cell."""

    __slots__ = ("x", "y")

    def __init__(self, x: int = 0, y: int = 0):
        self.x, self.y = x, y

    def __add__(self, direction):
        dx, dy = direction
        return Point(self.x + dx, self.y + dy)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Point({self.x}, {self.y})"

    def chebyshev(self, other: Point) -> int:
        return max(abs(other.x - self.x), abs(other.y - self.y))

    def follow(self, target: Point) -> None:
        """Step one cell toward ``target`` on each axis once it is two or more cells away.

        Both axes step together, so a segment can move diagonally.
        """
        if self.chebyshev(target) >= 2:
            self.x += _sign(target.x - self.x)
            self.y += _sign(target.y - self.y)

    def in_bounds(self, squares: int) -> bool:
        return 0 <= self.x < squares and 0 <= self.y < squares

    def clone(self) -> Point:
        return Point(self.x, self.y)

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


class Snake:
    def __init__(self, head: Point, body: list[Point], direction: tuple[int, int] = LEFT):
        self.head = head
        self.body = body  # index 0 is nearest the head
        self.dir = direction
        self.odir = direction  # direction applied on the last tick

    def tail(self) -> Point | None:
        return self.body[-1] if self.body else None

    def __len__(self):
        return len(self.body) + 1


def new_snake(squares: int = config.SQUARES) -> Snake:
    mid = squares // 2
    return Snake(Point(mid, mid), [Point(mid + 1, mid), Point(mid + 2, mid)], LEFT)


def random_point(rng: random.Random, squares: int = config.SQUARES) -> Point:
    x = rng.randrange(squares)
    y = rng.randrange(squares)
    return Point(x, y)


class GameState:
    def __init__(
        self,
        snake: Snake,
        fruit: Point,
        last_update: float,
        squares: int = config.SQUARES,
    ):
        self.snake = snake
        self.fruit = fruit
        self.score = 0
        self.speed = config.START_SPEED
        self.last_update = last_update
        self.game_over = False
        self.paused = False
        self.squares = squares

    @property
    def mode(self) -> str:
        if self.game_over:
            return GAME_OVER
        if self.paused:
            return PAUSED
        return RUNNING

    @property
    def running(self) -> bool:
        return self.mode == RUNNING


def new_game(now: float, rng: random.Random, squares: int = config.SQUARES) -> GameState:
    return GameState(
        snake=new_snake(squares),
        fruit=random_point(rng, squares),
        last_update=now,
        squares=squares,
    )
