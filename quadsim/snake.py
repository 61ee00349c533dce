"""Grid snake game logic."""

from __future__ import annotations

import random
from collections import deque
from enum import Enum

Point = tuple[int, int]


class Direction(Enum):
    """Movement direction as a `(dx, dy)` step; y grows downwards."""

    UP = (0, -1)
    DOWN = (0, 1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class SnakeGame:
    """State of a snake game on a `squares` by `squares` board."""

    SCORE_PER_FRUIT = 100
    INITIAL_SPEED = 0.3
    SPEEDUP = 0.9

    def __init__(self, squares: int = 16, rng: random.Random | None = None) -> None:
        if squares <= 0:
            raise ValueError("board must have at least one square")
        self.squares = squares
        self.rng = rng if rng is not None else random.Random()
        self.restart()

    def _random_point(self) -> Point:
        return (self.rng.randrange(0, self.squares), self.rng.randrange(0, self.squares))

    def restart(self) -> None:
        """Put the snake back in the corner and reset score and speed."""
        self.head: Point = (0, 0)
        self.body: deque[Point] = deque()
        self.direction = Direction.RIGHT
        self.fruit: Point = self._random_point()
        self.score = 0
        self.speed = self.INITIAL_SPEED
        self.navigation_lock = False
        self.game_over = False

    def steer(self, direction: Direction) -> bool:
        """Turn the snake; at most one turn per tick and never straight back."""
        if self.game_over or self.navigation_lock:
            return False
        if direction is self.direction.opposite:
            return False
        self.direction = direction
        self.navigation_lock = True
        return True

    def tick(self) -> None:
        """Move the snake one square, eating fruit and checking for crashes."""
        if self.game_over:
            return
        self.body.appendleft(self.head)
        dx, dy = self.direction.value
        self.head = (self.head[0] + dx, self.head[1] + dy)
        if self.head == self.fruit:
            self.fruit = self._random_point()
            self.score += self.SCORE_PER_FRUIT
            self.speed *= self.SPEEDUP
        else:
            self.body.pop()

        x, y = self.head
        if not (0 <= x < self.squares and 0 <= y < self.squares):
            self.game_over = True
        if self.head in self.body:
            self.game_over = True
        self.navigation_lock = False