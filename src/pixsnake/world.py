from __future__ import annotations

from collections import deque
from enum import Enum

from . import config
from .linalg import Vector2d
from .rng import Rng

STILL = Vector2d(0, 0)


class Direction(Enum):
    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    RIGHT = (1, 0)

    @property
    def vector(self) -> Vector2d:
        return Vector2d(*self.value)


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    TERMINATED = "terminated"


class World:
    """Snake, fruit and heading on a square field.

    The body is ordered from the cell nearest the head to the tail. Input only
    sets the heading; movement happens in ``update``, once per tick.
    """

    def __init__(self, rng: Rng, field_size: int = config.FIELD_SIZE):
        if field_size < 1:
            raise ValueError(f"field_size must be at least 1, got {field_size}")
        self.field_size = field_size
        self.head = Vector2d(field_size // 2, field_size // 2)
        self.body: deque[Vector2d] = deque()
        self.fruit = Vector2d()
        self.direction = STILL
        self.rng = rng
        self.terminated = False

        self.create_fruit()

    @property
    def phase(self) -> Phase:
        if self.terminated:
            return Phase.TERMINATED
        if self.direction == STILL:
            return Phase.IDLE
        return Phase.RUNNING

    @property
    def score(self) -> int:
        return len(self.body)

    def cells(self) -> list[Vector2d]:
        return [self.head, *self.body]

    def input(self, key: Direction | None) -> None:
        # No reversal guard: turning back into the neck is left to the
        # self-collision check.
        if isinstance(key, Direction):
            self.direction = key.vector

    def update(self) -> tuple[bool, bool]:
        """Advance one tick. Returns ``(redraw, terminated)``."""
        if self.terminated:
            return False, True
        if self.direction == STILL:
            return False, False

        if self.body:
            self.body.appendleft(self.head)
            self.body.pop()
        self.head = self.head + self.direction

        if self.head == self.fruit:
            tail = self.body[-1] if self.body else self.head
            self.body.append(tail + -self.direction)
            self.create_fruit()

        if not self.in_field(self.head) or self.head in self.body:
            self.terminated = True

        return True, self.terminated

    def in_field(self, cell: Vector2d) -> bool:
        return 0 <= cell.x < self.field_size and 0 <= cell.y < self.field_size

    def create_fruit(self) -> None:
        # Spins forever once the snake covers the whole field.
        self.fruit = Vector2d(self.random_pos(), self.random_pos())
        while self.fruit == self.head or self.fruit in self.body:
            self.fruit = Vector2d(self.random_pos(), self.random_pos())

    def random_pos(self) -> int:
        return self.rng.gen() % self.field_size
