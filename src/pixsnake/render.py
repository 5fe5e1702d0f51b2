from __future__ import annotations

import numpy as np
import pygame

from . import config
from .linalg import Vector2d
from .world import World


class Frame:
    """RGB pixel buffer the world is drawn into before it reaches the screen."""

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        self.color = np.zeros((self.height, self.width, 3), dtype=np.uint8)

    def clear(self, color: tuple[int, int, int]) -> None:
        self.color[:, :] = color

    def fill_rect(self, x: int, y: int, w: int, h: int, color: tuple[int, int, int]) -> None:
        x0 = max(0, x)
        y0 = max(0, y)
        x1 = min(self.width, x + w)
        y1 = min(self.height, y + h)
        if x0 >= x1 or y0 >= y1:
            return
        self.color[y0:y1, x0:x1] = color

    def hollow_rect(self, x: int, y: int, w: int, h: int, color: tuple[int, int, int]) -> None:
        self.fill_rect(x, y, w, 1, color)
        self.fill_rect(x, y + h - 1, w, 1, color)
        self.fill_rect(x, y, 1, h, color)
        self.fill_rect(x + w - 1, y, 1, h, color)

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        r, g, b = self.color[y, x]
        return (int(r), int(g), int(b))

    def present(self, surface: pygame.Surface) -> None:
        if surface.get_size() != (self.width, self.height):
            raise ValueError(
                f"surface is {surface.get_size()}, frame is {(self.width, self.height)}"
            )
        # pygame surfarray is (w, h, c), internal buffer is (h, w, c).
        pygame.surfarray.blit_array(surface, np.transpose(self.color, (1, 0, 2)))


def cell_rect(cell: Vector2d, cell_size: int) -> tuple[int, int, int, int]:
    return (cell.x * cell_size, cell.y * cell_size, cell_size, cell_size)


def draw_world(frame: Frame, world: World, cell_size: int = config.SNAKE_SIZE) -> None:
    frame.clear(config.BG_COLOR)
    frame.hollow_rect(0, 0, frame.width - 1, frame.height - 1, config.BORDER_COLOR)

    frame.fill_rect(*cell_rect(world.head, cell_size), config.HEAD_COLOR)
    for cell in world.body:
        frame.fill_rect(*cell_rect(cell, cell_size), config.BODY_COLOR)

    frame.fill_rect(*cell_rect(world.fruit, cell_size), config.FRUIT_COLOR)
