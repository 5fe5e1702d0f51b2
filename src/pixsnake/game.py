from __future__ import annotations

import math

import pygame

from . import config
from .interval import NS_PER_SECOND, Due, Interval
from .keys import direction_for_key, is_quit_event
from .render import Frame, draw_world
from .rng import Rng
from .world import World


def millis_until(wake_at: int, now: int) -> int:
    return max(0, math.ceil((wake_at - now) * 1000 / NS_PER_SECOND))


def _show(screen: pygame.Surface, frame_surf: pygame.Surface) -> None:
    if screen.get_size() == frame_surf.get_size():
        screen.blit(frame_surf, (0, 0))
    else:
        screen.blit(pygame.transform.scale(frame_surf, screen.get_size()), (0, 0))
    pygame.display.flip()


def run(
    seed: int | None = None,
    fps: int = config.FPS,
    field_size: int = config.FIELD_SIZE,
    cell_size: int | None = None,
) -> int:
    if cell_size is None:
        cell_size = max(1, config.WIDTH // field_size)
    size = (field_size * cell_size, field_size * cell_size)

    rng = Rng.from_time() if seed is None else Rng(seed)
    world = World(rng, field_size=field_size)
    interval = Interval(fps)

    pygame.init()
    pygame.display.set_caption(config.TITLE)
    screen = pygame.display.set_mode(size, pygame.RESIZABLE)
    frame = Frame(*size)
    frame_surf = pygame.Surface(size)

    def redraw() -> None:
        draw_world(frame, world, cell_size)
        frame.present(frame_surf)
        _show(screen, frame_surf)

    redraw()
    try:
        while True:
            for event in pygame.event.get():
                if is_quit_event(event):
                    return 0
                if event.type == pygame.KEYDOWN:
                    world.input(direction_for_key(event.key))
                elif event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.get_surface()
                    _show(screen, frame_surf)

            decision = interval.poll()
            if isinstance(decision, Due):
                needs_redraw, terminated = world.update()
                if needs_redraw:
                    redraw()
                if terminated:
                    print("Game Over! Score:", world.score)
                    return 0
            else:
                wait_ms = millis_until(decision.wake_at, interval.clock())
                if wait_ms > 0:
                    pygame.time.wait(wait_ms)
    finally:
        pygame.quit()
