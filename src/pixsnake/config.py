from __future__ import annotations

TITLE = "Snake"

# Window / frame size in pixels.
WIDTH, HEIGHT = 800, 800
FIELD_SIZE = 20
SNAKE_SIZE = WIDTH // FIELD_SIZE

# Simulation ticks per second.
FPS = 10

BG_COLOR = (0, 0, 0)
HEAD_COLOR = (0, 0xFC, 0)
BODY_COLOR = (0, 0xFF, 0)
FRUIT_COLOR = (0xFF, 0, 0)
BORDER_COLOR = (0xFF, 0, 0)

# Added to the wall clock when seeding from time.
SEED_OFFSET = SNAKE_SIZE * WIDTH
DEFAULT_SEED = 98734677 + SEED_OFFSET
