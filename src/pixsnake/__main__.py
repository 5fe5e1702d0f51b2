from __future__ import annotations

import argparse

from . import config
from .game import run


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def _seed(text: str) -> int:
    value = int(text)
    if not 0 <= value < 1 << 32:
        raise argparse.ArgumentTypeError(f"seed must fit in 32 unsigned bits, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pixsnake", description="Grid snake on a pixel buffer.")
    parser.add_argument(
        "--seed",
        type=_seed,
        default=None,
        help="Fruit placement seed (reproducible session). Defaults to the wall clock.",
    )
    parser.add_argument("--fps", type=_positive_int, default=config.FPS, help="Simulation ticks per second.")
    parser.add_argument(
        "--field-size",
        type=_positive_int,
        default=config.FIELD_SIZE,
        help="Cells per side of the square field.",
    )
    parser.add_argument(
        "--cell-size",
        type=_positive_int,
        default=None,
        help="Pixels per cell (default fits the field into the standard window).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    return run(seed=ns.seed, fps=ns.fps, field_size=ns.field_size, cell_size=ns.cell_size)


if __name__ == "__main__":
    raise SystemExit(main())
