from __future__ import annotations

import time
from typing import Callable

from . import config


class Rng:
    """Linear-congruential generator for fruit placement.

    Same seed, same sequence. Not meant for anything statistical.
    """

    MODULUS = 1 << 31
    MULTIPLIER = 1103515245
    INCREMENT = 12345

    def __init__(self, seed: int = config.DEFAULT_SEED):
        if not 0 <= seed < 1 << 32:
            raise ValueError(f"seed must be an unsigned 32-bit integer, got {seed}")
        self.last = seed

    @classmethod
    def from_time(cls, now: Callable[[], float] = time.time) -> Rng:
        return cls((int(now()) + config.SEED_OFFSET) % cls.MODULUS)

    def gen(self) -> int:
        self.last = (self.MULTIPLIER * self.last + self.INCREMENT) % self.MODULUS
        return self.last

    def __repr__(self):
        return f"Rng(last={self.last})"
