from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Union

NS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True)
class Due:
    pass


@dataclass(frozen=True)
class NotDue:
    # Earliest clock reading (ns) at which polling again can yield Due.
    wake_at: int


DUE = Due()
TickDecision = Union[Due, NotDue]


class Interval:
    """Fixed-rate tick gate.

    Time is kept in integer nanoseconds. Measures from the last tick that
    fired, so a late poll never queues up extra ticks.
    """

    def __init__(self, ticks_per_second: int, clock: Callable[[], int] = time.monotonic_ns):
        if ticks_per_second <= 0:
            raise ValueError(f"ticks_per_second must be positive, got {ticks_per_second}")
        self.clock = clock
        self.period = NS_PER_SECOND // ticks_per_second
        self.last = clock()

    def poll(self) -> TickDecision:
        now = self.clock()
        since_last = now - self.last
        if since_last >= self.period:
            self.last = now
            return DUE
        return NotDue(now + (self.period - since_last))
