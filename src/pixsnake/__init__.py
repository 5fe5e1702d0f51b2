from .interval import DUE, Due, Interval, NotDue
from .linalg import Vector2d
from .rng import Rng
from .world import Direction, Phase, World

__all__ = [
    "DUE",
    "Direction",
    "Due",
    "Interval",
    "NotDue",
    "Phase",
    "Rng",
    "Vector2d",
    "World",
]
