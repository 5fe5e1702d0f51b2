from .vec2 import Vector2d

__all__ = ["Vector2d"]
