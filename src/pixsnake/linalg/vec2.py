class Vector2d:
    """A 2d grid point or direction."""

    __slots__ = ("x", "y")

    def __init__(self, x=0, y=0):
        self.x, self.y = int(x), int(y)

    def __add__(self, other):
        return Vector2d(self.x + other.x, self.y + other.y)

    def __neg__(self):
        return Vector2d(-self.x, -self.y)

    def __eq__(self, other):
        if not isinstance(other, Vector2d):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return (
            self.x,
            self.y,
        ).__repr__()

    def to_tuple(self):
        return (self.x, self.y)
