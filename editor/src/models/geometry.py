"""Geometry data structures shared by the glyph model and the editor views."""
from dataclasses import dataclass


@dataclass
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y pair across the different spaces:
    - Screen/UI pixels (Y-down)
    - Baseline origins and cursor positions in the preview
    - Pointer positions and frame deltas
    """
    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        return Vec2(self.x * scalar, self.y * scalar)

    def copy(self) -> 'Vec2':
        return Vec2(self.x, self.y)


@dataclass
class Rect:
    """Axis-aligned rectangle stored as position + size.

    Width and height may be negative (an inverted or mirrored rect). The
    x_min/x_max/y_min/y_max properties refer to the stored edges, not the
    visual extremes: x_min is always ``x`` and x_max is always ``x + width``.
    Setting an edge moves only that edge and keeps the opposite one fixed,
    which is what lets a drag push an edge past its opposite.
    """
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def x_min(self) -> float:
        return self.x

    @x_min.setter
    def x_min(self, value: float):
        old_x_max = self.x_max
        self.x = value
        self.width = old_x_max - value

    @property
    def x_max(self) -> float:
        return self.x + self.width

    @x_max.setter
    def x_max(self, value: float):
        self.width = value - self.x

    @property
    def y_min(self) -> float:
        return self.y

    @y_min.setter
    def y_min(self, value: float):
        old_y_max = self.y_max
        self.y = value
        self.height = old_y_max - value

    @property
    def y_max(self) -> float:
        return self.y + self.height

    @y_max.setter
    def y_max(self, value: float):
        self.height = value - self.y

    @property
    def position(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def center(self) -> Vec2:
        return Vec2(self.x + self.width / 2.0, self.y + self.height / 2.0)

    def contains(self, point, allow_inverse=False) -> bool:
        """Test whether a point lies inside the rect (half-open on the max edges).

        Args:
            point: Vec2 or (x, y) pair
            allow_inverse: If True, a rect with negative width/height is tested
                against the region it visually covers. If False, such a rect
                never contains anything.
        """
        px, py = point
        x_min, x_max = self.x_min, self.x_max
        y_min, y_max = self.y_min, self.y_max
        if allow_inverse:
            if x_min > x_max:
                x_min, x_max = x_max, x_min
            if y_min > y_max:
                y_min, y_max = y_max, y_min
        return x_min <= px < x_max and y_min <= py < y_max

    def copy(self) -> 'Rect':
        return Rect(self.x, self.y, self.width, self.height)

    def as_tuple(self) -> tuple:
        return (self.x, self.y, self.width, self.height)

    @classmethod
    def from_tuple(cls, values) -> 'Rect':
        x, y, width, height = values
        return cls(float(x), float(y), float(width), float(height))
