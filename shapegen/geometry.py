"""
Plane geometry value types and scalar helpers.

``Point`` and ``Bounds`` are frozen dataclasses so they can be shared freely
between shapes and used as dict keys.
"""

import math
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Point
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Point:
    """Immutable 2D coordinate."""
    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        return distance(self.x, self.y, other.x, other.y)

    def __str__(self):
        return f"({self.x:.2f}, {self.y:.2f})"


# ---------------------------------------------------------------------------
# Bounding rectangle
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Bounds:
    """Axis-aligned region ``[min_x, max_x] x [min_y, max_y]``."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def shrink(self, factor: float) -> "Bounds":
        """Scale both spans by *factor* around the center.

        ``factor=1`` returns an equal region, ``factor=0`` collapses it to
        the center point.
        """
        c = self.center
        half_w = self.width * factor / 2
        half_h = self.height * factor / 2
        return Bounds(c.x - half_w, c.x + half_w, c.y - half_h, c.y + half_h)

    def __str__(self):
        return f"x=[{self.min_x}, {self.max_x}], y=[{self.min_y}, {self.max_y}]"


# ---------------------------------------------------------------------------
# Scalar helpers
# ---------------------------------------------------------------------------

def distance(x1, y1, x2, y2):
    """Euclidean distance between ``(x1, y1)`` and ``(x2, y2)``."""
    return math.hypot(x2 - x1, y2 - y1)


def clamp(value, lo, hi):
    return max(lo, min(hi, value))


def lerp(a, b, t):
    return a + (b - a) * t


def map_to_canvas(value, min_value, max_value, canvas_size):
    """Map a world coordinate in ``[min_value, max_value]`` to ``[0, canvas_size]``."""
    normalized = (value - min_value) / (max_value - min_value)
    return normalized * canvas_size


def map_from_canvas(value, min_value, max_value, canvas_size):
    """Inverse of :func:`map_to_canvas`."""
    normalized = value / canvas_size
    return min_value + normalized * (max_value - min_value)
