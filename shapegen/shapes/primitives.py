"""
Shape variants: lines, circles, rectangles, triangles, parabolas,
trapezoids.

Every variant is a frozen dataclass tagged with a ``kind``.  The geometric
queries (``outline``, ``area``, ``contains_point``) are module-level
functions that dispatch on that tag; the methods on each shape are thin
wrappers so callers can write ``shape.area()``.
"""

import math
from dataclasses import dataclass
from typing import ClassVar, List, Union

import numpy as np

from shapegen.config import (
    CIRCLE_SEGMENTS, PARABOLA_SEGMENTS, PARABOLA_AREA_SEGMENTS,
    LINE_TOLERANCE, PARABOLA_TOLERANCE,
)
from shapegen.errors import DegenerateGeometryError
from shapegen.geometry import Point
from shapegen.shapes._types import ShapeType, OPEN_SHAPE_TYPES


class _ShapeBase:
    """Shared read-only interface of every shape variant."""

    kind: ClassVar[ShapeType]

    @property
    def type_tag(self) -> str:
        return self.kind.value

    @property
    def closed(self) -> bool:
        return self.kind not in OPEN_SHAPE_TYPES

    def outline(self) -> List[Point]:
        return outline(self)

    def outline_array(self) -> np.ndarray:
        return outline_array(self)

    def area(self) -> float:
        return area(self)

    def contains_point(self, point: Point) -> bool:
        return contains_point(self, point)

    def _check_style(self):
        if not self.line_width > 0:
            raise ValueError(f"line_width must be positive, got {self.line_width}")


# ---------------------------------------------------------------------------
# Line
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Line(_ShapeBase):
    start: Point
    end: Point
    color: str = "#000000"
    line_width: float = 1.0

    kind: ClassVar[ShapeType] = ShapeType.LINE

    def __post_init__(self):
        self._check_style()

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def __str__(self):
        return (f"Line{{start={self.start}, end={self.end}, "
                f"color='{self.color}', length={self.length():.2f}}}")


# ---------------------------------------------------------------------------
# Circle
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Circle(_ShapeBase):
    center: Point
    radius: float
    color: str = "#000000"
    line_width: float = 1.0

    kind: ClassVar[ShapeType] = ShapeType.CIRCLE

    def __post_init__(self):
        self._check_style()
        if not self.radius > 0:
            raise ValueError(f"Circle radius must be positive, got {self.radius}")

    def circumference(self) -> float:
        return 2 * math.pi * self.radius

    def __str__(self):
        return (f"Circle{{center={self.center}, radius={self.radius:.2f}, "
                f"color='{self.color}', area={self.area():.2f}}}")


# ---------------------------------------------------------------------------
# Rectangle (axis-aligned, Y grows from top to bottom)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Rectangle(_ShapeBase):
    top_left: Point
    width: float
    height: float
    color: str = "#000000"
    line_width: float = 1.0

    kind: ClassVar[ShapeType] = ShapeType.RECTANGLE

    def __post_init__(self):
        self._check_style()
        if not (self.width > 0 and self.height > 0):
            raise ValueError(
                f"Rectangle size must be positive, got {self.width} x {self.height}")

    @property
    def top_right(self) -> Point:
        return Point(self.top_left.x + self.width, self.top_left.y)

    @property
    def bottom_right(self) -> Point:
        return Point(self.top_left.x + self.width, self.top_left.y + self.height)

    @property
    def bottom_left(self) -> Point:
        return Point(self.top_left.x, self.top_left.y + self.height)

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    def __str__(self):
        return (f"Rectangle{{topLeft={self.top_left}, width={self.width:.2f}, "
                f"height={self.height:.2f}, color='{self.color}', area={self.area():.2f}}}")


# ---------------------------------------------------------------------------
# Triangle
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Triangle(_ShapeBase):
    p1: Point
    p2: Point
    p3: Point
    color: str = "#000000"
    line_width: float = 1.0

    kind: ClassVar[ShapeType] = ShapeType.TRIANGLE

    def __post_init__(self):
        self._check_style()

    def perimeter(self) -> float:
        return (self.p1.distance_to(self.p2) + self.p2.distance_to(self.p3)
                + self.p3.distance_to(self.p1))

    def __str__(self):
        return (f"Triangle{{points=[{self.p1}, {self.p2}, {self.p3}], "
                f"color='{self.color}', area={self.area():.2f}}}")


# ---------------------------------------------------------------------------
# Parabola  y = a*x^2 + b*x + c  over [x_min, x_max]
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Parabola(_ShapeBase):
    a: float
    b: float
    c: float
    x_min: float
    x_max: float
    color: str = "#000000"
    line_width: float = 1.0

    kind: ClassVar[ShapeType] = ShapeType.PARABOLA

    def __post_init__(self):
        self._check_style()
        if not self.x_min < self.x_max:
            raise ValueError(
                f"Parabola domain is empty: x_min={self.x_min}, x_max={self.x_max}")

    def y_at(self, x):
        """Evaluate the polynomial; works on scalars and numpy arrays."""
        return self.a * x * x + self.b * x + self.c

    def vertex(self) -> Point:
        if self.a == 0:
            raise DegenerateGeometryError("Parabola with a == 0 has no vertex")
        xv = -self.b / (2 * self.a)
        return Point(xv, self.y_at(xv))

    def __str__(self):
        return (f"Parabola{{y={self.a:.2f}x² + {self.b:.2f}x + {self.c:.2f}, "
                f"x∈[{self.x_min:.1f},{self.x_max:.1f}], color='{self.color}'}}")


# ---------------------------------------------------------------------------
# Trapezoid (four free vertices, not necessarily a true trapezoid)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Trapezoid(_ShapeBase):
    top_left: Point
    top_right: Point
    bottom_right: Point
    bottom_left: Point
    color: str = "#000000"
    line_width: float = 1.0

    kind: ClassVar[ShapeType] = ShapeType.TRAPEZOID

    def __post_init__(self):
        self._check_style()

    def perimeter(self) -> float:
        pts = outline(self)
        return sum(pts[i].distance_to(pts[(i + 1) % 4]) for i in range(4))

    def __str__(self):
        return (f"Trapezoid{{points=[{self.top_left}, {self.top_right}, "
                f"{self.bottom_right}, {self.bottom_left}], "
                f"color='{self.color}', area={self.area():.2f}}}")


Shape = Union[Line, Circle, Rectangle, Triangle, Parabola, Trapezoid]


# ---------------------------------------------------------------------------
# Outline
# ---------------------------------------------------------------------------

def outline(shape: Shape) -> List[Point]:
    """Ordered points a renderer connects to draw *shape*."""
    kind = shape.kind
    if kind is ShapeType.LINE:
        return [shape.start, shape.end]
    if kind is ShapeType.CIRCLE:
        return _to_points(_circle_samples(shape))
    if kind is ShapeType.RECTANGLE:
        return [shape.top_left, shape.top_right, shape.bottom_right, shape.bottom_left]
    if kind is ShapeType.TRIANGLE:
        return [shape.p1, shape.p2, shape.p3]
    if kind is ShapeType.PARABOLA:
        return _to_points(_parabola_samples(shape, PARABOLA_SEGMENTS))
    if kind is ShapeType.TRAPEZOID:
        return [shape.top_left, shape.top_right, shape.bottom_right, shape.bottom_left]
    raise TypeError(f"Not a shape: {shape!r}")


def outline_array(shape: Shape) -> np.ndarray:
    """Outline as a float64 array of shape ``(N, 2)``."""
    return np.array([(p.x, p.y) for p in outline(shape)], dtype=np.float64)


def _circle_samples(circle):
    angles = 2 * np.pi * np.arange(CIRCLE_SEGMENTS) / CIRCLE_SEGMENTS
    xs = circle.center.x + circle.radius * np.cos(angles)
    ys = circle.center.y + circle.radius * np.sin(angles)
    return np.stack([xs, ys], axis=1)


def _parabola_samples(parabola, segments):
    xs = np.linspace(parabola.x_min, parabola.x_max, segments + 1)
    return np.stack([xs, parabola.y_at(xs)], axis=1)


def _to_points(arr):
    return [Point(float(x), float(y)) for x, y in arr]


# ---------------------------------------------------------------------------
# Area
# ---------------------------------------------------------------------------

def area(shape: Shape) -> float:
    """Non-negative area enclosed by *shape* (0 for a line)."""
    kind = shape.kind
    if kind is ShapeType.LINE:
        return 0.0
    if kind is ShapeType.CIRCLE:
        return math.pi * shape.radius * shape.radius
    if kind is ShapeType.RECTANGLE:
        return shape.width * shape.height
    if kind is ShapeType.TRIANGLE:
        return triangle_area(shape.p1, shape.p2, shape.p3)
    if kind is ShapeType.PARABOLA:
        return _parabola_area(shape)
    if kind is ShapeType.TRAPEZOID:
        return polygon_area(outline(shape))
    raise TypeError(f"Not a shape: {shape!r}")


def triangle_area(p1, p2, p3):
    return abs(
        p1.x * (p2.y - p3.y)
        + p2.x * (p3.y - p1.y)
        + p3.x * (p1.y - p2.y)
    ) / 2.0


def polygon_area(points):
    """Shoelace formula over the vertices in the given order."""
    arr = np.array([(p.x, p.y) for p in points], dtype=np.float64)
    xs, ys = arr[:, 0], arr[:, 1]
    nxt_x, nxt_y = np.roll(xs, -1), np.roll(ys, -1)
    return float(abs(np.sum(xs * nxt_y - nxt_x * ys)) / 2.0)


def _parabola_area(parabola):
    # Trapezoidal rule; the absolute value makes curves below the axis positive
    samples = _parabola_samples(parabola, PARABOLA_AREA_SEGMENTS)
    ys = samples[:, 1]
    step = (parabola.x_max - parabola.x_min) / PARABOLA_AREA_SEGMENTS
    return float(abs(np.sum((ys[:-1] + ys[1:]) * step / 2)))


# ---------------------------------------------------------------------------
# Containment
# ---------------------------------------------------------------------------

def contains_point(shape: Shape, point: Point) -> bool:
    """Whether *point* lies on (open curves) or inside (closed shapes) *shape*.

    Raises ``DegenerateGeometryError`` for a triangle whose vertices are
    collinear.
    """
    kind = shape.kind
    if kind is ShapeType.LINE:
        return _distance_to_line(shape.start, shape.end, point) <= LINE_TOLERANCE
    if kind is ShapeType.CIRCLE:
        return shape.center.distance_to(point) <= shape.radius
    if kind is ShapeType.RECTANGLE:
        br = shape.bottom_right
        return (shape.top_left.x <= point.x <= br.x
                and shape.top_left.y <= point.y <= br.y)
    if kind is ShapeType.TRIANGLE:
        return triangle_contains(shape.p1, shape.p2, shape.p3, point)
    if kind is ShapeType.PARABOLA:
        return abs(point.y - shape.y_at(point.x)) <= PARABOLA_TOLERANCE
    if kind is ShapeType.TRAPEZOID:
        return _quad_contains(shape, point)
    raise TypeError(f"Not a shape: {shape!r}")


def _distance_to_line(start, end, point):
    """Perpendicular distance from *point* to the infinite line start-end.

    A zero-length line has no direction and reports distance 0.
    """
    dx, dy = end.x - start.x, end.y - start.y
    length = math.hypot(dx, dy)
    if length == 0:
        return 0.0
    cross = dy * point.x - dx * point.y + end.x * start.y - end.y * start.x
    return abs(cross) / length


def triangle_contains(p1, p2, p3, point):
    """Barycentric point-in-triangle test, boundary inclusive."""
    denom = (p2.y - p3.y) * (p1.x - p3.x) + (p3.x - p2.x) * (p1.y - p3.y)
    if denom == 0:
        raise DegenerateGeometryError(
            f"Triangle {p1}, {p2}, {p3} is degenerate (collinear vertices)")
    a = ((p2.y - p3.y) * (point.x - p3.x) + (p3.x - p2.x) * (point.y - p3.y)) / denom
    b = ((p3.y - p1.y) * (point.x - p3.x) + (p1.x - p3.x) * (point.y - p3.y)) / denom
    c = 1 - a - b
    return 0 <= a <= 1 and 0 <= b <= 1 and 0 <= c <= 1


def _quad_contains(trap, point):
    # Split along the top_left -> bottom_right diagonal
    halves = (
        (trap.top_left, trap.top_right, trap.bottom_right),
        (trap.top_left, trap.bottom_right, trap.bottom_left),
    )
    for v1, v2, v3 in halves:
        try:
            if triangle_contains(v1, v2, v3, point):
                return True
        except DegenerateGeometryError:
            # A zero-area half encloses nothing
            continue
    return False
