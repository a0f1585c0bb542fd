"""
Randomised shape factory.

``ShapeFactory.create`` produces one shape of a requested type inside a
bounding rectangle, enforcing the per-type size and placement rules.  All
randomness comes from the ``numpy.random.Generator`` handed to the
constructor, so a seeded generator reproduces the same shapes.
"""

import logging

import numpy as np

from shapegen.config import (
    MIN_CIRCLE_RADIUS, MIN_RECT_SIZE, PARABOLA_A_RANGE, PARABOLA_B_RANGE,
    PARABOLA_INSET, LINE_WIDTH_RANGE,
    TRAPEZOID_TOP_Y, TRAPEZOID_TOP_X1, TRAPEZOID_TOP_SPAN, TRAPEZOID_HEIGHT,
    TRAPEZOID_BOTTOM_X1, TRAPEZOID_BOTTOM_SPAN,
)
from shapegen.geometry import Point
from shapegen.shapes._types import ShapeType, parse_shape_type
from shapegen.shapes.primitives import (
    Line, Circle, Rectangle, Triangle, Parabola, Trapezoid,
)

logger = logging.getLogger(__name__)


class ShapeFactory:
    """Builds randomly parameterised shapes from an injected RNG."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self._builders = {
            ShapeType.LINE: self._line,
            ShapeType.CIRCLE: self._circle,
            ShapeType.RECTANGLE: self._rectangle,
            ShapeType.TRIANGLE: self._triangle,
            ShapeType.PARABOLA: self._parabola,
            ShapeType.TRAPEZOID: self._trapezoid,
        }

    # ------------------------------------------------------------------
    # Main entry
    # ------------------------------------------------------------------

    def create(self, shape_type, min_x, max_x, min_y, max_y, color, line_width):
        """Create one shape of *shape_type* inside ``[min_x, max_x] x [min_y, max_y]``.

        *shape_type* may be a ``ShapeType`` or its name / tag.  Anything
        unrecognised yields a ``Line`` rather than an error.
        """
        try:
            kind = parse_shape_type(shape_type)
        except ValueError:
            logger.error("Unknown shape type: %r. Using LINE as default", shape_type)
            kind = ShapeType.LINE
        return self._builders[kind](min_x, max_x, min_y, max_y, color, line_width)

    # ------------------------------------------------------------------
    # Style
    # ------------------------------------------------------------------

    def random_color(self) -> str:
        r, g, b = self.rng.integers(0, 256, size=3)
        return f"#{int(r):02X}{int(g):02X}{int(b):02X}"

    def random_line_width(self) -> float:
        return self._uniform(*LINE_WIDTH_RANGE)

    # ------------------------------------------------------------------
    # Per-type builders
    # ------------------------------------------------------------------

    def _line(self, min_x, max_x, min_y, max_y, color, line_width):
        start = self._rand_pt(min_x, max_x, min_y, max_y)
        end = self._rand_pt(min_x, max_x, min_y, max_y)
        return Line(start, end, color, line_width)

    def _circle(self, min_x, max_x, min_y, max_y, color, line_width):
        center = self._rand_pt(min_x, max_x, min_y, max_y)
        max_r = min(max_x - center.x, center.x - min_x,
                    max_y - center.y, center.y - min_y)
        # Up to half the clearance; near an edge the floor keeps it visible
        radius = self._uniform(MIN_CIRCLE_RADIUS, max(max_r / 2, MIN_CIRCLE_RADIUS))
        radius = max(radius, MIN_CIRCLE_RADIUS)
        return Circle(center, radius, color, line_width)

    def _rectangle(self, min_x, max_x, min_y, max_y, color, line_width):
        m = MIN_RECT_SIZE
        top_left = self._rand_pt(min_x, max_x, min_y, max_y)
        room_w, room_h = max_x - top_left.x, max_y - top_left.y
        if room_w < m or room_h < m:
            top_left = self._rand_pt(min_x, max_x - m, min_y, max_y - m)
            room_w, room_h = max_x - top_left.x, max_y - top_left.y
        width = self._uniform(m, room_w)
        height = self._uniform(m, room_h)
        return Rectangle(top_left, width, height, color, line_width)

    def _triangle(self, min_x, max_x, min_y, max_y, color, line_width):
        # Collinear draws are possible and accepted
        p1 = self._rand_pt(min_x, max_x, min_y, max_y)
        p2 = self._rand_pt(min_x, max_x, min_y, max_y)
        p3 = self._rand_pt(min_x, max_x, min_y, max_y)
        return Triangle(p1, p2, p3, color, line_width)

    def _parabola(self, min_x, max_x, min_y, max_y, color, line_width):
        a = self._uniform(*PARABOLA_A_RANGE)
        b = self._uniform(*PARABOLA_B_RANGE)
        c = self._uniform(min_y, max_y)
        inset = (max_x - min_x) * PARABOLA_INSET
        return Parabola(a, b, c, min_x + inset, max_x - inset, color, line_width)

    def _trapezoid(self, min_x, max_x, min_y, max_y, color, line_width):
        w = max_x - min_x
        h = max_y - min_y
        top_y = min_y + self._proportion(h, TRAPEZOID_TOP_Y)
        top_x1 = min_x + self._proportion(w, TRAPEZOID_TOP_X1)
        top_x2 = top_x1 + self._proportion(w, TRAPEZOID_TOP_SPAN)
        bottom_y = top_y + self._proportion(h, TRAPEZOID_HEIGHT)
        bottom_x1 = min_x + self._proportion(w, TRAPEZOID_BOTTOM_X1)
        bottom_x2 = bottom_x1 + self._proportion(w, TRAPEZOID_BOTTOM_SPAN)
        return Trapezoid(
            Point(top_x1, top_y), Point(top_x2, top_y),
            Point(bottom_x2, bottom_y), Point(bottom_x1, bottom_y),
            color, line_width,
        )

    # ------------------------------------------------------------------
    # Random helpers
    # ------------------------------------------------------------------

    def _uniform(self, lo, hi):
        # Well defined for hi <= lo, unlike Generator.uniform
        return float(lo + self.rng.random() * (hi - lo))

    def _rand_pt(self, min_x, max_x, min_y, max_y):
        return Point(self._uniform(min_x, max_x), self._uniform(min_y, max_y))

    def _proportion(self, span, band):
        offset, jitter = band
        return span * offset + self._uniform(0.0, span * jitter)
