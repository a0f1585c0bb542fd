"""
Shape model and factory for shapegen.

Each shape is an immutable dataclass exposing its outline, area and a
containment test.  ``ShapeFactory`` builds randomly parameterised shapes
inside a bounding rectangle.

Usage::

    from shapegen.shapes import ShapeType, random_shape
    shape = random_shape(ShapeType.CIRCLE, -10, 10, -10, 10)
    shape.area(), shape.outline()
"""

import numpy as np

from shapegen.shapes._types import (  # noqa: F401
    ShapeType, ALL_SHAPE_TYPES, OPEN_SHAPE_TYPES, parse_shape_type,
)
from shapegen.shapes.primitives import (  # noqa: F401
    Shape, Line, Circle, Rectangle, Triangle, Parabola, Trapezoid,
    outline, outline_array, area, contains_point,
)
from shapegen.shapes.factory import ShapeFactory


def random_shape(shape_type=None, min_x=-100.0, max_x=100.0, min_y=-100.0,
                 max_y=100.0, rng=None) -> Shape:
    """Build one random shape with a random color and line width.

    When *shape_type* is ``None`` the type is drawn uniformly too.
    """
    factory = ShapeFactory(rng if rng is not None else np.random.default_rng())
    if shape_type is None:
        shape_type = ALL_SHAPE_TYPES[factory.rng.integers(len(ALL_SHAPE_TYPES))]
    return factory.create(shape_type, min_x, max_x, min_y, max_y,
                          factory.random_color(), factory.random_line_width())
