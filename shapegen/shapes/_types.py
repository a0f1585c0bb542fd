"""Shape type registry shared across the shapes package (avoids circular imports)."""

from enum import Enum


class ShapeType(Enum):
    """The six shape kinds.  Values are the public type tags."""
    LINE = "Line"
    CIRCLE = "Circle"
    RECTANGLE = "Rectangle"
    TRIANGLE = "Triangle"
    PARABOLA = "Parabola"
    TRAPEZOID = "Trapezoid"


ALL_SHAPE_TYPES = list(ShapeType)

# Open curves are stroked without joining the last point back to the first
OPEN_SHAPE_TYPES = frozenset({ShapeType.LINE, ShapeType.PARABOLA})


def parse_shape_type(name) -> ShapeType:
    """Resolve ``"LINE"``, ``"Line"``, ``"line"`` or ``ShapeType.LINE``.

    Raises ``ValueError`` for anything else.
    """
    if isinstance(name, ShapeType):
        return name
    if not isinstance(name, str):
        raise ValueError(f"Unknown shape type: {name!r}")
    key = name.strip().upper()
    if key in ShapeType.__members__:
        return ShapeType[key]
    raise ValueError(f"Unknown shape type: {name!r}")
