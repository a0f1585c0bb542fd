"""shapegen - procedural generation of 2D geometric shapes."""

from shapegen.config import GenerationParameters
from shapegen.errors import (
    ShapegenError, InvalidParameterError, EmptySelectionError, DegenerateGeometryError,
)
from shapegen.geometry import Point, Bounds
from shapegen.generator import DrawingGenerator, generate_shapes, effective_bounds
from shapegen.shapes import (
    ShapeType, ShapeFactory, Line, Circle, Rectangle, Triangle, Parabola, Trapezoid,
)
from shapegen.validator import validate
