"""Exception hierarchy for shapegen."""


class ShapegenError(Exception):
    """Base class for all shapegen errors."""


class InvalidParameterError(ShapegenError, ValueError):
    """Generation parameters failed validation; nothing was generated."""


class EmptySelectionError(ShapegenError, ValueError):
    """No shape types were selected for generation."""


class DegenerateGeometryError(ShapegenError, ArithmeticError):
    """A geometric query is undefined for this shape (e.g. collinear triangle)."""
