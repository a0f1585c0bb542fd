"""
Generation parameter validation.

``validate`` checks a ``GenerationParameters`` instance before any shape is
built and raises ``InvalidParameterError`` on the first violated
constraint, in this order: shape count, X range, Y range, density, grid size.
"""

import logging
import math
import numbers

from shapegen.config import (
    MIN_SHAPE_COUNT, MAX_SHAPE_COUNT, MIN_GRID_SIZE, MAX_GRID_SIZE,
    MIN_AXIS_RANGE, MIN_DENSITY, MAX_DENSITY,
)
from shapegen.errors import InvalidParameterError

logger = logging.getLogger(__name__)


def validate(parameters):
    if parameters is None:
        raise InvalidParameterError("Parameters cannot be None")

    _validate_shape_count(parameters.shape_count)
    _validate_axis(parameters.min_x, parameters.max_x, "X")
    _validate_axis(parameters.min_y, parameters.max_y, "Y")
    _validate_density(parameters.density)
    _validate_grid_size(parameters.grid_size)

    logger.debug("Parameters successfully validated: %s", parameters)


def _is_integer(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _validate_shape_count(shape_count):
    if not _is_integer(shape_count):
        raise InvalidParameterError(
            f"Number of shapes must be an integer, got {shape_count!r}")
    if shape_count < MIN_SHAPE_COUNT:
        raise InvalidParameterError("Number of shapes must be positive")
    if shape_count > MAX_SHAPE_COUNT:
        raise InvalidParameterError(f"Number of shapes cannot exceed {MAX_SHAPE_COUNT}")


def _validate_axis(lo, hi, axis):
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise InvalidParameterError(f"{axis} axis bounds must be finite numbers")
    if lo >= hi:
        raise InvalidParameterError(
            f"Minimum {axis} value ({lo:.2f}) must be less than maximum ({hi:.2f})")
    if hi - lo < MIN_AXIS_RANGE:
        raise InvalidParameterError(
            f"{axis} axis range is too small (minimum range: {MIN_AXIS_RANGE})")


def _validate_density(density):
    if not MIN_DENSITY <= density <= MAX_DENSITY:
        raise InvalidParameterError(
            f"Density must be in range from {MIN_DENSITY} to {MAX_DENSITY}")


def _validate_grid_size(grid_size):
    if not _is_integer(grid_size):
        raise InvalidParameterError(f"Grid size must be an integer, got {grid_size!r}")
    if grid_size < MIN_GRID_SIZE:
        raise InvalidParameterError("Grid size must be positive")
    if grid_size > MAX_GRID_SIZE:
        raise InvalidParameterError(f"Grid size cannot exceed {MAX_GRID_SIZE}")
