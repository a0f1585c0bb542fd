"""
Global configuration: generation limits, geometric tolerances, sampling
resolutions and the parameter object consumed by the generator.

The tolerances are absolute (world units) and independent of the bounding
region's scale.  A drawing spanning [-1000, 1000] uses the same 0.1 line
tolerance as one spanning [-1, 1].
"""

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Parameter limits
# ---------------------------------------------------------------------------

MIN_SHAPE_COUNT = 1
MAX_SHAPE_COUNT = 1000
MIN_GRID_SIZE = 1
MAX_GRID_SIZE = 100
MIN_AXIS_RANGE = 1.0
MIN_DENSITY = 0.0
MAX_DENSITY = 1.0

# ---------------------------------------------------------------------------
# Containment tolerances
# ---------------------------------------------------------------------------

LINE_TOLERANCE = 0.1        # max perpendicular distance to the infinite line
PARABOLA_TOLERANCE = 0.5    # max vertical distance to the curve

# ---------------------------------------------------------------------------
# Sampling resolutions
# ---------------------------------------------------------------------------

CIRCLE_SEGMENTS = 36            # outline points around a circle
PARABOLA_SEGMENTS = 100         # outline intervals (101 points)
PARABOLA_AREA_SEGMENTS = 1000   # trapezoidal-rule subintervals

# ---------------------------------------------------------------------------
# Factory constants
# ---------------------------------------------------------------------------

MIN_CIRCLE_RADIUS = 2.0
MIN_RECT_SIZE = 5.0
PARABOLA_A_RANGE = (-1.0, 1.0)
PARABOLA_B_RANGE = (-2.0, 2.0)
PARABOLA_INSET = 0.1            # fraction of the X range trimmed per side
LINE_WIDTH_RANGE = (1.0, 4.0)

# (offset, jitter) proportions of the region's width / height
TRAPEZOID_TOP_Y = (0.2, 0.3)
TRAPEZOID_TOP_X1 = (0.1, 0.3)
TRAPEZOID_TOP_SPAN = (0.2, 0.3)
TRAPEZOID_HEIGHT = (0.3, 0.3)
TRAPEZOID_BOTTOM_X1 = (0.2, 0.2)
TRAPEZOID_BOTTOM_SPAN = (0.3, 0.2)

# ---------------------------------------------------------------------------
# Preview canvas
# ---------------------------------------------------------------------------

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600


# ---------------------------------------------------------------------------
# Generation parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationParameters:
    shape_count: int = 10
    min_x: float = -100.0
    max_x: float = 100.0
    min_y: float = -100.0
    max_y: float = 100.0
    density: float = 1.0
    grid_size: int = 10

    def __str__(self):
        return (
            f"GenerationParameters{{shapeCount={self.shape_count}, "
            f"x=[{self.min_x:.1f}, {self.max_x:.1f}], "
            f"y=[{self.min_y:.1f}, {self.max_y:.1f}], "
            f"density={self.density:.2f}, gridSize={self.grid_size}}}"
        )
