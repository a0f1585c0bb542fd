"""
Headless raster preview backed by OpenCV.

Drawing functions operate on uint8 RGB numpy images of shape ``(H, W, 3)``.
World coordinates are mapped onto the image through a ``Viewport`` whose Y
axis points up, so larger Y values are drawn higher on the image.
"""

import logging
from dataclasses import dataclass

import cv2
import numpy as np

from shapegen.config import CANVAS_WIDTH, CANVAS_HEIGHT
from shapegen.geometry import Bounds, Point, map_to_canvas, map_from_canvas

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRID_GREY = (211, 211, 211)


# ---------------------------------------------------------------------------
# World <-> pixel mapping
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Viewport:
    bounds: Bounds
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT

    def to_pixel(self, point):
        """Map a world ``Point`` (or ``(x, y)`` pair) to float pixel coordinates."""
        x, y = _xy(point)
        b = self.bounds
        px = map_to_canvas(x, b.min_x, b.max_x, self.width)
        py = self.height - map_to_canvas(y, b.min_y, b.max_y, self.height)
        return px, py

    def from_pixel(self, px, py) -> Point:
        b = self.bounds
        x = map_from_canvas(px, b.min_x, b.max_x, self.width)
        y = map_from_canvas(self.height - py, b.min_y, b.max_y, self.height)
        return Point(x, y)


def _xy(point):
    if isinstance(point, Point):
        return point.x, point.y
    return float(point[0]), float(point[1])


def hex_to_rgb(color):
    """``"#RRGGBB"`` -> ``(r, g, b)`` ints."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a #RRGGBB color, got {color!r}")
    return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))


# ---------------------------------------------------------------------------
# Core primitives (pixel space)
# ---------------------------------------------------------------------------

def rasterize_line(img, p1, p2, color=BLACK, thickness=1):
    """Draw an anti-aliased line segment between two pixel positions."""
    cv2.line(
        img,
        (int(round(p1[0])), int(round(p1[1]))),
        (int(round(p2[0])), int(round(p2[1]))),
        color,
        thickness,
        lineType=cv2.LINE_AA,
    )
    return img


def rasterize_polyline(img, points, color=BLACK, thickness=1, closed=False):
    """Draw connected line segments through a list of pixel positions."""
    n = len(points)
    if n == 0:
        return img
    if n == 1:
        return rasterize_line(img, points[0], points[0], color, thickness)
    segs = n if closed else n - 1
    for i in range(segs):
        rasterize_line(img, points[i], points[(i + 1) % n], color, thickness)
    return img


# ---------------------------------------------------------------------------
# Grid & axes (world space)
# ---------------------------------------------------------------------------

def draw_grid(img, viewport, grid_size, color=GRID_GREY, thickness=1):
    """Draw ``grid_size + 1`` evenly spaced vertical and horizontal lines."""
    b = viewport.bounds
    x_step = b.width / grid_size
    y_step = b.height / grid_size
    for i in range(grid_size + 1):
        px, _ = viewport.to_pixel((b.min_x + i * x_step, b.min_y))
        rasterize_line(img, (px, 0), (px, viewport.height), color, thickness)
    for i in range(grid_size + 1):
        _, py = viewport.to_pixel((b.min_x, b.min_y + i * y_step))
        rasterize_line(img, (0, py), (viewport.width, py), color, thickness)
    return img


def draw_axes(img, viewport, color=BLACK, thickness=2):
    """Draw the x=0 and y=0 lines when they fall inside the image."""
    zx, zy = viewport.to_pixel((0.0, 0.0))
    if 0 <= zx <= viewport.width:
        rasterize_line(img, (zx, 0), (zx, viewport.height), color, thickness)
    if 0 <= zy <= viewport.height:
        rasterize_line(img, (0, zy), (viewport.width, zy), color, thickness)
    return img


# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------

def rasterize_shape(img, shape, viewport):
    """Stroke *shape*'s outline in its own color and line width."""
    pts = [viewport.to_pixel(p) for p in shape.outline()]
    thickness = max(1, int(round(shape.line_width)))
    return rasterize_polyline(img, pts, hex_to_rgb(shape.color), thickness,
                              closed=shape.closed)


def render_shapes(shapes, bounds, width=CANVAS_WIDTH, height=CANVAS_HEIGHT,
                  grid_size=None):
    """Render a shape sequence onto a fresh white RGB image.

    Grid and axes are drawn on top of the shapes.  A shape that cannot be
    drawn is logged and skipped.
    """
    img = np.full((height, width, 3), WHITE, dtype=np.uint8)
    viewport = Viewport(bounds, width, height)

    rendered = 0
    for shape in shapes:
        try:
            rasterize_shape(img, shape, viewport)
            rendered += 1
        except (ValueError, OverflowError, cv2.error) as e:
            logger.error("Error rendering shape %s: %s", shape.type_tag, e)
    logger.debug("Rendered %d shapes out of %d", rendered, len(shapes))

    if grid_size:
        draw_grid(img, viewport, grid_size)
        draw_axes(img, viewport)
    return img
