"""
Command-line drawing generator.

Generate a random drawing, print one line per shape and optionally save a
PNG preview with a coordinate grid.

Usage (CLI):
    python -m shapegen.demo --count 20 --types CIRCLE TRIANGLE --seed 7
    python -m shapegen.demo --density 0,5 --save-path outputs/drawing.png

Or from a notebook:
    from shapegen.demo import run
    shapes = run(GenerationParameters(shape_count=5), ["LINE"], seed=0)
"""

import argparse
import os
import sys

from PIL import Image

from shapegen.config import GenerationParameters, CANVAS_WIDTH, CANVAS_HEIGHT
from shapegen.errors import InvalidParameterError, EmptySelectionError
from shapegen.generator import generate_shapes
from shapegen.geometry import Bounds
from shapegen.log import setup_default_logging
from shapegen.raster import render_shapes
from shapegen.shapes import ShapeType


def _number(text):
    """Parse a float that may use a comma as decimal separator."""
    return float(text.strip().replace(",", "."))


def _integer(text):
    return int(text.strip())


def run(parameters, selected_types=None, seed=None, save_path=None,
        width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
    """Generate shapes, print a summary and optionally write a PNG preview."""
    shapes = generate_shapes(parameters, selected_types, seed=seed)

    for i, shape in enumerate(shapes):
        print(f"{i + 1:4d}. {shape}  [area={shape.area():.2f}, "
              f"points={len(shape.outline())}, width={shape.line_width:.1f}]")
    print(f"Generated {len(shapes)} of {parameters.shape_count} shapes")

    if save_path:
        bounds = Bounds(parameters.min_x, parameters.max_x,
                        parameters.min_y, parameters.max_y)
        img = render_shapes(shapes, bounds, width, height,
                            grid_size=parameters.grid_size)
        out_dir = os.path.dirname(save_path)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        Image.fromarray(img).save(save_path)
        print(f"Preview saved to {save_path}")
    return shapes


def main(argv=None):
    defaults = GenerationParameters()
    p = argparse.ArgumentParser(description="Random 2D drawing generator")
    p.add_argument("--count", type=_integer, default=defaults.shape_count,
                   help="Number of shapes to generate (1-1000)")
    p.add_argument("--min-x", type=_number, default=defaults.min_x)
    p.add_argument("--max-x", type=_number, default=defaults.max_x)
    p.add_argument("--min-y", type=_number, default=defaults.min_y)
    p.add_argument("--max-y", type=_number, default=defaults.max_y)
    p.add_argument("--density", type=_number, default=defaults.density,
                   help="Fraction of the region used for placement (0-1)")
    p.add_argument("--grid-size", type=_integer, default=defaults.grid_size,
                   help="Grid cells per axis in the preview (1-100)")
    p.add_argument("--types", nargs="+", default=None,
                   metavar="TYPE",
                   help="Shape types to include: "
                        + ", ".join(t.name for t in ShapeType) + " (default: all)")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--save-path", default=None, help="Write a PNG preview here")
    p.add_argument("--width", type=int, default=CANVAS_WIDTH)
    p.add_argument("--height", type=int, default=CANVAS_HEIGHT)
    p.add_argument("--log-level", default="WARNING")
    args = p.parse_args(argv)

    setup_default_logging(args.log_level)

    parameters = GenerationParameters(
        shape_count=args.count,
        min_x=args.min_x, max_x=args.max_x,
        min_y=args.min_y, max_y=args.max_y,
        density=args.density,
        grid_size=args.grid_size,
    )
    try:
        run(parameters, args.types, seed=args.seed, save_path=args.save_path,
            width=args.width, height=args.height)
    except (InvalidParameterError, EmptySelectionError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
