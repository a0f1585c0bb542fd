"""
Drawing generation: turn ``GenerationParameters`` plus a selection of shape
types into an ordered list of random shapes.

Failures are split in two tiers.  Invalid parameters and an empty selection
abort the request before anything is built.  A failure while building one
shape is logged and that shape is skipped, so the result may hold fewer
shapes than requested.

Usage::

    from shapegen.generator import generate_shapes
    from shapegen.config import GenerationParameters
    shapes = generate_shapes(GenerationParameters(shape_count=20), ["CIRCLE"], seed=0)
"""

import logging

import numpy as np

from shapegen.errors import EmptySelectionError
from shapegen.geometry import Bounds
from shapegen.shapes import ALL_SHAPE_TYPES, ShapeType, ShapeFactory
from shapegen.validator import validate

logger = logging.getLogger(__name__)

# Per-shape debug lines are limited to the first few shapes of a batch
_DEBUG_LOG_LIMIT = 10


def effective_bounds(parameters) -> Bounds:
    """The placement region: the full bounds shrunk toward their center by density."""
    full = Bounds(parameters.min_x, parameters.max_x, parameters.min_y, parameters.max_y)
    return full.shrink(parameters.density)


class DrawingGenerator:
    """Generates batches of random shapes.

    Owns its random source; give each concurrently used generator its own
    ``numpy.random.Generator``.
    """

    def __init__(self, rng=None, factory=None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.factory = factory if factory is not None else ShapeFactory(self.rng)

    # ------------------------------------------------------------------
    # Main entry
    # ------------------------------------------------------------------

    def generate(self, parameters, selected_types=None):
        """Generate up to ``parameters.shape_count`` shapes.

        Parameters
        ----------
        parameters : GenerationParameters
        selected_types : iterable of ShapeType or str, optional
            Types to draw from uniformly.  ``None`` selects every type.

        Returns
        -------
        list of shapes in generation order.

        Raises
        ------
        InvalidParameterError
            If *parameters* fails validation.
        EmptySelectionError
            If *selected_types* is empty.
        """
        logger.info("Starting drawing generation with parameters: %s", parameters)
        validate(parameters)

        selected = self._selection(selected_types)
        logger.info("Selected shape types: %s", selected)

        area = effective_bounds(parameters)
        logger.info("Effective generation area: %s", area)

        count = parameters.shape_count
        shapes = []
        for i in range(count):
            try:
                shape = self._generate_one(selected, area)
            except Exception as e:
                logger.error("Error generating shape #%d/%d: %s", i + 1, count, e)
                continue
            shapes.append(shape)
            if i < _DEBUG_LOG_LIMIT:
                logger.debug("Generated shape #%d/%d: %s", i + 1, count, shape.type_tag)

        logger.info("Generation completed. Successfully created %d shapes out of %d requested",
                    len(shapes), count)
        return shapes

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _selection(self, selected_types):
        if selected_types is None:
            return list(ALL_SHAPE_TYPES)
        if isinstance(selected_types, (str, ShapeType)):
            selected_types = [selected_types]
        selected = list(selected_types)
        if not selected:
            raise EmptySelectionError("No shape types selected for generation")
        if isinstance(selected_types, (set, frozenset)):
            # Fixed order so a seeded RNG picks the same types every run
            selected.sort(key=str)
        return selected

    def _generate_one(self, selected, area):
        shape_type = selected[self.rng.integers(len(selected))]
        color = self.factory.random_color()
        line_width = self.factory.random_line_width()
        return self.factory.create(shape_type, area.min_x, area.max_x,
                                   area.min_y, area.max_y, color, line_width)


def generate_shapes(parameters, selected_types=None, seed=None):
    """One-shot helper: build a seeded ``DrawingGenerator`` and run it."""
    gen = DrawingGenerator(np.random.default_rng(seed))
    return gen.generate(parameters, selected_types)
