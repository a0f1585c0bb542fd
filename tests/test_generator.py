"""Tests for the drawing generator."""

import dataclasses
import logging

import numpy as np
import pytest

from shapegen.config import GenerationParameters
from shapegen.errors import EmptySelectionError, InvalidParameterError
from shapegen.generator import DrawingGenerator, generate_shapes, effective_bounds
from shapegen.geometry import Bounds
from shapegen.shapes import ShapeFactory, ShapeType


@pytest.fixture
def generator():
    return DrawingGenerator(np.random.default_rng(42))


@pytest.fixture
def params():
    return GenerationParameters(10, -100, 100, -100, 100, 0.5, 10)


class _FlakyFactory(ShapeFactory):
    """Fails on every other shape."""

    def __init__(self, rng):
        super().__init__(rng)
        self.calls = 0

    def create(self, *args, **kwargs):
        self.calls += 1
        if self.calls % 2 == 0:
            raise RuntimeError("boom")
        return super().create(*args, **kwargs)


class TestGenerate:
    def test_lines_only(self, generator):
        p = GenerationParameters(5, -10, 10, -10, 10, 1.0, 5)
        shapes = generator.generate(p, ["LINE"])
        assert 0 <= len(shapes) <= 5
        for s in shapes:
            assert s.type_tag == "Line"
            assert len(s.outline()) == 2

    def test_all_types_by_default(self, generator, params):
        shapes = generator.generate(params)
        assert len(shapes) <= 10
        for s in shapes:
            assert s.type_tag in {t.value for t in ShapeType}
            assert s.line_width >= 1.0
            assert s.color.startswith("#")

    def test_only_selected_types(self, generator):
        p = GenerationParameters(200, -50, 50, -50, 50, 0.7, 5)
        shapes = generator.generate(p, ["CIRCLE", "Triangle", ShapeType.TRAPEZOID])
        tags = {s.type_tag for s in shapes}
        assert tags <= {"Circle", "Triangle", "Trapezoid"}
        assert len(tags) == 3

    def test_single_name_selection(self, generator, params):
        shapes = generator.generate(params, "TRIANGLE")
        assert {s.type_tag for s in shapes} == {"Triangle"}

    def test_accepts_set_selection(self, generator, params):
        shapes = generator.generate(params, {"RECTANGLE", "CIRCLE"})
        assert {s.type_tag for s in shapes} <= {"Rectangle", "Circle"}

    @pytest.mark.parametrize("count", [1, 5, 1000])
    def test_count_bounds(self, generator, count):
        p = GenerationParameters(count, -50, 50, -50, 50, 0.7, 5)
        shapes = generator.generate(p)
        assert 0 <= len(shapes) <= count

    def test_density_shrinks_placement(self, generator):
        p = GenerationParameters(50, -100, 100, -100, 100, 0.5, 10)
        for line in generator.generate(p, ["LINE"]):
            for pt in line.outline():
                assert -50 <= pt.x <= 50
                assert -50 <= pt.y <= 50

    def test_unknown_type_falls_back_to_line(self, generator, params, caplog):
        with caplog.at_level(logging.ERROR, logger="shapegen.shapes.factory"):
            shapes = generator.generate(params, ["HEXAGON"])
        assert len(shapes) == 10
        assert all(s.type_tag == "Line" for s in shapes)
        assert "Unknown shape type" in caplog.text


class TestFailures:
    def test_invalid_parameters(self, generator):
        bad = GenerationParameters(-5, 100, -100, 100, -100, 1.5, -10)
        with pytest.raises(InvalidParameterError):
            generator.generate(bad)

    def test_empty_selection(self, generator, params):
        with pytest.raises(EmptySelectionError):
            generator.generate(params, [])

    @pytest.mark.parametrize("changes", [{"shape_count": 5.5}, {"grid_size": 2.5}])
    def test_non_integer_counts_rejected(self, params, changes):
        bad = dataclasses.replace(params, **changes)
        with pytest.raises(InvalidParameterError, match="must be an integer"):
            generate_shapes(bad, ["LINE"], seed=0)

    def test_validation_runs_before_selection_check(self, generator):
        bad = GenerationParameters(shape_count=0)
        with pytest.raises(InvalidParameterError):
            generator.generate(bad, [])

    def test_per_shape_failures_are_skipped(self, params, caplog):
        rng = np.random.default_rng(0)
        gen = DrawingGenerator(rng, _FlakyFactory(rng))
        with caplog.at_level(logging.ERROR, logger="shapegen.generator"):
            shapes = gen.generate(params, ["CIRCLE"])
        assert len(shapes) == 5
        assert "Error generating shape #2/10" in caplog.text

    def test_zero_density_parabolas_fail_quietly(self, generator):
        # A collapsed region leaves parabolas with an empty domain
        p = GenerationParameters(10, -10, 10, -10, 10, 0.0, 5)
        assert generator.generate(p, ["PARABOLA"]) == []

    def test_zero_density_circles_at_center(self, generator):
        p = GenerationParameters(10, -10, 30, -10, 10, 0.0, 5)
        shapes = generator.generate(p, ["CIRCLE"])
        assert len(shapes) == 10
        for c in shapes:
            assert (c.center.x, c.center.y) == (10.0, 0.0)
            assert c.radius == 2.0


class TestHelpers:
    def test_effective_bounds(self, params):
        assert effective_bounds(params) == Bounds(-50, 50, -50, 50)

    def test_effective_bounds_full(self):
        p = GenerationParameters(1, 0, 10, 5, 25, 1.0, 1)
        assert effective_bounds(p) == Bounds(0, 10, 5, 25)

    def test_seeded_reproducibility(self, params):
        a = generate_shapes(params, seed=7)
        b = generate_shapes(params, seed=7)
        assert a == b

    def test_different_seeds_differ(self, params):
        assert generate_shapes(params, seed=1) != generate_shapes(params, seed=2)

    def test_logs_summary(self, generator, params, caplog):
        with caplog.at_level(logging.INFO, logger="shapegen.generator"):
            generator.generate(params, ["LINE"])
        assert "Successfully created 10 shapes out of 10 requested" in caplog.text
