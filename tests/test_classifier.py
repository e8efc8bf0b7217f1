# tests/test_classifier.py
"""
CLASSIFIER TESTS: Implicit Volumes
==================================

Each archetype's predicate is checked at a few hand-computed points:
one clearly inside each part, one clearly in empty space. Boundaries
are inclusive.
"""

import numpy as np
import pytest

from lattice_craft.generative.classifier import CLASSIFIERS, classify_grid, is_inside
from lattice_craft.model import Archetype, FurnitureParams


@pytest.fixture
def unit_params():
    return FurnitureParams(width=1.0, height=1.0, depth=1.0, seat_height=0.5)


class TestTable:

    def test_top_slab(self, unit_params):
        assert is_inside('Table', (0.0, 0.95, 0.0), unit_params)

    def test_under_top_is_empty(self, unit_params):
        assert not is_inside('Table', (0.0, 0.5, 0.0), unit_params)

    def test_corner_leg(self, unit_params):
        # leg thickness 0.15, centered 0.075 in from each corner
        assert is_inside(Archetype.TABLE, (0.45, 0.2, 0.45), unit_params)
        assert is_inside(Archetype.TABLE, (-0.45, 0.2, -0.45), unit_params)

    def test_inclusive_top_boundary(self, unit_params):
        assert is_inside('Table', (0.5, 0.95, 0.5), unit_params)
        assert is_inside('Table', (-0.5, 0.95, -0.5), unit_params)

    def test_outside_footprint(self, unit_params):
        assert not is_inside('Table', (0.6, 0.95, 0.0), unit_params)


class TestChair:

    def test_seat(self, unit_params):
        assert is_inside('Chair', (0.0, 0.52, 0.0), unit_params)

    def test_backrest_at_rear(self, unit_params):
        # back thickness 0.15 at z in [-0.5, -0.35]
        assert is_inside('Chair', (0.0, 0.9, -0.45), unit_params)

    def test_no_backrest_at_front(self, unit_params):
        assert not is_inside('Chair', (0.0, 0.9, 0.45), unit_params)

    def test_leg_below_seat(self, unit_params):
        assert is_inside('Chair', (0.45, 0.1, 0.45), unit_params)

    def test_under_seat_is_empty(self, unit_params):
        assert not is_inside('Chair', (0.0, 0.2, 0.0), unit_params)


class TestStool:

    def test_axis(self, unit_params):
        assert is_inside('Stool', (0.0, 0.5, 0.0), unit_params)

    def test_wider_at_floor(self, unit_params):
        # floor radius 1/1.5 ~ 0.667, top radius 0.5
        assert is_inside('Stool', (0.6, 0.0, 0.0), unit_params)
        assert not is_inside('Stool', (0.6, 1.0, 0.0), unit_params)

    def test_above_height(self, unit_params):
        assert not is_inside('Stool', (0.0, 1.01, 0.0), unit_params)

    def test_below_floor(self, unit_params):
        assert not is_inside('Stool', (0.0, -0.01, 0.0), unit_params)


class TestBench:

    def test_side_leg_spans_depth(self, unit_params):
        assert is_inside('Bench', (-0.47, 0.3, 0.49), unit_params)

    def test_between_legs_is_empty(self, unit_params):
        assert not is_inside('Bench', (0.0, 0.3, 0.0), unit_params)

    def test_top(self, unit_params):
        assert is_inside('Bench', (0.0, 0.9, 0.0), unit_params)


class TestVase:

    def test_bulge_at_mid_height(self, unit_params):
        # r(0.5) = 0.4 + 0.3 + 0.05 = 0.75
        assert is_inside('Vase', (0.74, 0.5, 0.0), unit_params)
        assert not is_inside('Vase', (0.76, 0.5, 0.0), unit_params)

    def test_base_radius(self, unit_params):
        assert is_inside('Vase', (0.39, 0.0, 0.0), unit_params)
        assert not is_inside('Vase', (0.41, 0.0, 0.0), unit_params)


class TestBoundingBoxFallback:

    @pytest.mark.parametrize("archetype", ['Shelf', 'Recliner', 'Lamp', 'Mobius'])
    def test_box(self, archetype, unit_params):
        assert is_inside(archetype, (0.0, 0.5, 0.0), unit_params)
        assert is_inside(archetype, (0.5, 1.0, -0.5), unit_params)
        assert not is_inside(archetype, (0.0, 1.1, 0.0), unit_params)
        assert not is_inside(archetype, (0.51, 0.5, 0.0), unit_params)


class TestDispatch:

    def test_every_archetype_has_a_classifier(self):
        assert set(CLASSIFIERS) == set(Archetype)

    def test_unknown_archetype_raises(self, unit_params):
        with pytest.raises(ValueError):
            is_inside('Sofa', (0.0, 0.0, 0.0), unit_params)

    def test_grid_matches_pointwise(self, unit_params):
        xs = np.linspace(-0.6, 0.6, 7)
        ys = np.linspace(-0.1, 1.1, 7)
        X, Y, Z = np.meshgrid(xs, ys, xs, indexing='ij')
        for archetype in Archetype:
            grid = classify_grid(archetype, X, Y, Z, unit_params)
            assert grid.shape == X.shape
            for idx in [(0, 0, 0), (3, 3, 3), (6, 5, 1), (2, 6, 4)]:
                p = (X[idx], Y[idx], Z[idx])
                assert grid[idx] == is_inside(archetype, p, unit_params)

    def test_returns_plain_bool(self, unit_params):
        assert isinstance(is_inside('Table', (0.0, 0.95, 0.0), unit_params), bool)
