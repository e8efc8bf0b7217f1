# tests/test_skeletal.py
"""
SKELETAL PATTERN TESTS: Node/Edge Counts and Key Geometry
=========================================================

The Linear builders are fixed topologies, so their counts are exact:

    Chair     14 nodes   17 edges
    Table     13         20
    Stool     16         16
    Bench     12         17
    Shelf     16         36
    Vase      48        132
    Lamp     153        441
    Mobius   320        828

The Recliner is random; only its surface grid (31 x 13 = 403) is fixed.
"""

import numpy as np
import pytest

from lattice_craft.generative.skeletal import (
    SKELETAL_BUILDERS,
    build_bench,
    build_chair,
    build_lamp,
    build_mobius,
    build_recliner,
    build_shelf,
    build_stool,
    build_table,
    build_vase,
)
from lattice_craft.model import Archetype, FurnitureParams

EXPECTED_COUNTS = [
    (build_chair, 14, 17),
    (build_table, 13, 20),
    (build_stool, 16, 16),
    (build_bench, 12, 17),
    (build_shelf, 16, 36),
    (build_vase, 48, 132),
    (build_lamp, 153, 441),
    (build_mobius, 320, 828),
]


@pytest.fixture
def params():
    return FurnitureParams(width=0.6, height=0.9, depth=0.6, seat_height=0.45)


@pytest.mark.parametrize("builder,n_nodes,n_edges", EXPECTED_COUNTS)
def test_counts(builder, n_nodes, n_edges, params):
    net = builder(params)
    assert net.n_nodes == n_nodes
    assert net.n_edges == n_edges


@pytest.mark.parametrize("builder,n_nodes,n_edges", EXPECTED_COUNTS)
def test_indices_valid(builder, n_nodes, n_edges, params):
    net = builder(params)
    assert all(0 <= i < net.n_nodes and 0 <= j < net.n_nodes for i, j in net.edges)


def test_every_archetype_has_a_builder():
    assert set(SKELETAL_BUILDERS) == set(Archetype)


class TestChair:

    def test_floor_and_backrest_heights(self, params):
        net = build_chair(params)
        ys = net.points()[:, 1]
        assert np.count_nonzero(ys == 0.0) == 4
        assert np.count_nonzero(ys == params.height) == 2
        assert np.count_nonzero(ys == params.seat_height) == 4

    def test_stretchers_run_front_to_back(self, params):
        net = build_chair(params)
        for i, j in net.edges[-2:]:
            a, b = net.nodes[i], net.nodes[j]
            assert a[0] == b[0]
            assert a[1] == b[1] == pytest.approx(params.seat_height * 0.3)
            assert a[2] == -b[2]


class TestTable:

    def test_hub_at_center_of_top(self, params):
        net = build_table(params)
        np.testing.assert_allclose(net.nodes[12], [0.0, params.height, 0.0])
        hub_edges = [e for e in net.edges if 12 in e]
        assert len(hub_edges) == 4


class TestStool:

    def test_rings(self, params):
        net = build_stool(params)
        pts = net.points()
        radii = np.hypot(pts[:, 0], pts[:, 2])
        floor = pts[:, 1] == 0.0
        top = pts[:, 1] == params.height
        np.testing.assert_allclose(radii[floor], params.width / 1.5)
        np.testing.assert_allclose(radii[top], params.width / 2)
        assert np.count_nonzero(floor) == 4
        assert np.count_nonzero(top) == 4

    def test_rest_ring_level(self, params):
        net = build_stool(params)
        rest = net.points()[8:]
        np.testing.assert_allclose(rest[:, 1], params.height * 0.3)

    def test_first_leg_at_45_degrees(self, params):
        net = build_stool(params)
        x, _, z = net.nodes[0]
        assert x == pytest.approx(z)
        assert x > 0


class TestBench:

    def test_three_frames_along_width(self, params):
        net = build_bench(params)
        xs = sorted(set(np.round(net.points()[:, 0], 12)))
        np.testing.assert_allclose(xs, [-0.3, 0.0, 0.3], atol=1e-12)


class TestShelf:

    def test_levels(self, params):
        net = build_shelf(params)
        ys = sorted(set(np.round(net.points()[:, 1], 12)))
        np.testing.assert_allclose(ys, [0.0, 0.3, 0.6, 0.9], atol=1e-12)


class TestVase:

    def test_first_ring_radius(self, params):
        net = build_vase(params)
        ring = net.points()[:6]
        np.testing.assert_allclose(np.hypot(ring[:, 0], ring[:, 2]), params.width * 0.4)
        np.testing.assert_allclose(ring[:, 1], 0.0)

    def test_top_ring_at_height(self, params):
        net = build_vase(params)
        np.testing.assert_allclose(net.points()[-6:, 1], params.height)


class TestLamp:

    def test_deterministic(self, params):
        a = build_lamp(params)
        b = build_lamp(params)
        np.testing.assert_array_equal(a.points(), b.points())
        assert a.edges == b.edges

    def test_layers_span_height(self, params):
        ys = build_lamp(params).points()[:, 1]
        assert ys.min() == 0.0
        assert ys.max() == pytest.approx(params.height)


class TestMobius:

    def test_seam_reverses_cross_section(self, params):
        net = build_mobius(params)
        edges = set(net.edges)
        last_row = 63 * 5
        for j in range(5):
            assert (last_row + j, 4 - j) in edges
        # no diagonals across the seam
        assert (last_row, 1) not in edges

    def test_nothing_below_floor(self):
        # strip half-width 0.2 * depth exceeds height / 2, so some nodes clamp
        low = FurnitureParams(width=0.6, height=0.1, depth=1.0)
        pts = build_mobius(low).points()
        assert pts[:, 1].min() == 0.0
        assert np.count_nonzero(pts[:, 1] == 0.0) > 0

    def test_centered_on_half_height(self, params):
        pts = build_mobius(params).points()
        assert pts[:, 1].mean() == pytest.approx(params.height / 2, abs=1e-9)


class TestRecliner:

    def test_surface_grid_size(self, params):
        net = build_recliner(params, np.random.default_rng(0))
        assert net.n_nodes >= 403

    def test_seeded_reproducible(self, params):
        a = build_recliner(params, np.random.default_rng(11))
        b = build_recliner(params, np.random.default_rng(11))
        np.testing.assert_array_equal(a.points(), b.points())
        assert a.edges == b.edges

    def test_legs_reach_floor(self, params):
        for seed in range(5):
            net = build_recliner(params, np.random.default_rng(seed))
            legs = net.points()[403:]
            np.testing.assert_array_equal(legs[:, 1], 0.0)
            # each leg is the last node added for its strut
            leg_ids = set(range(403, net.n_nodes))
            leg_edges = [e for e in net.edges if e[1] in leg_ids]
            assert len(leg_edges) == len(leg_ids)

    def test_surface_links_are_short(self, params):
        net = build_recliner(params, np.random.default_rng(1))
        limit = (params.width / 12) * 1.8
        for i, j in net.edges:
            if i < 403 and j < 403:
                assert np.linalg.norm(net.nodes[i] - net.nodes[j]) < limit
