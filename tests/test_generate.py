# tests/test_generate.py
"""
END-TO-END GENERATION TESTS
===========================

generate_furniture() is the one public entry point. These tests check the
dispatch (pattern -> generator), input coercion, and that every
archetype x pattern combination returns a well-formed graph.
"""

import numpy as np
import pytest

from lattice_craft import generate_furniture
from lattice_craft.model import Archetype, FurnitureParams, PatternFamily


@pytest.fixture
def stool_params():
    return FurnitureParams(width=0.4, height=0.45, depth=0.4, seat_height=0.2,
                           pattern='Linear')


class TestDispatch:

    def test_stool_linear(self, stool_params):
        net = generate_furniture('Stool', stool_params)
        assert net.n_nodes == 16
        assert net.n_edges == 16

    def test_repeat_runs_identical(self, stool_params):
        a = generate_furniture('Stool', stool_params)
        b = generate_furniture('Stool', stool_params)
        np.testing.assert_array_equal(a.points(), b.points())
        assert a.edges == b.edges

    def test_accepts_mapping_with_camel_case_seat(self):
        params = {'width': 0.6, 'height': 0.9, 'depth': 0.6,
                  'seatHeight': 0.4, 'pattern': 'Linear'}
        net = generate_furniture('Chair', params)
        seat_nodes = [p for p in net.nodes if p[1] == 0.4]
        assert len(seat_nodes) == 4

    def test_accepts_enum(self, stool_params):
        net = generate_furniture(Archetype.TABLE, stool_params)
        assert net.n_nodes == 13

    def test_unknown_archetype(self, stool_params):
        with pytest.raises(ValueError, match="Unknown archetype"):
            generate_furniture('Sofa', stool_params)

    def test_unknown_pattern(self):
        with pytest.raises(ValueError, match="Unknown pattern"):
            FurnitureParams(pattern='Honeycomb')

    def test_triangular_matches_direct_generator(self):
        from lattice_craft.generative.volumetric import generate_triangular
        params = FurnitureParams(pattern=PatternFamily.TRIANGULAR)
        assert generate_furniture('Table', params).edges == generate_triangular('Table', params).edges

    def test_seed_makes_voronoi_reproducible(self):
        params = FurnitureParams(width=0.4, height=0.5, depth=0.4, pattern='Voronoi')
        a = generate_furniture('Vase', params, seed=9)
        b = generate_furniture('Vase', params, seed=9)
        np.testing.assert_array_equal(a.points(), b.points())
        assert a.edges == b.edges

    def test_rng_takes_precedence_over_seed(self):
        params = FurnitureParams(width=0.4, height=0.5, depth=0.4, pattern='Voronoi')
        a = generate_furniture('Shelf', params, rng=np.random.default_rng(1), seed=2)
        b = generate_furniture('Shelf', params, rng=np.random.default_rng(1))
        np.testing.assert_array_equal(a.points(), b.points())


SMALL = dict(width=0.4, height=0.5, depth=0.4, seat_height=0.25)


@pytest.mark.parametrize("archetype", list(Archetype))
@pytest.mark.parametrize("pattern", list(PatternFamily))
def test_all_combinations_well_formed(archetype, pattern):
    params = FurnitureParams(pattern=pattern, **SMALL)
    net = generate_furniture(archetype, params, seed=0)
    n = net.n_nodes
    for i, j in net.edges:
        assert 0 <= i < n and 0 <= j < n
    assert all(p.shape == (3,) for p in net.nodes)
    assert np.all(np.isfinite(net.points()))


def test_fresh_network_per_call(stool_params):
    a = generate_furniture('Stool', stool_params)
    a.nodes.clear()
    b = generate_furniture('Stool', stool_params)
    assert b.n_nodes == 16
