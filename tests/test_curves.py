# tests/test_curves.py
"""
CURVE & FRAME TESTS
===================

Checks for the small vector helpers the serpentine pipeline is built on:
- safe_unit never divides by zero
- initial normals are perpendicular to their tangent, even along +z
- parallel transport keeps the normal unit length and perpendicular
- Bezier sampling hits its end points and has the right count
"""

import numpy as np
import pytest

from lattice_craft.kernel.curves import (
    cubic_bezier_point,
    initial_normal_from_tangent,
    safe_unit,
    sample_bezier,
    transport_normal,
)


class TestSafeUnit:

    def test_normalizes(self):
        np.testing.assert_allclose(safe_unit([3.0, 4.0, 0.0]), [0.6, 0.8, 0.0])

    def test_zero_vector_returns_fallback_unchanged(self):
        fallback = np.array([0.0, 2.0, 0.0])
        result = safe_unit([0.0, 0.0, 0.0], fallback)
        np.testing.assert_array_equal(result, fallback)
        # a copy, not the caller's array
        assert result is not fallback

    def test_default_fallback_is_x_axis(self):
        np.testing.assert_array_equal(safe_unit(np.zeros(3)), [1.0, 0.0, 0.0])

    def test_does_not_mutate_input(self):
        v = np.array([0.0, 5.0, 0.0])
        safe_unit(v)
        np.testing.assert_array_equal(v, [0.0, 5.0, 0.0])


class TestInitialNormal:

    @pytest.mark.parametrize("tangent", [
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],      # parallel to the reference axis
        [0.1, 0.0, 0.99],     # nearly parallel
        [1.0, 2.0, 3.0],
    ])
    def test_perpendicular_unit(self, tangent):
        n = initial_normal_from_tangent(tangent)
        assert np.linalg.norm(n) == pytest.approx(1.0)
        assert np.dot(n, safe_unit(tangent)) == pytest.approx(0.0, abs=1e-12)


class TestTransportNormal:

    def test_identical_tangents_return_prev_normal(self):
        t = np.array([0.3, 0.4, 0.5])
        n = np.array([0.0, 0.0, 1.0])
        np.testing.assert_array_equal(transport_normal(t, t, n), n)

    def test_quarter_turn(self):
        """Rotating x into y about z carries a z normal along unchanged."""
        n = transport_normal([1, 0, 0], [0, 1, 0], [0, 0, 1])
        np.testing.assert_allclose(n, [0.0, 0.0, 1.0], atol=1e-12)

    def test_in_plane_normal_rotates_with_tangent(self):
        """Tangent x -> y about +z maps normal y -> -x."""
        n = transport_normal([1, 0, 0], [0, 1, 0], [0, 1, 0])
        np.testing.assert_allclose(n, [-1.0, 0.0, 0.0], atol=1e-12)

    def test_result_is_perpendicular_unit(self):
        rng = np.random.default_rng(7)
        prev_t = np.array([1.0, 0.0, 0.0])
        prev_n = initial_normal_from_tangent(prev_t)
        for _ in range(200):
            curr_t = prev_t + rng.normal(scale=0.3, size=3)
            n = transport_normal(prev_t, curr_t, prev_n)
            assert np.linalg.norm(n) == pytest.approx(1.0)
            assert np.dot(n, safe_unit(curr_t)) == pytest.approx(0.0, abs=1e-9)
            prev_t, prev_n = curr_t, n


class TestBezier:

    def test_end_points(self):
        p0, p1, p2, p3 = [0, 0, 0], [1, 2, 0], [2, 2, 0], [3, 0, 0]
        np.testing.assert_allclose(cubic_bezier_point(p0, p1, p2, p3, 0.0), p0)
        np.testing.assert_allclose(cubic_bezier_point(p0, p1, p2, p3, 1.0), p3)

    def test_midpoint(self):
        # B(0.5) = (p0 + 3 p1 + 3 p2 + p3) / 8
        p0, p1, p2, p3 = [0, 0, 0], [1, 2, 0], [2, 2, 0], [3, 0, 0]
        np.testing.assert_allclose(cubic_bezier_point(p0, p1, p2, p3, 0.5), [1.5, 1.5, 0.0])

    def test_sample_count_and_ends(self):
        pts = sample_bezier([0, 0, 0], [0, 1, 0], [1, 1, 0], [1, 0, 0], 10)
        assert pts.shape == (11, 3)
        np.testing.assert_allclose(pts[0], [0, 0, 0])
        np.testing.assert_allclose(pts[-1], [1, 0, 0])

    def test_samples_match_pointwise_evaluation(self):
        ctrl = ([0, 0, 0], [1, 3, 1], [2, -1, 0], [4, 0, 2])
        pts = sample_bezier(*ctrl, 8)
        for i, p in enumerate(pts):
            np.testing.assert_allclose(p, cubic_bezier_point(*ctrl, i / 8), atol=1e-12)

    def test_straight_handles_give_straight_line(self):
        a, b = np.array([0.0, 0.0, 0.0]), np.array([3.0, 0.0, 0.0])
        pts = sample_bezier(a, a + (b - a) / 3, a + 2 * (b - a) / 3, b, 6)
        np.testing.assert_allclose(pts[:, 1:], 0.0)
        np.testing.assert_allclose(pts[:, 0], np.linspace(0, 3, 7), atol=1e-12)
