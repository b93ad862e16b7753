"""
Unit tests for Bernstein basis and Bezier helpers.
"""

import pytest
import numpy as np
from numpy.testing import assert_array_almost_equal, assert_almost_equal

from geomSVG.discretization.bezier import bernstein_basis, eval_bezier, bezier_bounds


class TestBernsteinBasis:
    """Tests for Bernstein polynomial basis."""

    def test_partition_of_unity(self):
        for p in [1, 2, 3, 4]:
            for t in [0.0, 0.25, 0.5, 0.75, 1.0]:
                assert_almost_equal(np.sum(bernstein_basis(p, t)), 1.0, decimal=14)

    def test_boundary_values(self):
        for p in [1, 2, 3]:
            B = bernstein_basis(p, 0.0)
            assert_almost_equal(B[0], 1.0)
            assert_almost_equal(B[1:], 0.0)

            B = bernstein_basis(p, 1.0)
            assert_almost_equal(B[-1], 1.0)
            assert_almost_equal(B[:-1], 0.0)

    def test_known_values_cubic(self):
        # (1-t)^3, 3t(1-t)^2, 3t^2(1-t), t^3 at t = 0.5
        assert_array_almost_equal(bernstein_basis(3, 0.5),
                                  [0.125, 0.375, 0.375, 0.125])

    def test_degree_zero(self):
        assert_array_almost_equal(bernstein_basis(0, 0.3), [1.0])


class TestBezierSegment:
    """Tests for segment evaluation and bounds."""

    def test_eval_endpoints(self):
        Q = np.array([[0.0, 0.0], [1.0, 2.0], [3.0, 2.0], [4.0, 0.0]])
        assert_array_almost_equal(eval_bezier(Q, 0.0), Q[0])
        assert_array_almost_equal(eval_bezier(Q, 1.0), Q[-1])

    def test_eval_midpoint(self):
        Q = np.array([[0.0, 0.0], [0.0, 1.0], [1.0, 1.0], [1.0, 0.0]])
        assert_array_almost_equal(eval_bezier(Q, 0.5), [0.5, 0.75])

    def test_bounds_tighter_than_control_polygon(self):
        """The arch reaches y = 0.75, not the handle height 1."""
        Q = np.array([[0.0, 0.0], [0.0, 1.0], [1.0, 1.0], [1.0, 0.0]])
        low, high = bezier_bounds(Q)

        assert_array_almost_equal(low, [0.0, 0.0])
        assert_array_almost_equal(high, [1.0, 0.75])

    def test_bounds_straight_segment(self):
        """Collinear control points: bounds are the end points."""
        Q = np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 2.0], [3.0, 3.0]])
        low, high = bezier_bounds(Q)

        assert_array_almost_equal(low, [0.0, 0.0])
        assert_array_almost_equal(high, [3.0, 3.0])

    def test_bounds_overshoot(self):
        """Handles beyond the end points push the bounds outward."""
        Q = np.array([[0.0, 0.0], [-1.0, 0.0], [2.0, 0.0], [1.0, 0.0]])
        low, high = bezier_bounds(Q)

        assert low[0] < 0.0
        assert high[0] > 1.0
        for t in np.linspace(0, 1, 101):
            x = eval_bezier(Q, t)[0]
            assert low[0] - 1e-12 <= x <= high[0] + 1e-12

    def test_bounds_3d(self):
        Q = np.array([[0.0, 0.0, 0.0], [0.0, 1.0, 2.0],
                      [1.0, 1.0, 2.0], [1.0, 0.0, 0.0]])
        low, high = bezier_bounds(Q)

        assert low.shape == (3,)
        assert_almost_equal(high[2], 1.5)
