"""
Tests for decomposition preview sampling and plotting.
"""

import pytest
import numpy as np
from numpy.testing import assert_array_almost_equal

from geomSVG.visualization.preview import (
    sample_curve, sample_bezier_segments, plot_decomposition
)


class TestSampling:

    def test_sample_curve_endpoints(self, two_span_curve):
        pts = sample_curve(two_span_curve, n_points=11)
        assert pts.shape == (11, 2)
        assert_array_almost_equal(pts[0], [0.0, 0.0])
        assert_array_almost_equal(pts[-1], [4.0, 1.0])

    def test_bezier_samples_match_curve(self, two_span_curve):
        """Uniform spans: segment samples coincide with curve samples."""
        bez = sample_bezier_segments(two_span_curve, n_per_segment=6)
        direct = sample_curve(two_span_curve, n_points=11)

        assert bez.shape == (2 * 5 + 1, 2)
        assert_array_almost_equal(bez, direct, decimal=10)


class TestPlot:

    def test_plot_decomposition(self, two_span_curve, tmp_path):
        matplotlib = pytest.importorskip("matplotlib")
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        out = tmp_path / "decomposition.png"
        fig = plot_decomposition(two_span_curve, n_per_segment=10, save_path=str(out))

        assert out.exists()
        assert len(fig.axes) == 1
        plt.close(fig)
