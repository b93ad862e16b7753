"""
Pytest configuration and shared fixtures for geomSVG tests.
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# Add the parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from geomSVG.discretization.knot_vector import KnotVector
from geomSVG.geometry.nurbs import NURBSCurve


@pytest.fixture
def tolerance():
    """Default tolerance for floating point comparisons."""
    return 1e-9


@pytest.fixture
def two_span_curve():
    """Cubic curve with one simple interior knot at 0.5."""
    kv = KnotVector([0, 0, 0, 0, 0.5, 1, 1, 1, 1], degree=3)
    return NURBSCurve(kv, np.array([
        [0.0, 0.0],
        [1.0, 2.0],
        [2.0, 2.0],
        [3.0, 0.0],
        [4.0, 1.0],
    ]))


@pytest.fixture
def mixed_multiplicity_curve():
    """
    Cubic curve with interior knots of multiplicity 1, 2 and 3.

    Interior breakpoints: 0.1 (x1), 0.3 (x2), 0.6 (x3), 0.8 (x1)
    -> 5 Bezier segments.
    """
    knots = [0, 0, 0, 0, 0.1, 0.3, 0.3, 0.6, 0.6, 0.6, 0.8, 1, 1, 1, 1]
    rng = np.random.default_rng(0)
    control_points = rng.uniform(-5.0, 5.0, size=(11, 2))
    return NURBSCurve(KnotVector(knots, degree=3), control_points)
