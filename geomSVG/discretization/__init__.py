"""
Discretization module.

Provides:
- KnotVector: Knot vector representation
- Bezier decomposition of clamped cubic B-spline curves
- Bernstein basis evaluation for Bezier segments
"""

from .knot_vector import KnotVector, make_open_knot_vector
from .decomposition import (
    SUPPORTED_DEGREE,
    decompose_curve,
    decompose_nurbs_curve,
    count_bezier_segments,
)
from .bezier import bernstein_basis, eval_bezier, bezier_bounds
