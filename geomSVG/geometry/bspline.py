"""
B-spline basis function evaluation.

The i-th B-spline basis function of degree p is defined recursively:

    N_{i,0}(xi) = 1 if xi_i <= xi < xi_{i+1}, else 0

    N_{i,p}(xi) = (xi - xi_i)/(xi_{i+p} - xi_i) * N_{i,p-1}(xi)
                + (xi_{i+p+1} - xi)/(xi_{i+p+1} - xi_{i+1}) * N_{i+1,p-1}(xi)

Only p+1 of them are non-zero on a span, so evaluation works span-local.
"""

import numpy as np
from typing import Optional
from ..discretization.knot_vector import KnotVector


def eval_basis_1d(kv: KnotVector, xi: float,
                  span: Optional[int] = None) -> np.ndarray:
    """
    Evaluate all non-zero B-spline basis functions at a parameter value.

    Cox-de Boor recurrence (Piegl & Tiller, Algorithm A2.2).

    Parameters:
        kv: Knot vector
        xi: Parameter value
        span: Optional pre-computed span index

    Returns:
        Array of shape (p+1,) containing N_{span-p,p}(xi) to N_{span,p}(xi)
    """
    p = kv.degree
    knots = kv.knots

    if span is None:
        span = kv.find_span(xi)

    N = np.zeros(p + 1)
    N[0] = 1.0

    left = np.zeros(p + 1)
    right = np.zeros(p + 1)

    for j in range(1, p + 1):
        left[j] = xi - knots[span + 1 - j]
        right[j] = knots[span + j] - xi

        saved = 0.0
        for r in range(j):
            temp = N[r] / (right[r + 1] + left[j - r])
            N[r] = saved + right[r + 1] * temp
            saved = left[j - r] * temp
        N[j] = saved

    return N


def eval_curve_point(kv: KnotVector, control_points: np.ndarray,
                     xi: float) -> np.ndarray:
    """
    Evaluate a non-rational B-spline curve at xi.

    Parameters:
        kv: Knot vector
        control_points: (n_basis, d) array
        xi: Parameter value

    Returns:
        Point coordinates as (d,) array
    """
    span = kv.find_span(xi)
    N = eval_basis_1d(kv, xi, span)
    start = span - kv.degree
    return N @ control_points[start:start + kv.degree + 1]
