"""
Bernstein basis and Bezier segment helpers.

A degree-p Bezier segment with control points Q_0..Q_p is

    B(t) = sum_i B_{i,p}(t) * Q_i,    t in [0, 1]

with the Bernstein polynomials

    B_{i,p}(t) = C(p,i) * t^i * (1-t)^(p-i)

These helpers are used to evaluate decomposed segments and to compute
tight bounding boxes of curves.
"""

import numpy as np
from typing import Tuple


def bernstein_basis(p: int, t: float) -> np.ndarray:
    """
    Evaluate all Bernstein basis polynomials of degree p at t in [0,1].

    Parameters:
        p: Polynomial degree
        t: Parameter value in [0, 1]

    Returns:
        Array of shape (p+1,) with B_{0,p}(t), ..., B_{p,p}(t)
    """
    B = np.zeros(p + 1)
    B[0] = 1.0
    if p == 0:
        return B

    # de Casteljau-like recurrence for numerical stability
    B[0] = 1.0 - t
    B[1] = t

    for j in range(1, p):
        saved = 0.0
        for k in range(j + 1):
            temp = B[k]
            B[k] = saved + (1.0 - t) * temp
            saved = t * temp
        B[j + 1] = saved

    return B


def eval_bezier(control_points: np.ndarray, t: float) -> np.ndarray:
    """
    Evaluate a Bezier segment at t.

    Parameters:
        control_points: (p+1, d) array
        t: Parameter value in [0, 1]

    Returns:
        Point coordinates as (d,) array
    """
    Q = np.asarray(control_points, dtype=np.float64)
    return bernstein_basis(len(Q) - 1, t) @ Q


def _cubic_extrema(c0: float, c1: float, c2: float, c3: float) -> np.ndarray:
    """Parameters in (0, 1) where a 1D cubic Bezier has zero derivative."""
    # B'(t)/3 in power form: a t^2 + b t + c
    d0, d1, d2 = c1 - c0, c2 - c1, c3 - c2
    a = d0 - 2.0 * d1 + d2
    b = 2.0 * (d1 - d0)
    c = d0

    if abs(a) < 1e-14:
        if abs(b) < 1e-14:
            return np.empty(0)
        roots = np.array([-c / b])
    else:
        disc = b * b - 4.0 * a * c
        if disc < 0.0:
            return np.empty(0)
        sq = np.sqrt(disc)
        roots = np.array([(-b + sq) / (2.0 * a), (-b - sq) / (2.0 * a)])

    return roots[(roots > 0.0) & (roots < 1.0)]


def bezier_bounds(control_points: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Tight axis-aligned bounds of a cubic Bezier segment.

    The extremes of each coordinate lie either at the end points or at a
    root of the derivative.

    Parameters:
        control_points: (4, d) array

    Returns:
        Tuple (min_coords, max_coords), each a (d,) array
    """
    Q = np.asarray(control_points, dtype=np.float64)
    candidates = [Q[0], Q[-1]]
    for axis in range(Q.shape[1]):
        for t in _cubic_extrema(*Q[:, axis]):
            candidates.append(eval_bezier(Q, t))
    pts = np.array(candidates)
    return pts.min(axis=0), pts.max(axis=0)
