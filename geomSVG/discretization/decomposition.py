"""
Decomposition of B-spline curves into Bezier segments.

SVG paths only know cubic Bezier segments, so a NURBS curve has to be
rewritten as a chain of them before it can be emitted. The rewrite is
done by knot insertion (Boehm refinement):

- Every interior knot is inserted until its multiplicity equals p
- At multiplicity p the curve is only C^0 at that knot, and the p+1
  control points between two consecutive breakpoints are exactly the
  Bezier control points of that polynomial piece
- Knot insertion never changes the shape of the curve, only its
  representation

Each inserted control point is an affine blend of two neighbours,

    Q_k <- alpha_k * Q_k + (1 - alpha_k) * Q_{k-1}

applied to every coordinate independently, so the error stays bounded
by the number of insertions and no linear system has to be solved.

Preconditions (documented, not checked):
- The knot vector is non-decreasing and clamped (end multiplicity p+1)
- Interior multiplicities do not exceed p
- len(knots) == len(control_points) + p + 1 and len(control_points) > p

Reference:
- Piegl & Tiller, "The NURBS Book", Algorithm A5.6 (DecomposeCurve)
"""

import numpy as np
from typing import List, Sequence, Tuple

from ..exceptions import UnsupportedDegreeError


SUPPORTED_DEGREE = 3


def decompose_curve(n: int, p: int, U: Sequence[float],
                    P: np.ndarray) -> Tuple[int, List[np.ndarray]]:
    """
    Split a clamped B-spline curve into Bezier segments by knot insertion.

    Parameters:
        n: Index of the last control point (number of control points - 1)
        p: Polynomial degree
        U: Knot vector of length n + p + 2
        P: Control points as (n+1, d) array

    Returns:
        Tuple (nb, Q) where Q is the working buffer of m - 2p rows, each a
        (p+1, d) array, and nb is the number of rows holding a segment.
        Rows are stored in parameter order.
    """
    U = np.asarray(U, dtype=np.float64)
    P = np.asarray(P, dtype=np.float64)
    d = P.shape[1]

    m = n + p + 1
    a = p
    b = p + 1
    nb = 0

    # A clamped vector with m+1 knots has at most m - 2p non-zero spans
    Q = [np.zeros((p + 1, d)) for _ in range(m - 2 * p)]
    Q[0][:] = P[:p + 1]

    alphas = np.zeros(p)

    while b < m:
        i = b
        while b < m and U[b + 1] == U[b]:
            b += 1
        mult = b - i + 1

        if mult < p:
            numer = U[b] - U[a]
            for j in range(p, mult, -1):
                alphas[j - mult - 1] = numer / (U[a + j] - U[a])

            r = p - mult
            for j in range(1, r + 1):
                save = r - j
                s = mult + j
                # Descending k: Q[nb][k-1] must still hold its old value
                for k in range(p, s - 1, -1):
                    alpha = alphas[k - s]
                    Q[nb][k] = alpha * Q[nb][k] + (1.0 - alpha) * Q[nb][k - 1]
                if b < m:
                    Q[nb + 1][save] = Q[nb][p]

        nb += 1
        if b < m:
            for j in range(p - mult, p + 1):
                Q[nb][j] = P[b - p + j]
            a = b
            b += 1

    return nb, Q


def decompose_nurbs_curve(curve) -> List[np.ndarray]:
    """
    Convert a degree-3 B-spline curve into cubic Bezier segments.

    Parameters:
        curve: Object exposing ``degree``, ``control_points`` and either
            ``knots`` or a ``knot_vector`` with ``.knots`` (see NURBSCurve).
            Control points are an (n+1, d) array with d = 2 or 3.

    Returns:
        List of (4, d) arrays in parameter order. Index 0 of a segment is its
        start point, index 3 its end point, indices 1 and 2 its handles.
        The end point of segment i equals the start point of segment i+1.

    Raises:
        UnsupportedDegreeError: If curve.degree != 3. Raised before any
            computation, so no partial output is produced.
    """
    p = curve.degree
    if p != SUPPORTED_DEGREE:
        raise UnsupportedDegreeError(p, SUPPORTED_DEGREE)

    # Copies so the caller's arrays can never be aliased or mutated
    P = np.array(curve.control_points, dtype=np.float64)
    knots = getattr(curve, "knots", None)
    if knots is None:
        knots = curve.knot_vector.knots
    U = np.array(knots, dtype=np.float64)
    n = len(P) - 1

    nb, Q = decompose_curve(n, p, U, P)
    return [Q[i].copy() for i in range(nb)]


def count_bezier_segments(knots: Sequence[float]) -> int:
    """
    Number of Bezier segments a clamped curve decomposes into.

    Equals the number of distinct interior knot values plus one.
    """
    return len(np.unique(np.asarray(knots, dtype=np.float64))) - 1
