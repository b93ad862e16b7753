"""
Knot vector utilities.

A knot vector is a non-decreasing sequence of real numbers that defines
the parametric domain and the polynomial pieces of a B-spline curve.

Mathematical background:
- Clamped (open) knot vectors have p+1 repeated knots at each end, so the
  curve passes through its first and last control points
- The number of control points n = len(knots) - p - 1
- Knot spans with non-zero length are the polynomial pieces of the curve;
  each one becomes a single Bezier segment after decomposition
"""

import numpy as np
from typing import List, Tuple
from dataclasses import dataclass


@dataclass
class KnotVector:
    """
    Represents a univariate knot vector.

    Attributes:
        knots: The knot values (non-decreasing sequence)
        degree: Polynomial degree p

    Properties computed:
        n_basis: Number of basis functions (= number of control points)
        n_spans: Number of non-zero length knot spans
        spans: List of (start, end) parametric intervals
    """
    knots: np.ndarray
    degree: int

    def __post_init__(self):
        self.knots = np.asarray(self.knots, dtype=np.float64)
        self._validate()
        self._compute_spans()

    def _validate(self):
        """Validate knot vector properties."""
        if len(self.knots) < 2 * (self.degree + 1):
            raise ValueError(
                f"Knot vector too short for degree {self.degree}. "
                f"Need at least {2 * (self.degree + 1)} knots, got {len(self.knots)}."
            )
        if not np.all(np.diff(self.knots) >= 0):
            raise ValueError("Knot vector must be non-decreasing.")

    def _compute_spans(self):
        """Collect the unique breakpoints and the non-zero spans between them."""
        unique_knots = np.unique(self.knots)
        self._unique_knots = unique_knots
        self._spans = []
        for i in range(len(unique_knots) - 1):
            if unique_knots[i + 1] > unique_knots[i]:
                self._spans.append((unique_knots[i], unique_knots[i + 1]))

    @property
    def n_basis(self) -> int:
        """Number of basis functions."""
        return len(self.knots) - self.degree - 1

    @property
    def n_spans(self) -> int:
        """Number of non-zero length knot spans."""
        return len(self._spans)

    @property
    def spans(self) -> List[Tuple[float, float]]:
        """List of span intervals as (xi_start, xi_end) tuples."""
        return self._spans.copy()

    @property
    def unique_knots(self) -> np.ndarray:
        """Unique knot values (breakpoints)."""
        return self._unique_knots.copy()

    @property
    def domain(self) -> Tuple[float, float]:
        """Parametric domain (first unique knot, last unique knot)."""
        return (self._unique_knots[0], self._unique_knots[-1])

    def multiplicity(self, xi: float, tol: float = 1e-14) -> int:
        """Number of times xi appears in the knot vector."""
        return int(np.sum(np.abs(self.knots - xi) < tol))

    def find_span(self, xi: float) -> int:
        """
        Find the knot span index containing parameter value xi.

        For xi in [xi_i, xi_{i+1}), returns i.
        The last span is closed: [xi_{n-1}, xi_n].

        Parameters:
            xi: Parameter value

        Returns:
            Span index i such that xi in [xi_i, xi_{i+1})
        """
        n = self.n_basis
        p = self.degree

        if xi >= self.knots[n]:
            return n - 1
        if xi <= self.knots[p]:
            return p

        # Binary search
        low = p
        high = n
        mid = (low + high) // 2

        while xi < self.knots[mid] or xi >= self.knots[mid + 1]:
            if xi < self.knots[mid]:
                high = mid
            else:
                low = mid
            mid = (low + high) // 2

        return mid

    def find_span_index(self, xi: float) -> int:
        """
        Find which non-zero span (0-based, in parameter order) contains xi.

        Interior boundaries belong to the span on their right; the last
        span includes the end of the domain.
        """
        n_spans = len(self._spans)
        for e, (xi_start, xi_end) in enumerate(self._spans):
            if e == n_spans - 1:
                if xi_start <= xi <= xi_end:
                    return e
            elif xi_start <= xi < xi_end:
                return e
        raise ValueError(f"Parameter {xi} outside domain {self.domain}")


def make_open_knot_vector(n_basis: int, degree: int,
                          domain: Tuple[float, float] = (0.0, 1.0)) -> KnotVector:
    """
    Create an open (clamped) uniform knot vector.

    Parameters:
        n_basis: Number of basis functions (control points) desired
        degree: Polynomial degree p
        domain: Parametric domain (start, end)

    Returns:
        KnotVector with uniform internal knots
    """
    p = degree
    n_knots = n_basis + p + 1
    n_internal = n_knots - 2 * (p + 1)

    if n_internal < 0:
        raise ValueError(
            f"Cannot create knot vector: n_basis={n_basis} too small for degree={degree}"
        )

    a, b = domain

    knots = [a] * (p + 1)
    if n_internal > 0:
        knots.extend(np.linspace(a, b, n_internal + 2)[1:-1])
    knots.extend([b] * (p + 1))

    return KnotVector(np.array(knots), degree)
