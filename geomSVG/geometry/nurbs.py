"""
B-spline ("NURBS" with unit weights) curve geometry.

A curve point is computed as

    C(xi) = sum_i N_i(xi) * P_i

where N_i are the B-spline basis functions of the knot vector and P_i
the control points. Weights are not supported: every curve handled here
is non-rational.

The curve is exported to SVG by decomposing it into cubic Bezier
segments (see discretization.decomposition), so only degree 3 curves can
be written. Other degrees are accepted as geometry but raise
UnsupportedDegreeError when emitted.
"""

from __future__ import annotations

import numpy as np
from typing import TYPE_CHECKING, ClassVar, List
from xml.etree.ElementTree import Element, SubElement

from ..discretization.knot_vector import KnotVector
from ..discretization.decomposition import SUPPORTED_DEGREE, decompose_nurbs_curve
from ..discretization.bezier import bezier_bounds
from ..export.path import bezier_path_data
from .bspline import eval_curve_point
from .primitives import BoundingBox, ShapeKind, as_point
from .shapes import Shape

if TYPE_CHECKING:
    from ..io.config import ExportConfig


class NURBSCurve(Shape):
    """
    Non-rational B-spline curve in 2D or 3D.

    Defined by:
    - Knot vector (degree and parametric domain)
    - Control points P_i in R^d, d = 2 or 3
    """

    kind: ClassVar[ShapeKind] = ShapeKind.NURBSCurve

    def __init__(self, knot_vector: KnotVector, control_points: np.ndarray):
        """
        Initialize a curve.

        Parameters:
            knot_vector: KnotVector defining the basis
            control_points: Array of shape (n, d) where n = n_basis functions
        """
        self._knot_vector = knot_vector
        self._control_points = np.atleast_2d(
            np.asarray(control_points, dtype=np.float64)).copy()

        if self._control_points.shape[0] != knot_vector.n_basis:
            raise ValueError(
                f"Number of control points ({self._control_points.shape[0]}) "
                f"must match number of basis functions ({knot_vector.n_basis})"
            )
        if self._control_points.shape[1] not in (2, 3):
            raise ValueError(
                f"Control points must have 2 or 3 coordinates, "
                f"got {self._control_points.shape[1]}"
            )

    @classmethod
    def from_knots(cls, knots, control_points, degree: int) -> NURBSCurve:
        """Build a curve from a raw knot sequence."""
        return cls(KnotVector(knots, degree), control_points)

    @property
    def n_dim_physical(self) -> int:
        return self._control_points.shape[1]

    @property
    def n_control_points(self) -> int:
        return self._knot_vector.n_basis

    @property
    def control_points(self) -> np.ndarray:
        return self._control_points.copy()

    @property
    def knot_vector(self) -> KnotVector:
        return self._knot_vector

    @property
    def knots(self) -> np.ndarray:
        return self._knot_vector.knots.copy()

    @property
    def degree(self) -> int:
        return self._knot_vector.degree

    @property
    def start_point(self) -> np.ndarray:
        return self._control_points[0].copy()

    @property
    def end_point(self) -> np.ndarray:
        return self._control_points[-1].copy()

    def eval_point(self, xi: float) -> np.ndarray:
        """
        Evaluate curve at parameter value.

        Parameters:
            xi: Parameter value

        Returns:
            Point coordinates as (d,) array
        """
        return eval_curve_point(self._knot_vector, self._control_points, xi)

    def bezier_segments(self) -> List[np.ndarray]:
        """Cubic Bezier segments of the curve, each a (4, d) array."""
        return decompose_nurbs_curve(self)

    def bounding_box(self) -> BoundingBox:
        """
        Bounds of the curve.

        Exact for cubic curves (computed per Bezier segment). For other
        degrees the control polygon bounds are returned, which contain the
        curve by the convex hull property.
        """
        if self.degree != SUPPORTED_DEGREE:
            return BoundingBox.from_points(self._control_points)

        lows, highs = zip(*(bezier_bounds(Q) for Q in self.bezier_segments()))
        return BoundingBox(as_point(np.min(lows, axis=0)),
                           as_point(np.max(highs, axis=0)))

    def translated(self, offset) -> NURBSCurve:
        shift = as_point(offset)[:self.n_dim_physical]
        return NURBSCurve(self._knot_vector, self._control_points + shift)

    def to_svg(self, parent: Element, config: ExportConfig) -> Element:
        path_data = bezier_path_data(self.bezier_segments(), config.precision)
        element = SubElement(parent, "path")
        element.set("d", path_data)
        for name, value in config.style_for(self.kind.value).items():
            element.set(name, value)
        return element

    def __repr__(self) -> str:
        return (f"NURBSCurve(degree={self.degree}, "
                f"n_control_points={self.n_control_points}, "
                f"dim={self.n_dim_physical})")
