"""
Geometry module: exportable shapes and B-spline curves.
"""

from .primitives import ShapeKind, BoundingBox, compute_bounding_box, as_point
from .shapes import Shape, Point, Line, Circle, Ellipse, Polygon, PolyCurve
from .nurbs import NURBSCurve
