"""
Geometric primitives shared by all shapes.

Provides:
- ShapeKind: the closed set of exportable shape kinds
- BoundingBox: axis-aligned box returned by bounding-box queries
- compute_bounding_box: combined bounds of a collection of shapes
- as_point: coordinate normalization to 3D numpy points
"""

import numpy as np
from enum import Enum
from typing import Iterable
from dataclasses import dataclass


class ShapeKind(Enum):
    """Exportable shape kinds, in the order they are grouped in SVG output."""
    Point = "point"
    Line = "line"
    Ellipse = "ellipse"
    Circle = "circle"
    Polygon = "polygon"
    NURBSCurve = "nurbs"
    PolyCurve = "polycurve"


def as_point(coordinates) -> np.ndarray:
    """
    Convert (x, y) or (x, y, z) coordinates to a float (3,) array.

    Missing Z is set to 0.
    """
    coords = np.asarray(coordinates, dtype=np.float64).ravel()
    if coords.shape[0] == 2:
        coords = np.append(coords, 0.0)
    if coords.shape[0] != 3:
        raise ValueError(f"Expected 2 or 3 coordinates, got {coords.shape[0]}")
    return coords


@dataclass
class BoundingBox:
    """
    Axis-aligned bounding box in 3D.

    Attributes:
        min_point: (3,) array of minimum coordinates
        max_point: (3,) array of maximum coordinates
    """
    min_point: np.ndarray
    max_point: np.ndarray

    def __post_init__(self):
        self.min_point = as_point(self.min_point)
        self.max_point = as_point(self.max_point)

    @classmethod
    def from_points(cls, points) -> "BoundingBox":
        """Bounds of an (n, 2) or (n, 3) point array."""
        pts = np.atleast_2d(np.asarray(points, dtype=np.float64))
        if pts.shape[1] == 2:
            pts = np.hstack([pts, np.zeros((pts.shape[0], 1))])
        return cls(pts.min(axis=0), pts.max(axis=0))

    @property
    def width(self) -> float:
        """Extent along X."""
        return float(self.max_point[0] - self.min_point[0])

    @property
    def height(self) -> float:
        """Extent along Y."""
        return float(self.max_point[1] - self.min_point[1])

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Smallest box containing both boxes."""
        return BoundingBox(np.minimum(self.min_point, other.min_point),
                           np.maximum(self.max_point, other.max_point))


def compute_bounding_box(shapes: Iterable) -> BoundingBox:
    """
    Combined bounding box of a collection of shapes.

    Parameters:
        shapes: Iterable of objects with a bounding_box() method

    Returns:
        BoundingBox enclosing every shape

    Raises:
        ValueError: If shapes is empty
    """
    box = None
    for shape in shapes:
        shape_box = shape.bounding_box()
        box = shape_box if box is None else box.union(shape_box)
    if box is None:
        raise ValueError("Cannot compute bounding box of an empty geometry list")
    return box
