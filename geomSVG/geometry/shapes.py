"""
Exportable shapes.

The set of shape kinds is closed (see ShapeKind). Every kind implements
the Shape interface, so the exporter never inspects types:

- bounding_box(): axis-aligned bounds in 3D
- translated(offset): a moved copy (shapes are never mutated)
- to_svg(parent, config): append the SVG element(s) for this shape

Z coordinates are kept for bounding boxes and translation but are not
rendered: SVG output is the projection onto the XY plane.

NURBSCurve lives in nurbs.py and implements the same interface.
"""

from __future__ import annotations

import math
import numpy as np
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, List
from xml.etree.ElementTree import Element, SubElement

from .primitives import BoundingBox, ShapeKind, as_point
from ..export.path import format_number

if TYPE_CHECKING:
    from ..io.config import ExportConfig


class Shape(ABC):
    """
    Abstract base class for exportable shapes.

    Subclasses set the class attribute ``kind`` to their ShapeKind.
    """

    kind: ClassVar[ShapeKind]

    @abstractmethod
    def bounding_box(self) -> BoundingBox:
        """Axis-aligned bounds of the shape."""
        pass

    @abstractmethod
    def translated(self, offset) -> Shape:
        """Copy of the shape moved by a (3,) offset."""
        pass

    @abstractmethod
    def to_svg(self, parent: Element, config: ExportConfig) -> Element:
        """Append this shape's SVG element to parent and return it."""
        pass


def _set_attributes(element: Element, attributes) -> Element:
    for name, value in attributes.items():
        element.set(name, value)
    return element


@dataclass(eq=False)
class Point(Shape):
    """
    A point, rendered as a small filled circle.

    Attributes:
        coordinates: (x, y) or (x, y, z); stored as a (3,) array
    """
    coordinates: np.ndarray

    kind: ClassVar[ShapeKind] = ShapeKind.Point

    def __post_init__(self):
        self.coordinates = as_point(self.coordinates)

    @property
    def x(self) -> float:
        """X coordinate."""
        return float(self.coordinates[0])

    @property
    def y(self) -> float:
        """Y coordinate."""
        return float(self.coordinates[1])

    @property
    def z(self) -> float:
        """Z coordinate."""
        return float(self.coordinates[2])

    def bounding_box(self) -> BoundingBox:
        return BoundingBox(self.coordinates, self.coordinates)

    def translated(self, offset) -> Point:
        return Point(self.coordinates + as_point(offset))

    def to_svg(self, parent: Element, config: ExportConfig) -> Element:
        element = SubElement(parent, "circle")
        element.set("cx", format_number(self.x, config.precision))
        element.set("cy", format_number(self.y, config.precision))
        return _set_attributes(element, config.style_for(self.kind.value))


@dataclass(eq=False)
class Line(Shape):
    """Straight line segment between two points."""
    start: np.ndarray
    end: np.ndarray

    kind: ClassVar[ShapeKind] = ShapeKind.Line

    def __post_init__(self):
        self.start = as_point(self.start)
        self.end = as_point(self.end)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points([self.start, self.end])

    def translated(self, offset) -> Line:
        offset = as_point(offset)
        return Line(self.start + offset, self.end + offset)

    def to_svg(self, parent: Element, config: ExportConfig) -> Element:
        prec = config.precision
        element = SubElement(parent, "line")
        element.set("x1", format_number(self.start[0], prec))
        element.set("y1", format_number(self.start[1], prec))
        element.set("x2", format_number(self.end[0], prec))
        element.set("y2", format_number(self.end[1], prec))
        return _set_attributes(element, config.style_for(self.kind.value))


@dataclass(eq=False)
class Circle(Shape):
    """Circle in a plane parallel to XY."""
    center: np.ndarray
    radius: float

    kind: ClassVar[ShapeKind] = ShapeKind.Circle

    def __post_init__(self):
        self.center = as_point(self.center)
        self.radius = float(self.radius)
        if self.radius < 0:
            raise ValueError(f"Circle radius must be non-negative, got {self.radius}")

    def bounding_box(self) -> BoundingBox:
        r = np.array([self.radius, self.radius, 0.0])
        return BoundingBox(self.center - r, self.center + r)

    def translated(self, offset) -> Circle:
        return Circle(self.center + as_point(offset), self.radius)

    def to_svg(self, parent: Element, config: ExportConfig) -> Element:
        prec = config.precision
        element = SubElement(parent, "circle")
        element.set("cx", format_number(self.center[0], prec))
        element.set("cy", format_number(self.center[1], prec))
        element.set("r", format_number(self.radius, prec))
        return _set_attributes(element, config.style_for(self.kind.value))


@dataclass(eq=False)
class Ellipse(Shape):
    """
    Ellipse given by its center and two semi-axis vectors.

    Attributes:
        center: Center point
        major_axis: Vector from the center to the end of the major axis
        minor_axis: Vector from the center to the end of the minor axis
    """
    center: np.ndarray
    major_axis: np.ndarray
    minor_axis: np.ndarray

    kind: ClassVar[ShapeKind] = ShapeKind.Ellipse

    def __post_init__(self):
        self.center = as_point(self.center)
        self.major_axis = as_point(self.major_axis)
        self.minor_axis = as_point(self.minor_axis)

    @property
    def major_radius(self) -> float:
        return float(np.linalg.norm(self.major_axis))

    @property
    def minor_radius(self) -> float:
        return float(np.linalg.norm(self.minor_axis))

    @property
    def rotation(self) -> float:
        """Angle of the major axis from the X axis, in degrees."""
        return math.degrees(math.atan2(self.major_axis[1], self.major_axis[0]))

    def bounding_box(self) -> BoundingBox:
        # Extent of c + cos(t) a + sin(t) b along each axis
        half = np.sqrt(self.major_axis ** 2 + self.minor_axis ** 2)
        return BoundingBox(self.center - half, self.center + half)

    def translated(self, offset) -> Ellipse:
        return Ellipse(self.center + as_point(offset),
                       self.major_axis.copy(), self.minor_axis.copy())

    def to_svg(self, parent: Element, config: ExportConfig) -> Element:
        prec = config.precision
        cx = format_number(self.center[0], prec)
        cy = format_number(self.center[1], prec)
        element = SubElement(parent, "ellipse")
        element.set("cx", cx)
        element.set("cy", cy)
        element.set("rx", format_number(self.major_radius, prec))
        element.set("ry", format_number(self.minor_radius, prec))
        element.set("transform",
                    f"rotate({format_number(self.rotation, prec)}, {cx}, {cy})")
        return _set_attributes(element, config.style_for(self.kind.value))


@dataclass(eq=False)
class Polygon(Shape):
    """Closed polygon through a sequence of vertices."""
    points: np.ndarray

    kind: ClassVar[ShapeKind] = ShapeKind.Polygon

    def __post_init__(self):
        self.points = np.array([as_point(p) for p in self.points])
        if len(self.points) < 2:
            raise ValueError("Polygon needs at least 2 vertices")

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points(self.points)

    def translated(self, offset) -> Polygon:
        return Polygon(self.points + as_point(offset))

    def to_svg(self, parent: Element, config: ExportConfig) -> Element:
        prec = config.precision
        vertices = " ".join(
            f"{format_number(p[0], prec)}, {format_number(p[1], prec)}"
            for p in self.points
        )
        element = SubElement(parent, "polygon")
        element.set("points", vertices)
        return _set_attributes(element, config.style_for(self.kind.value))


@dataclass(eq=False)
class PolyCurve(Shape):
    """
    Composite curve made of member curves, exported as one SVG group.

    Members may be any shape except points and other poly curves.
    """
    curves: List[Shape]

    kind: ClassVar[ShapeKind] = ShapeKind.PolyCurve

    def __post_init__(self):
        self.curves = list(self.curves)
        if not self.curves:
            raise ValueError("PolyCurve needs at least one curve")
        for curve in self.curves:
            if curve.kind in (ShapeKind.Point, ShapeKind.PolyCurve):
                raise ValueError(f"PolyCurve cannot contain a {curve.kind.value}")

    def bounding_box(self) -> BoundingBox:
        box = self.curves[0].bounding_box()
        for curve in self.curves[1:]:
            box = box.union(curve.bounding_box())
        return box

    def translated(self, offset) -> PolyCurve:
        return PolyCurve([c.translated(offset) for c in self.curves])

    def to_svg(self, parent: Element, config: ExportConfig) -> Element:
        group = SubElement(parent, "g")
        for curve in self.curves:
            curve.to_svg(group, config)
        return group
