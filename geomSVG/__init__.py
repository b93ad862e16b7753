"""
geomSVG - Export of geometric primitives to SVG

Writes points, lines, circles, ellipses, polygons, B-spline curves and
composite curves to SVG documents. B-spline curves are converted to
chains of cubic Bezier segments by knot insertion, which is the only
curve type SVG paths understand.

Key modules:
- discretization: Knot vectors, Bezier decomposition, Bernstein basis
- geometry: Shapes, B-spline curves, bounding boxes
- export: SVG documents and path data
- io: JSON export configuration and scene files
- visualization: matplotlib preview of decompositions

Quick start:
    from geomSVG.discretization.knot_vector import KnotVector
    from geomSVG.geometry import NURBSCurve, Circle
    from geomSVG.export import export_svg

    kv = KnotVector([0, 0, 0, 0, 0.5, 1, 1, 1, 1], degree=3)
    curve = NURBSCurve(kv, [[0, 0], [1, 2], [2, 2], [3, 0], [4, 1]])

    # Cubic Bezier segments, each a (4, 2) array
    segments = curve.bezier_segments()

    export_svg([curve, Circle([2, 1], 0.5)], "out", "drawing")
"""

__version__ = "0.1.0"

from .exceptions import (
    GeomSVGError,
    UnsupportedDegreeError,
    InvalidFileNameError,
    SceneFormatError,
)
from .discretization.knot_vector import KnotVector, make_open_knot_vector
from .discretization.decomposition import decompose_curve, decompose_nurbs_curve
from .geometry import (
    BoundingBox,
    compute_bounding_box,
    Point,
    Line,
    Circle,
    Ellipse,
    Polygon,
    PolyCurve,
    NURBSCurve,
)
from .export import SVGExporter, export_svg
from .io.config import ExportConfig, load_config, load_scene
