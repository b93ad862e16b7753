"""
SVG export of shapes.

The document layout is:

    <?xml version="1.0" encoding="utf-8"?>
    <!-- Generator: geomSVG ... -->
    <!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" ...>
    <svg version="1.1" ... width="..." height="..." viewBox="0 0 W H">
      <g> points </g>
      <g> lines </g>
      <g> ellipses </g>
      <g> circles </g>
      <g> polygons </g>
      <g> NURBS curves </g>
      <g> members of poly curve 1 </g>
      ...
    </svg>

Kinds without shapes produce no group. All shapes are first moved so that
the bounding box starts at the origin in X and Y; the viewBox then spans
the bounding box width and height.

Only the XY projection is written.
"""

import re
from pathlib import Path
from typing import Dict, List, Optional, Sequence
from xml.etree.ElementTree import Element, SubElement, tostring
from xml.dom import minidom

import numpy as np

from ..exceptions import InvalidFileNameError
from ..geometry.primitives import BoundingBox, ShapeKind, compute_bounding_box
from ..io.config import ExportConfig
from .path import format_number


SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
GENERATOR_COMMENT = "<!-- Generator: geomSVG export -->"
SVG_DOCTYPE = ('<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
               '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">')

# Kinds collected into one shared group, in output order
GROUPED_KINDS = (
    ShapeKind.Point,
    ShapeKind.Line,
    ShapeKind.Ellipse,
    ShapeKind.Circle,
    ShapeKind.Polygon,
    ShapeKind.NURBSCurve,
)

_INVALID_FILE_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
_RESERVED_FILE_NAMES = (
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)


def validate_file_name(file_name: str) -> None:
    """
    Check that file_name is usable as a file name on all platforms.

    Raises:
        InvalidFileNameError: For empty names, names containing path
            separators or other forbidden characters, and reserved device
            names such as CON
    """
    if not file_name or not file_name.strip():
        raise InvalidFileNameError(file_name, "name is empty")
    if _INVALID_FILE_CHARS.search(file_name):
        raise InvalidFileNameError(file_name, "name contains invalid characters")
    if file_name.split(".")[0].upper() in _RESERVED_FILE_NAMES:
        raise InvalidFileNameError(file_name, "name is a reserved device name")


def group_shapes(shapes: Sequence) -> Dict[ShapeKind, List]:
    """Bucket shapes by kind, keeping input order within each kind."""
    groups = {kind: [] for kind in ShapeKind}
    for shape in shapes:
        groups[shape.kind].append(shape)
    return groups


class SVGExporter:
    """
    Builds and writes SVG documents for a list of shapes.

    Usage:
        exporter = SVGExporter(ExportConfig(units="mm"))
        root = exporter.build(shapes)
        exporter.write(shapes, "out", "drawing")
    """

    def __init__(self, config: Optional[ExportConfig] = None):
        self.config = config if config is not None else ExportConfig()

    def build(self, shapes: Sequence) -> Element:
        """
        Build the <svg> element for shapes.

        Input shapes are not modified.

        Raises:
            ValueError: If shapes is empty
            UnsupportedDegreeError: If a NURBS curve is not cubic
        """
        shapes = list(shapes)
        box = compute_bounding_box(shapes)
        offset = np.array([-box.min_point[0], -box.min_point[1], 0.0])
        moved = [shape.translated(offset) for shape in shapes]

        svg = self._svg_root(box)
        groups = group_shapes(moved)

        for kind in GROUPED_KINDS:
            if groups[kind]:
                group = SubElement(svg, "g")
                for shape in groups[kind]:
                    shape.to_svg(group, self.config)

        for poly_curve in groups[ShapeKind.PolyCurve]:
            poly_curve.to_svg(svg, self.config)

        return svg

    def _svg_root(self, box: BoundingBox) -> Element:
        cfg = self.config
        prec = cfg.precision
        width = cfg.viewport_width if cfg.viewport_width != 0 else box.width
        height = cfg.viewport_height if cfg.viewport_height != 0 else box.height

        svg = Element("svg")
        svg.set("version", "1.1")
        svg.set("xmlns", SVG_NAMESPACE)
        svg.set("xmlns:xlink", XLINK_NAMESPACE)
        svg.set("width", f"{format_number(width, prec)}{cfg.units}")
        svg.set("height", f"{format_number(height, prec)}{cfg.units}")
        svg.set("viewBox", f"0 0 {format_number(box.width, prec)} "
                           f"{format_number(box.height, prec)}")
        svg.set("xml:space", "preserve")
        return svg

    def to_string(self, shapes: Sequence) -> str:
        """Complete SVG document (header and body) as a string."""
        rough_string = tostring(self.build(shapes), 'utf-8')
        reparsed = minidom.parseString(rough_string)
        body = reparsed.documentElement.toprettyxml(indent="  ")
        return "\n".join([XML_DECLARATION, GENERATOR_COMMENT, SVG_DOCTYPE, body])

    def write(self, shapes: Sequence, export_location, file_name: str) -> Path:
        """
        Write shapes to <export_location>/<file_name>.svg.

        The document is built completely before the file is opened, so a
        failing shape leaves no file behind.

        Returns:
            Path of the written file
        """
        validate_file_name(file_name)
        document = self.to_string(shapes)

        path = Path(export_location) / f"{file_name}.svg"
        with open(path, 'w', encoding='utf-8') as f:
            f.write(document)

        print(f"Exported SVG file: {path}")
        return path


def export_svg(shapes: Sequence,
               export_location,
               file_name: str,
               viewport_width: Optional[float] = None,
               viewport_height: Optional[float] = None,
               units: Optional[str] = None,
               config: Optional[ExportConfig] = None) -> Path:
    """
    Export shapes as an SVG file.

    Supported shapes are Point, Line, Circle, Ellipse, Polygon, PolyCurve
    and NURBSCurve (degree 3 only). The default viewport size is the
    extent of the geometry along X and Y.

    Parameters:
        shapes: Shapes to export
        export_location: Existing directory to write into
        file_name: File name without the .svg extension
        viewport_width: Viewport width; 0 uses the geometry width
        viewport_height: Viewport height; 0 uses the geometry height
        units: One of em, ex, px, pt, pc, cm, mm, in (default px)
        config: Base configuration; explicit arguments override it

    Returns:
        Path of the written file
    """
    config = config if config is not None else ExportConfig()
    changes = {}
    if viewport_width is not None:
        changes["viewport_width"] = viewport_width
    if viewport_height is not None:
        changes["viewport_height"] = viewport_height
    if units is not None:
        changes["units"] = units
    if changes:
        config = config.replace(**changes)

    return SVGExporter(config).write(shapes, export_location, file_name)
