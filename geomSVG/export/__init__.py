"""
Export module: SVG documents and path data.

Usage:
    from geomSVG.export import export_svg

    export_svg(shapes, "out", "drawing", units="mm")
"""

from .path import format_number, format_xy, bezier_path_data, nurbs_path_data
from .svg import (
    SVGExporter,
    export_svg,
    validate_file_name,
    group_shapes,
)

__all__ = [
    'format_number',
    'format_xy',
    'bezier_path_data',
    'nurbs_path_data',
    'SVGExporter',
    'export_svg',
    'validate_file_name',
    'group_shapes',
]
