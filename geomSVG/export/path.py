"""
SVG path data for Bezier segment chains.

A decomposed curve becomes one path: a moveto to the start of the first
segment followed by a single curveto whose argument list holds points
1..p of every segment, in order. Only X and Y are written.

    M x0,y0 C x1,y1 x2,y2 x3,y3 x4,y4 x5,y5 x6,y6 ...
"""

import numpy as np
from typing import Sequence

from ..discretization.decomposition import decompose_nurbs_curve


def format_number(value: float, precision: int = 10) -> str:
    """
    Format a coordinate for SVG output.

    Uses `precision` significant digits with trailing zeros stripped.
    Negative zero is written as 0.
    """
    value = float(value)
    if value == 0.0:
        value = 0.0
    return f"{value:.{precision}g}"


def format_xy(point, precision: int = 10) -> str:
    """Format the X and Y of a point as 'x,y'."""
    return f"{format_number(point[0], precision)},{format_number(point[1], precision)}"


def bezier_path_data(segments: Sequence[np.ndarray], precision: int = 10) -> str:
    """
    Build path data for a chain of Bezier segments.

    Parameters:
        segments: Sequence of (p+1, d) arrays, in curve order
        precision: Significant digits per coordinate

    Returns:
        Path data string "M x,y C x,y x,y ..."
    """
    if len(segments) == 0:
        raise ValueError("Cannot build path data from an empty segment list")

    start = format_xy(segments[0][0], precision)
    coords = [format_xy(pt, precision) for segment in segments for pt in segment[1:]]
    return f"M{start} C" + " ".join(coords)


def nurbs_path_data(curve, precision: int = 10) -> str:
    """Decompose a cubic curve and build its path data."""
    return bezier_path_data(decompose_nurbs_curve(curve), precision)
