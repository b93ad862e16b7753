"""
Visualization module.

Usage:
    from geomSVG.visualization import plot_decomposition

    plot_decomposition(curve, save_path="decomposition.png")
"""

from .preview import sample_curve, sample_bezier_segments, plot_decomposition

__all__ = [
    'sample_curve',
    'sample_bezier_segments',
    'plot_decomposition',
]
