"""
Preview of a curve and its Bezier decomposition.

Draws the sampled curve, its B-spline control polygon and the control
polygons of the Bezier segments, so a decomposition can be checked by eye
before exporting.

The sampling functions have no matplotlib dependency; matplotlib is only
imported when plotting.
"""

import numpy as np
from typing import Optional, Tuple

from ..discretization.bezier import eval_bezier
from ..geometry.nurbs import NURBSCurve


def sample_curve(curve: NURBSCurve, n_points: int = 200) -> np.ndarray:
    """
    Sample a curve uniformly in its parameter domain.

    Returns:
        (n_points, d) array of curve points
    """
    xi_start, xi_end = curve.knot_vector.domain
    return np.array([curve.eval_point(xi)
                     for xi in np.linspace(xi_start, xi_end, n_points)])


def sample_bezier_segments(curve: NURBSCurve,
                           n_per_segment: int = 50) -> np.ndarray:
    """
    Sample the Bezier decomposition of a curve.

    Shared segment end points are included once.

    Returns:
        (n_segments * (n_per_segment - 1) + 1, d) array
    """
    t_values = np.linspace(0.0, 1.0, n_per_segment)
    points = []
    for i, Q in enumerate(curve.bezier_segments()):
        ts = t_values if i == 0 else t_values[1:]
        points.extend(eval_bezier(Q, t) for t in ts)
    return np.array(points)


def plot_decomposition(curve: NURBSCurve,
                       n_per_segment: int = 50,
                       figsize: Tuple[float, float] = (8, 6),
                       save_path: Optional[str] = None,
                       show: bool = False):
    """
    Plot a cubic curve with its Bezier segments.

    Parameters:
        curve: Degree 3 curve
        n_per_segment: Sample points per Bezier segment
        figsize: Figure size
        save_path: If provided, save figure to this path
        show: Whether to call plt.show()

    Returns:
        matplotlib Figure object
    """
    import matplotlib.pyplot as plt

    segments = curve.bezier_segments()
    cps = curve.control_points
    samples = sample_bezier_segments(curve, n_per_segment)

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(cps[:, 0], cps[:, 1], 'o--', color='gray', lw=0.8,
            label='control polygon')

    colors = plt.cm.tab10(np.linspace(0, 1, max(len(segments), 2)))
    for i, Q in enumerate(segments):
        ax.plot(Q[:, 0], Q[:, 1], 's:', color=colors[i % len(colors)], lw=0.8,
                label='Bezier control points' if i == 0 else None)

    ax.plot(samples[:, 0], samples[:, 1], '-', color='red', lw=1.5, label='curve')
    ax.set_aspect('equal')
    ax.set_title(f'Bezier decomposition ({len(segments)} segments)')
    ax.legend()
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150)
        print(f"Saved: {save_path}")

    if show:
        plt.show()

    return fig
