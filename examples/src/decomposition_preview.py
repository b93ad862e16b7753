#!/usr/bin/env python3
"""
Example: Bezier decomposition of a cubic B-spline curve.

Builds a curve with simple and double interior knots, prints its Bezier
segments, checks them against direct B-spline evaluation and plots the
result.

Usage:
    ./examples/src/decomposition_preview.py            # interactive plot
    ./examples/src/decomposition_preview.py --save     # writes PNG
"""

import sys
from pathlib import Path

# Use Agg backend if --save is specified
if '--save' in sys.argv:
    import matplotlib
    matplotlib.use('Agg')

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from geomSVG.discretization.knot_vector import KnotVector
from geomSVG.discretization.bezier import eval_bezier
from geomSVG.geometry.nurbs import NURBSCurve
from geomSVG.visualization import plot_decomposition


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Preview Bezier decomposition")
    parser.add_argument("--save", action="store_true",
                        help="Save figure to decomposition.png")
    args = parser.parse_args()

    kv = KnotVector([0, 0, 0, 0, 0.2, 0.4, 0.4, 0.7, 1, 1, 1, 1], degree=3)
    curve = NURBSCurve(kv, np.array([
        [0.0, 0.0], [1.0, 2.0], [2.5, 2.5], [3.0, 0.5],
        [4.0, -1.0], [5.0, 1.0], [6.0, 2.0], [7.0, 0.0],
    ]))

    segments = curve.bezier_segments()

    print("=" * 60)
    print("Bezier decomposition")
    print("=" * 60)
    print(f"Knots: {curve.knots}")
    print(f"Segments: {len(segments)}")
    for i, Q in enumerate(segments):
        print(f"  [{i}] " + "  ".join(f"({x:.4f}, {y:.4f})" for x, y in Q))

    # Compare segment midpoints with direct evaluation
    max_error = 0.0
    for (xi_start, xi_end), Q in zip(kv.spans, segments):
        direct = curve.eval_point(0.5 * (xi_start + xi_end))
        max_error = max(max_error, np.max(np.abs(eval_bezier(Q, 0.5) - direct)))
    print(f"Max midpoint deviation: {max_error:.3e}")

    plot_decomposition(curve,
                       save_path="decomposition.png" if args.save else None,
                       show=not args.save)


if __name__ == "__main__":
    main()
