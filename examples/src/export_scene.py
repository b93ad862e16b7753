#!/usr/bin/env python3
"""
Example: export a JSON scene to SVG.

Reads a scene file (see geomSVG.io.config for the format), optionally an
export configuration, and writes <output-dir>/<name>.svg.

Usage:
    ./examples/src/export_scene.py examples/data/scene.json -o . -n scene
    ./examples/src/export_scene.py scene.json --units mm --width 210
"""

import sys
from pathlib import Path

# Add project root to path (two levels up from examples/src/)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from geomSVG.exceptions import GeomSVGError
from geomSVG.geometry.primitives import compute_bounding_box
from geomSVG.io.config import ExportConfig, load_config, load_scene
from geomSVG.export.svg import export_svg


def run(scene_file: str,
        output_dir: str = ".",
        name: str = "scene",
        config_file: str = None,
        width: float = None,
        height: float = None,
        units: str = None,
        verbose: bool = True):
    """
    Export a scene file.

    Returns:
        Path of the written SVG file
    """
    shapes = load_scene(scene_file)
    config = load_config(config_file) if config_file else ExportConfig()

    if verbose:
        box = compute_bounding_box(shapes)
        print("=" * 60)
        print("geomSVG scene export")
        print("=" * 60)
        print(f"Scene: {scene_file}")
        print(f"Shapes: {len(shapes)}")
        print(f"Bounds: {box.width:g} x {box.height:g}")

    return export_svg(shapes, output_dir, name,
                      viewport_width=width, viewport_height=height,
                      units=units, config=config)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Export a JSON scene to SVG")
    parser.add_argument("scene", help="Scene JSON file")
    parser.add_argument("--output-dir", "-o", default=".",
                        help="Directory for the SVG file (default: .)")
    parser.add_argument("--name", "-n", default="scene",
                        help="File name without extension (default: scene)")
    parser.add_argument("--config", "-c", default=None,
                        help="Export configuration JSON file")
    parser.add_argument("--width", type=float, default=None,
                        help="Viewport width (default: geometry width)")
    parser.add_argument("--height", type=float, default=None,
                        help="Viewport height (default: geometry height)")
    parser.add_argument("--units", default=None,
                        help="Viewport units: em, ex, px, pt, pc, cm, mm, in")

    args = parser.parse_args()

    try:
        run(args.scene, args.output_dir, args.name, args.config,
            args.width, args.height, args.units)
    except (GeomSVGError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
