"""
Export configuration and scene files.

Both are plain JSON. A configuration file holds ExportConfig fields:

    {
      "units": "mm",
      "precision": 6,
      "viewport_width": 210,
      "styles": {"circle": {"stroke": "blue"}}
    }

Style entries are merged into the defaults of their shape kind.

A scene file lists the shapes to export:

    {
      "shapes": [
        {"type": "point", "at": [0, 0]},
        {"type": "line", "start": [0, 0], "end": [10, 5]},
        {"type": "circle", "center": [5, 5], "radius": 2},
        {"type": "ellipse", "center": [0, 0],
         "major_axis": [4, 0], "minor_axis": [0, 2]},
        {"type": "polygon", "points": [[0, 0], [4, 0], [2, 3]]},
        {"type": "nurbs", "degree": 3,
         "knots": [0, 0, 0, 0, 1, 1, 1, 1],
         "control_points": [[0, 0], [1, 2], [3, 2], [4, 0]]},
        {"type": "polycurve", "curves": [ ...line/circle/ellipse/polygon/nurbs... ]}
      ]
    }
"""

import copy
import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List

from ..exceptions import SceneFormatError


SUPPORTED_UNITS = ("em", "ex", "px", "pt", "pc", "cm", "mm", "in")


def default_styles() -> Dict[str, Dict[str, str]]:
    """Default SVG presentation attributes per shape kind."""
    return {
        "point": {"r": "1", "fill": "black"},
        "line": {"style": "stroke:black; stroke-width: 1;"},
        "ellipse": {"style": "stroke:black; stroke-width: 1;"},
        "circle": {"fill": "none", "stroke": "red", "stroke-width": "1"},
        "polygon": {"style": "fill: none; stroke-width: 1; stroke: #000000;"},
        "nurbs": {"fill": "none", "stroke": "red", "stroke-width": "1"},
    }


@dataclass
class ExportConfig:
    """
    SVG export settings.

    Attributes:
        viewport_width: Width of the SVG viewport; 0 uses the geometry width
        viewport_height: Height of the SVG viewport; 0 uses the geometry height
        units: Unit suffix for the viewport size (em, ex, px, pt, pc, cm, mm, in)
        precision: Significant digits written per coordinate
        styles: Presentation attributes per shape kind
    """
    viewport_width: float = 0.0
    viewport_height: float = 0.0
    units: str = "px"
    precision: int = 10
    styles: Dict[str, Dict[str, str]] = field(default_factory=default_styles)

    def __post_init__(self):
        self.precision = int(self.precision)
        if self.units not in SUPPORTED_UNITS:
            raise ValueError(
                f"Unsupported units '{self.units}'. "
                f"Accepted units are {', '.join(SUPPORTED_UNITS)}."
            )
        if self.precision < 1:
            raise ValueError("precision must be at least 1")
        if self.viewport_width < 0 or self.viewport_height < 0:
            raise ValueError("Viewport size must be non-negative")

        merged = default_styles()
        for kind, attributes in self.styles.items():
            merged.setdefault(kind, {}).update(
                {str(k): str(v) for k, v in attributes.items()})
        self.styles = merged

    def style_for(self, kind: str) -> Dict[str, str]:
        """Copy of the presentation attributes for a shape kind."""
        return dict(self.styles.get(kind, {}))

    def replace(self, **changes) -> "ExportConfig":
        """Copy of this configuration with some fields changed."""
        values = {f.name: copy.deepcopy(getattr(self, f.name)) for f in fields(self)}
        values.update(changes)
        return ExportConfig(**values)


def _read_json(filename) -> Any:
    path = Path(filename)
    with open(path, 'r', encoding='utf-8') as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as exc:
            raise SceneFormatError(f"{path}: invalid JSON ({exc})") from exc


def config_from_dict(data: Dict[str, Any]) -> ExportConfig:
    """
    Build an ExportConfig from a dictionary.

    Raises:
        SceneFormatError: For unknown keys, malformed styles or a non-object input
    """
    if not isinstance(data, dict):
        raise SceneFormatError("Configuration must be a JSON object")
    known = {f.name for f in fields(ExportConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise SceneFormatError(f"Unknown configuration keys: {', '.join(unknown)}")
    styles = data.get("styles", {})
    if not isinstance(styles, dict) or not all(
            isinstance(attributes, dict) for attributes in styles.values()):
        raise SceneFormatError(
            "Configuration 'styles' must map shape kinds to attribute objects")
    return ExportConfig(**data)


def load_config(filename) -> ExportConfig:
    """
    Load export configuration from a JSON file.

    Parameters:
        filename: Path to the JSON file

    Returns:
        ExportConfig with file values over the defaults
    """
    return config_from_dict(_read_json(filename))


def _require(entry: Dict[str, Any], key: str) -> Any:
    if key not in entry:
        raise SceneFormatError(
            f"Shape of type '{entry.get('type')}' is missing required key '{key}'")
    return entry[key]


def shape_from_dict(entry: Dict[str, Any]):
    """
    Build one shape from its scene-file description.

    Raises:
        SceneFormatError: For unknown types or missing keys
    """
    # Imported here to avoid a circular import (geometry -> export -> io)
    from ..discretization.knot_vector import KnotVector
    from ..geometry.nurbs import NURBSCurve
    from ..geometry.shapes import Point, Line, Circle, Ellipse, Polygon, PolyCurve

    if not isinstance(entry, dict) or "type" not in entry:
        raise SceneFormatError(f"Shape entry must be an object with a 'type': {entry!r}")

    kind = entry["type"]
    if kind == "point":
        return Point(_require(entry, "at"))
    if kind == "line":
        return Line(_require(entry, "start"), _require(entry, "end"))
    if kind == "circle":
        return Circle(_require(entry, "center"), float(_require(entry, "radius")))
    if kind == "ellipse":
        return Ellipse(_require(entry, "center"),
                       _require(entry, "major_axis"),
                       _require(entry, "minor_axis"))
    if kind == "polygon":
        return Polygon(_require(entry, "points"))
    if kind == "nurbs":
        kv = KnotVector(_require(entry, "knots"), int(_require(entry, "degree")))
        return NURBSCurve(kv, _require(entry, "control_points"))
    if kind == "polycurve":
        return PolyCurve([shape_from_dict(e) for e in _require(entry, "curves")])
    raise SceneFormatError(f"Unknown shape type '{kind}'")


def load_scene(filename) -> List:
    """
    Load the shapes of a JSON scene file.

    Parameters:
        filename: Path to the JSON file

    Returns:
        List of shapes in file order
    """
    data = _read_json(filename)
    if not isinstance(data, dict) or "shapes" not in data:
        raise SceneFormatError("Scene file must be an object with a 'shapes' list")
    return [shape_from_dict(entry) for entry in data["shapes"]]
