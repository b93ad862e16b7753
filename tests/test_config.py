"""
Tests for export configuration and scene files.
"""

import json
import pytest
import numpy as np
from pathlib import Path
from numpy.testing import assert_array_almost_equal

from geomSVG.io.config import (
    ExportConfig, default_styles, config_from_dict, load_config,
    shape_from_dict, load_scene,
)
from geomSVG.geometry.primitives import ShapeKind
from geomSVG.exceptions import SceneFormatError

EXAMPLE_SCENE = Path(__file__).parent.parent / "examples" / "data" / "scene.json"


def _write_json(path: Path, data) -> Path:
    with open(path, 'w') as f:
        json.dump(data, f)
    return path


class TestExportConfig:

    def test_defaults(self):
        config = ExportConfig()
        assert config.units == "px"
        assert config.viewport_width == 0.0
        assert config.precision == 10
        assert config.styles == default_styles()

    def test_style_merge(self):
        config = ExportConfig(styles={"circle": {"stroke": "blue"}})
        assert config.style_for("circle") == {
            "fill": "none", "stroke": "blue", "stroke-width": "1"}
        assert config.style_for("line") == default_styles()["line"]

    def test_style_for_returns_copy(self):
        config = ExportConfig()
        config.style_for("circle")["stroke"] = "green"
        assert config.style_for("circle")["stroke"] == "red"

    @pytest.mark.parametrize("units", ["em", "ex", "px", "pt", "pc", "cm", "mm", "in"])
    def test_supported_units(self, units):
        assert ExportConfig(units=units).units == units

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            ExportConfig(units="km")
        with pytest.raises(ValueError):
            ExportConfig(precision=0)
        with pytest.raises(ValueError):
            ExportConfig(viewport_width=-1)

    def test_replace(self):
        config = ExportConfig(units="mm")
        changed = config.replace(precision=4)
        assert changed.units == "mm"
        assert changed.precision == 4
        assert config.precision == 10


class TestLoadConfig:

    def test_load(self, tmp_path):
        path = _write_json(tmp_path / "config.json", {
            "units": "mm", "precision": 6, "viewport_width": 210,
            "styles": {"nurbs": {"stroke": "#0000ff"}},
        })
        config = load_config(path)

        assert config.units == "mm"
        assert config.precision == 6
        assert config.viewport_width == 210
        assert config.style_for("nurbs")["stroke"] == "#0000ff"

    def test_unknown_key(self):
        with pytest.raises(SceneFormatError):
            config_from_dict({"unit": "mm"})

    def test_not_an_object(self):
        with pytest.raises(SceneFormatError):
            config_from_dict(["mm"])

    @pytest.mark.parametrize("styles", [
        {"circle": "blue"},
        ["circle"],
        {"nurbs": ["stroke", "red"]},
    ])
    def test_malformed_styles(self, styles):
        with pytest.raises(SceneFormatError, match="styles"):
            config_from_dict({"styles": styles})

    def test_utf8_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_bytes(json.dumps(
            {"styles": {"polygon": {"stroke": "café"}}},
            ensure_ascii=False).encode("utf-8"))

        config = load_config(path)
        assert config.style_for("polygon")["stroke"] == "café"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{units: mm")
        with pytest.raises(SceneFormatError):
            load_config(path)


class TestScene:

    def test_each_shape_type(self):
        assert shape_from_dict({"type": "point", "at": [1, 2]}).kind is ShapeKind.Point
        assert shape_from_dict(
            {"type": "line", "start": [0, 0], "end": [1, 1]}).kind is ShapeKind.Line
        assert shape_from_dict(
            {"type": "circle", "center": [0, 0], "radius": 2}).kind is ShapeKind.Circle
        assert shape_from_dict(
            {"type": "ellipse", "center": [0, 0], "major_axis": [2, 0],
             "minor_axis": [0, 1]}).kind is ShapeKind.Ellipse
        assert shape_from_dict(
            {"type": "polygon", "points": [[0, 0], [1, 0], [0, 1]]}).kind is ShapeKind.Polygon

    def test_nurbs_entry(self):
        curve = shape_from_dict({
            "type": "nurbs", "degree": 3,
            "knots": [0, 0, 0, 0, 0.5, 1, 1, 1, 1],
            "control_points": [[0, 0], [1, 2], [2, 2], [3, 0], [4, 1]],
        })
        assert curve.kind is ShapeKind.NURBSCurve
        assert curve.degree == 3
        assert len(curve.bezier_segments()) == 2

    def test_polycurve_entry(self):
        poly = shape_from_dict({"type": "polycurve", "curves": [
            {"type": "line", "start": [0, 0], "end": [1, 0]},
            {"type": "circle", "center": [2, 0], "radius": 1},
        ]})
        assert poly.kind is ShapeKind.PolyCurve
        assert len(poly.curves) == 2

    def test_unknown_type(self):
        with pytest.raises(SceneFormatError):
            shape_from_dict({"type": "spiral"})

    def test_missing_key(self):
        with pytest.raises(SceneFormatError, match="radius"):
            shape_from_dict({"type": "circle", "center": [0, 0]})

    def test_missing_type(self):
        with pytest.raises(SceneFormatError):
            shape_from_dict({"center": [0, 0]})

    def test_scene_without_shapes(self, tmp_path):
        path = _write_json(tmp_path / "scene.json", {"geometry": []})
        with pytest.raises(SceneFormatError):
            load_scene(path)

    def test_example_scene(self):
        shapes = load_scene(EXAMPLE_SCENE)

        kinds = [s.kind for s in shapes]
        assert len(shapes) == 8
        assert kinds.count(ShapeKind.Point) == 2
        assert kinds[-1] is ShapeKind.PolyCurve
        assert_array_almost_equal(shapes[0].coordinates, [0.0, 0.0, 0.0])

    def test_example_scene_exports(self, tmp_path):
        from geomSVG.export.svg import export_svg

        path = export_svg(load_scene(EXAMPLE_SCENE), tmp_path, "scene")
        assert path.read_text(encoding="utf-8").count("<g") == 7
