"""Tests for file writers and the geometry export."""

import json
from pathlib import Path

import jsonschema
import pytest

from impossible_polygon import generate
from impossible_polygon.config import PolygonConfig
from impossible_polygon.generator import generate_construction
from impossible_polygon.io import (
    export_construction_json,
    export_construction_payload,
    save_svg,
    validate_construction_payload,
)

SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schemas" / "construction.schema.json"
PALETTE = ["#FF0000", "#00FF00", "#0000FF"]


@pytest.fixture(scope="module")
def construction():
    return generate_construction(PolygonConfig(n=4, thickness_modifier=0.5, color_palette=PALETTE))


class TestPayload:
    def test_structure(self, construction):
        payload = export_construction_payload(construction, PALETTE)
        assert payload["metadata"]["n"] == 4
        assert payload["metadata"]["face_count"] == 4
        assert len(payload["intersections"]) == 8
        assert len(payload["shifted_lines"]) == 4
        assert [f["color"] for f in payload["faces"]] == PALETTE + PALETTE[:1]

    def test_validates(self, construction):
        payload = export_construction_payload(construction, PALETTE)
        assert validate_construction_payload(payload) == []

    def test_detects_problems(self, construction):
        payload = export_construction_payload(construction, PALETTE)
        del payload["shifted_lines"]
        payload["faces"].pop()
        payload["intersections"].pop()
        errors = validate_construction_payload(payload)
        assert any("shifted_lines" in e for e in errors)
        assert any("face_count" in e for e in errors)
        assert any("intersections" in e for e in errors)

    def test_bad_points(self, construction):
        payload = export_construction_payload(construction, PALETTE)
        payload["faces"][0]["points"][0] = [1.0]
        assert validate_construction_payload(payload)

    def test_empty_palette(self, construction):
        with pytest.raises(ValueError):
            export_construction_payload(construction, [])

    def test_json_schema(self, construction):
        schema = json.loads(SCHEMA_PATH.read_text())
        payload = export_construction_payload(construction, PALETTE)
        jsonschema.validate(json.loads(json.dumps(payload)), schema)


class TestFiles:
    def test_export_json(self, construction, tmp_path):
        out = export_construction_json(construction, PALETTE, tmp_path / "out" / "poly.json")
        data = json.loads(out.read_text(encoding="utf-8"))
        assert validate_construction_payload(data) == []

    def test_export_json_against_schema(self, construction, tmp_path):
        schema = json.loads(SCHEMA_PATH.read_text())
        out = export_construction_json(construction, PALETTE, tmp_path / "poly.json")
        jsonschema.validate(json.loads(out.read_text()), schema)

    def test_save_svg(self, tmp_path):
        svg = generate(3, False, 0.0, 0.5, PALETTE)
        out = save_svg(svg, tmp_path / "image.svg")
        assert out.read_text(encoding="utf-8") == svg
