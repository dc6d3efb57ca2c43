"""Tests for diagnostics module."""

import json

import pytest

from impossible_polygon.config import PolygonConfig
from impossible_polygon.diagnostics import (
    diagnostics_report,
    face_areas,
    face_signed_area,
    intersection_radii,
)
from impossible_polygon.generator import generate_construction
from impossible_polygon.models import Face, Point


def test_signed_area_square():
    square = Face(0, (Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)))
    assert face_signed_area(square) == pytest.approx(4.0)
    reversed_square = Face(0, tuple(reversed(square.points)))
    assert face_signed_area(reversed_square) == pytest.approx(-4.0)


def test_repeated_corner_adds_no_area():
    tri = Face(0, (Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)))
    assert face_signed_area(tri) == pytest.approx(0.5)


@pytest.mark.parametrize("n", [3, 6])
def test_symmetric_faces_have_equal_area(n):
    construction = generate_construction(PolygonConfig(n=n, thickness_modifier=0.5))
    areas = face_areas(construction)
    assert len(areas) == n
    assert all(a > 0 for a in areas)
    assert max(areas) == pytest.approx(min(areas), rel=1e-6)


def test_intersection_radii():
    construction = generate_construction(PolygonConfig(n=4, thickness_modifier=0.5))
    radii = intersection_radii(construction)
    assert len(radii) == 8
    assert max(radii) == pytest.approx(min(radii), rel=1e-9)


def test_diagnostics_report_smoke():
    construction = generate_construction(PolygonConfig(n=5))
    report = diagnostics_report(construction)
    assert report["n"] == 5
    assert report["intersection_count"] == 10
    assert "face_area_min" in report
    json.dumps(report)
