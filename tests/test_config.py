"""Tests for configuration and palette parsing."""

import pytest

from impossible_polygon.config import PASTEL, PRIMARY, PolygonConfig, parse_palette


class TestParsePalette:
    def test_preset(self):
        assert parse_palette("primary") == list(PRIMARY)
        assert parse_palette("pastel") == list(PASTEL)

    def test_json_array(self):
        assert parse_palette('["#fff", "#000"]') == ["#fff", "#000"]

    def test_sequence(self):
        assert parse_palette(("red", "blue")) == ["red", "blue"]

    def test_invalid_json(self):
        with pytest.raises(ValueError):
            parse_palette("#fff, #000")

    def test_json_object(self):
        with pytest.raises(ValueError):
            parse_palette('{"a": "#fff"}')

    def test_non_string_entries(self):
        with pytest.raises(ValueError):
            parse_palette([1, 2, 3])

    def test_json_string_scalar(self):
        with pytest.raises(ValueError):
            parse_palette('"#fff"')


class TestPolygonConfig:
    def test_defaults_valid(self):
        config = PolygonConfig()
        assert config.n == 3
        assert list(config.color_palette) == list(PRIMARY)
        assert config.validate() == []

    def test_collects_all_errors(self):
        config = PolygonConfig(n=2, thickness_modifier=2.0, color_palette=[])
        assert len(config.validate()) == 3

    def test_check_raises(self):
        with pytest.raises(ValueError, match="thickness_modifier"):
            PolygonConfig(thickness_modifier=-1.0).check()
