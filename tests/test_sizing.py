"""Tests for the outer-polygon sizing search."""

import logging

import pytest

from impossible_polygon import sizing
from impossible_polygon.construction import ConstructionError, build_construction
from impossible_polygon.sizing import (
    SEARCH_START,
    circumscribing_side_len,
    constructs,
    find_side_len_bracket,
    get_outer_side_len,
    recommended_min,
)


class TestBracket:
    @pytest.mark.parametrize("n", [3, 4, 5, 6, 8])
    def test_bracket_ends_construct(self, n):
        low, high = find_side_len_bracket(n, 0.5)
        assert SEARCH_START <= low <= high <= circumscribing_side_len(n)
        assert constructs(n, low, 0.5)
        assert constructs(n, high, 0.5)

    def test_triangle_circumscribing_side(self):
        assert circumscribing_side_len(3) == pytest.approx(20.0)

    def test_constructs_oracle(self):
        assert not constructs(3, 1.0, 0.5)
        assert not constructs(3, 100.0, 0.5)

    def test_debug_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="impossible_polygon.sizing"):
            find_side_len_bracket(3, 0.5)
        assert any("lower bound" in r.message for r in caplog.records)
        assert any("upper bound" in r.message for r in caplog.records)

    def test_lower_bound_gives_up_after_cap(self, monkeypatch):
        calls = []

        def never(n, side_len, perspective_modifier):
            calls.append(side_len)
            return False

        monkeypatch.setattr(sizing, "constructs", never)
        monkeypatch.setattr(sizing, "MAX_SEARCH_STEPS", 10)
        with pytest.raises(ConstructionError):
            find_side_len_bracket(3, 0.5)
        assert len(calls) == 10
        assert calls[0] == SEARCH_START

    def test_default_cap_is_finite(self, monkeypatch):
        monkeypatch.setattr(sizing, "constructs", lambda n, side_len, p: False)
        with pytest.raises(ConstructionError, match="n=4"):
            find_side_len_bracket(4, 0.5)

    def test_crossed_bounds(self, monkeypatch):
        # Only the first lower-end attempt succeeds, so the upper end
        # walks down past it.
        results = iter([True])
        monkeypatch.setattr(sizing, "constructs", lambda n, side_len, p: next(results, False))
        with pytest.raises(ConstructionError):
            find_side_len_bracket(3, 0.5)


class TestOuterSideLen:
    def test_recommended_min_table(self):
        assert recommended_min(3) == 0.5
        assert recommended_min(4) == 0.48
        assert recommended_min(5) == 0.26
        assert recommended_min(6) == 0.0
        assert recommended_min(12) == 0.0

    @pytest.mark.parametrize("n", [3, 4, 5, 6])
    def test_interpolates_within_bracket(self, n):
        low, high = find_side_len_bracket(n, 0.5)
        rec = recommended_min(n)
        assert get_outer_side_len(n, 0.0, 0.5) == pytest.approx(low + (high - low) * rec)
        assert get_outer_side_len(n, 1.0, 0.5) == pytest.approx(high)

    def test_monotonic_in_thickness(self):
        sides = [get_outer_side_len(6, t, 0.5) for t in (0.0, 0.25, 0.5, 0.75, 1.0)]
        assert sides == sorted(sides)

    @pytest.mark.parametrize("n", [3, 4, 5, 6, 7])
    @pytest.mark.parametrize("thickness", [0.0, 0.5, 1.0])
    def test_result_constructs(self, n, thickness):
        side_len = get_outer_side_len(n, thickness, 0.5)
        construction = build_construction(n, side_len, 0.5)
        assert len(construction.faces) == n

    @pytest.mark.parametrize("thickness", [-0.1, 1.5, float("nan")])
    def test_thickness_out_of_range(self, thickness):
        with pytest.raises(ValueError):
            get_outer_side_len(3, thickness, 0.5)
