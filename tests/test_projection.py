"""Deterministic tests for the SD projection ladders.

Same range in = same ladder out, always.
"""

import pytest

from rangeforge.engine.errors import InvalidInput
from rangeforge.engine.models import AnchorMode
from rangeforge.engine.projection import (
    anchor_mode_for,
    calculate_sd_from_equilibrium,
    calculate_sd_levels,
    project,
)
from rangeforge.engine.range_builder import build_range

_RANGES = [
    (1.1650, 1.1620, "EURUSD"),
    (1.3450, 1.3420, "GBPUSD"),
    (148.70, 148.30, "USDJPY"),
    (0.66012, 0.65874, "AUDUSD"),
    (1.00003, 1.00001, "EURUSD"),
]


# ── Extremity-anchored ───────────────────────────────────────────────────


class TestExtremityLadder:
    def test_worked_example(self):
        """30-pip EUR/USD range → +1 SD 1.1680, -4 SD 1.1500."""
        levels = calculate_sd_levels(build_range(1.1650, 1.1620, "EURUSD"))
        assert levels.sd1_high == pytest.approx(1.1680)
        assert levels.sd2_high == pytest.approx(1.1710)
        assert levels.sd3_high == pytest.approx(1.1740)
        assert levels.sd4_high == pytest.approx(1.1770)
        assert levels.sd1_low == pytest.approx(1.1590)
        assert levels.sd4_low == pytest.approx(1.1500)
        assert levels.mode is AnchorMode.EXTREMITY

    @pytest.mark.parametrize("high,low,pair", _RANGES)
    def test_sd1_is_one_range_beyond_extremes(self, high, low, pair):
        rd = build_range(high, low, pair)
        levels = calculate_sd_levels(rd)
        assert levels.sd1_high == rd.high + rd.range
        assert levels.sd1_low == rd.low - rd.range

    @pytest.mark.parametrize("high,low,pair", _RANGES)
    def test_ladder_is_strictly_ordered(self, high, low, pair):
        levels = calculate_sd_levels(build_range(high, low, pair))
        h1, h2, h3, h4 = levels.highs
        l1, l2, l3, l4 = levels.lows
        assert high < h1 < h2 < h3 < h4
        assert low > l1 > l2 > l3 > l4


# ── Equilibrium-anchored ─────────────────────────────────────────────────


class TestEquilibriumLadder:
    @pytest.mark.parametrize("high,low,pair", _RANGES)
    def test_extremes_are_the_two_sd_points(self, high, low, pair):
        rd = build_range(high, low, pair)
        levels = calculate_sd_from_equilibrium(rd)
        assert levels.sd2_high == rd.high
        assert levels.sd2_low == rd.low

    @pytest.mark.parametrize("high,low,pair", _RANGES)
    def test_ladder_is_centred_on_equilibrium(self, high, low, pair):
        rd = build_range(high, low, pair)
        levels = calculate_sd_from_equilibrium(rd)
        for n, (up, down) in enumerate(zip(levels.highs, levels.lows), 1):
            assert up == pytest.approx(rd.equilibrium + n * rd.range / 4)
            assert down == pytest.approx(rd.equilibrium - n * rd.range / 4)

    @pytest.mark.parametrize("high,low,pair", _RANGES)
    def test_ladder_is_strictly_ordered(self, high, low, pair):
        rd = build_range(high, low, pair)
        levels = calculate_sd_from_equilibrium(rd)
        h1, h2, h3, h4 = levels.highs
        l1, l2, l3, l4 = levels.lows
        assert rd.equilibrium < h1 < h2 < h3 < h4
        assert rd.equilibrium > l1 > l2 > l3 > l4

    def test_usdjpy_flout_example(self):
        """USD/JPY 148.70/148.30 → equilibrium 148.50, +4 SD 148.90."""
        levels = calculate_sd_from_equilibrium(build_range(148.70, 148.30, "USDJPY"))
        assert levels.sd1_high == pytest.approx(148.60)
        assert levels.sd4_high == pytest.approx(148.90)
        assert levels.sd4_low == pytest.approx(148.10)
        assert levels.mode is AnchorMode.EQUILIBRIUM


# ── Dispatch ─────────────────────────────────────────────────────────────


class TestProjectDispatch:
    def test_method_anchor_modes(self):
        assert anchor_mode_for("cbdr") is AnchorMode.EXTREMITY
        assert anchor_mode_for("asian") is AnchorMode.EXTREMITY
        assert anchor_mode_for("flout") is AnchorMode.EQUILIBRIUM

    def test_unknown_method(self):
        with pytest.raises(InvalidInput, match="Unknown method"):
            anchor_mode_for("london")

    def test_project_matches_named_functions(self):
        rd = build_range(1.1650, 1.1620, "EURUSD")
        assert project(rd, AnchorMode.EXTREMITY) == calculate_sd_levels(rd)
        assert project(rd, "equilibrium") == calculate_sd_from_equilibrium(rd)

    def test_to_dict_carries_mode_value(self):
        data = calculate_sd_levels(build_range(1.1650, 1.1620, "EURUSD")).to_dict()
        assert data["mode"] == "extremity"
        assert set(data) >= {"sd1_high", "sd4_low"}

    def test_unknown_mode_string(self):
        rd = build_range(1.1650, 1.1620, "EURUSD")
        with pytest.raises(InvalidInput, match="Unknown anchor mode 'midpoint'"):
            project(rd, "midpoint")

    def test_half_range_chart_sd1_is_this_ladders_sd2(self):
        levels = calculate_sd_from_equilibrium(build_range(1.1650, 1.1620, "EURUSD"))
        assert levels.sd1_high == pytest.approx(1.16425)
        assert levels.sd2_high == 1.1650
