"""Tests for RGB/OKLCH blending, alpha and tuning."""

import pytest

from mood_theme_generator.blend import (
    Tuning,
    blend_oklch,
    blend_rgb,
    opacity_to_hex,
    tune,
    with_alpha,
)
from mood_theme_generator.color import Oklch, hex_to_oklch, hex_to_rgb, oklch_to_hex


def hue_distance(a, b):
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


class TestBlendRgb:
    def test_midpoint(self):
        assert blend_rgb("#000000", "#FFFFFF", 0.5) == "#808080"

    def test_endpoints(self):
        assert blend_rgb("#102030", "#FFFFFF", 0) == "#102030"
        assert blend_rgb("#102030", "#ffffff", 1) == "#FFFFFF"

    def test_factor_is_clamped(self):
        assert blend_rgb("#102030", "#FFFFFF", 2.5) == "#FFFFFF"
        assert blend_rgb("#102030", "#FFFFFF", -1) == "#102030"

    def test_invalid_inputs_fall_back(self):
        assert blend_rgb("nope", "#abc", 0.5) == "#AABBCC"
        assert blend_rgb("#abc", "nope", 0.5) == "#AABBCC"
        assert blend_rgb("nope", "also nope", 0.5) == "#000000"


class TestBlendOklch:
    def test_takes_short_arc_across_zero(self):
        a = oklch_to_hex(Oklch(l=0.6, c=0.08, h=20))
        b = oklch_to_hex(Oklch(l=0.6, c=0.08, h=340))
        mid = hex_to_oklch(blend_oklch(a, b, 0.5))
        assert hue_distance(mid.h, 0) < 10

    def test_red_and_magenta_meet_on_short_side(self):
        red = hex_to_oklch("#FF0000").h
        magenta = hex_to_oklch("#FF00FF").h
        assert red < 40 and magenta > 320
        mid = hex_to_oklch(blend_oklch("#FF0000", "#FF00FF", 0.5))
        # the long way round would land near 180
        assert mid.h >= magenta or mid.h <= red

    def test_endpoints(self):
        a, b = "#0F1317", "#FFD59E"
        for value, expected in ((blend_oklch(a, b, 0), a), (blend_oklch(a, b, 1), b)):
            for x, y in zip(hex_to_rgb(value), hex_to_rgb(expected)):
                assert abs(x - y) <= 1

    def test_invalid_falls_back_to_rgb(self):
        assert blend_oklch("nope", "#abc", 0.3) == "#AABBCC"


class TestAlpha:
    def test_with_alpha(self):
        assert with_alpha("#0f1317", 0.55) == "#0F13178C"

    def test_alpha_is_clamped(self):
        assert with_alpha("#0F1317", 2) == "#0F1317FF"
        assert with_alpha("#0F1317", -1) == "#0F131700"

    def test_invalid_color(self):
        assert with_alpha("nope", 0.5) == "#00000033"

    def test_opacity_to_hex(self):
        assert opacity_to_hex(0.5) == "80"
        assert opacity_to_hex(1) == "FF"


class TestTune:
    def test_zero_tuning_is_stable(self):
        tuned = tune("#6A8FB0", Tuning(l=0, c=0))
        for x, y in zip(hex_to_rgb(tuned), hex_to_rgb("#6A8FB0")):
            assert abs(x - y) <= 1

    def test_lightness_is_clamped(self):
        assert tune("#808080", Tuning(l=1, c=0)) == "#FFFFFF"
        assert tune("#808080", Tuning(l=-1, c=0)) == "#000000"

    def test_chroma_scales_and_hue_holds(self):
        before = hex_to_oklch("#6A8FB0")
        after = hex_to_oklch(tune("#6A8FB0", Tuning(l=0, c=0.5)))
        assert after.c > before.c
        assert hue_distance(after.h, before.h) < 3

    def test_invalid_is_returned_unchanged(self):
        assert tune("nope", Tuning(l=0.1, c=0.1)) == "nope"

    @pytest.mark.parametrize("delta", [Tuning(l=0.5, c=5), Tuning(l=-0.5, c=-2)])
    def test_extreme_tuning_stays_valid(self, delta):
        result = tune("#FFD59E", delta)
        assert len(result) == 7 and result.startswith("#")
