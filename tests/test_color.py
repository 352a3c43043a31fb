"""Tests for hex/RGB/OKLCH conversion."""

import pytest

from mood_theme_generator.color import (
    Oklch,
    hex_to_oklch,
    hex_to_rgb,
    normalize_hex,
    oklch_to_hex,
    parse_color,
    parse_oklch,
    rgb_to_hex,
)


class TestNormalizeHex:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("#0f1317", "#0F1317"),
            ("0f1317", "#0F1317"),
            ("  #0F1317 ", "#0F1317"),
            ("#abc", "#AABBCC"),
            ("abcd", "#AABBCC"),
            ("#11223344", "#112233"),
        ],
    )
    def test_accepted_forms(self, value, expected):
        assert normalize_hex(value) == expected

    @pytest.mark.parametrize("value", ["#12345", "#ggg", "red", "", "##abc", None, 0x0F1317])
    def test_rejected_forms(self, value):
        assert normalize_hex(value) is None


class TestRgb:
    def test_hex_to_rgb(self):
        assert hex_to_rgb("#0F1317") == (15, 19, 23)

    def test_hex_to_rgb_invalid(self):
        assert hex_to_rgb("nope") is None

    def test_rgb_to_hex_rounds_half_up_and_clamps(self):
        assert rgb_to_hex(127.5, -4, 300) == "#8000FF"


class TestOklch:
    @pytest.mark.parametrize(
        "value",
        ["#0F1317", "#E6EDF5", "#FFD59E", "#60D394", "#FF0000", "#00FF00", "#0000FF",
         "#FF00FF", "#FFFFFF", "#000000", "#808080", "#123456", "#FEDCBA", "#010203"],
    )
    def test_round_trip_within_one_per_channel(self, value):
        back = hex_to_rgb(oklch_to_hex(hex_to_oklch(value)))
        for original, restored in zip(hex_to_rgb(value), back):
            assert abs(original - restored) <= 1

    def test_ranges(self):
        for value in ("#FF00FF", "#0000FF", "#FFFFFF", "#000000"):
            color = hex_to_oklch(value)
            assert 0 <= color.l <= 1
            assert 0 <= color.c <= 0.4
            assert 0 <= color.h < 360

    def test_known_values(self):
        white = hex_to_oklch("#FFFFFF")
        assert white.l == pytest.approx(1.0, abs=1e-3)
        assert white.c == pytest.approx(0.0, abs=1e-3)
        red = hex_to_oklch("#FF0000")
        assert red.l == pytest.approx(0.628, abs=2e-3)
        assert red.h == pytest.approx(29.23, abs=0.1)

    def test_invalid_input(self):
        assert hex_to_oklch("not a color") is None

    def test_out_of_gamut_is_clipped(self):
        value = oklch_to_hex(Oklch(l=0.7, c=0.4, h=145))
        assert normalize_hex(value) == value

    def test_extremes(self):
        assert oklch_to_hex(Oklch(l=0, c=0, h=0)) == "#000000"
        assert oklch_to_hex(Oklch(l=1, c=0, h=0)) == "#FFFFFF"


class TestParseColor:
    def test_parse_oklch_percent(self):
        parsed = parse_oklch("oklch(72% 0.11 145)")
        assert parsed.l == pytest.approx(0.72)
        assert parsed.c == pytest.approx(0.11)
        assert parsed.h == pytest.approx(145)

    def test_parse_oklch_with_alpha_and_unit(self):
        parsed = parse_oklch("oklch(0.5 0.05 250deg / 80%)")
        assert parsed == Oklch(l=0.5, c=0.05, h=250.0)

    def test_parse_oklch_rejects_garbage(self):
        assert parse_oklch("rgb(1, 2, 3)") is None
        assert parse_oklch("oklch(1.2.3 0.1 20)") is None

    def test_parse_color_prefers_hex(self):
        assert parse_color("#fff") == "#FFFFFF"

    def test_parse_color_from_oklch(self):
        value = parse_color("oklch(0% 0 0)")
        assert value == "#000000"

    def test_parse_color_invalid(self):
        assert parse_color("tomato") is None
