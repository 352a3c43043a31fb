"""Tests for WCAG luminance, contrast and the bounded contrast search."""

import pytest

from mood_theme_generator import contrast
from mood_theme_generator.color import normalize_hex
from mood_theme_generator.contrast import (
    AA_CONTRAST,
    SAFE_FOREGROUND,
    contrast_ratio,
    ensure_contrast,
    pick_foreground,
    relative_luminance,
)

BACKGROUNDS = [
    "#000000", "#FFFFFF", "#777777", "#0F1317", "#E6EDF5", "#FFD59E",
    "#60D394", "#FF0000", "#0000FF", "#3B3F2A", "#8C5A9E", "#C0C0C0",
]


class TestLuminance:
    def test_extremes(self):
        assert relative_luminance("#000000") == 0
        assert relative_luminance("#FFFFFF") == pytest.approx(1.0)

    def test_invalid_counts_as_black(self):
        assert relative_luminance("nope") == 0


class TestContrastRatio:
    def test_black_on_white_is_21(self):
        assert contrast_ratio("#FFFFFF", "#000000") == pytest.approx(21.0)

    def test_same_color_is_1(self):
        assert contrast_ratio("#0F1317", "#0F1317") == pytest.approx(1.0)

    @pytest.mark.parametrize("a", BACKGROUNDS[:6])
    @pytest.mark.parametrize("b", BACKGROUNDS[6:])
    def test_symmetric(self, a, b):
        assert contrast_ratio(a, b) == contrast_ratio(b, a)


class TestEnsureContrast:
    def test_passing_color_is_unchanged(self):
        assert ensure_contrast("#e6edf5", "#0F1317", 7) == "#e6edf5"

    def test_darkens_when_lightening_cannot_reach(self):
        # white only reaches 4.48:1 against #777777, black reaches 4.69:1
        assert ensure_contrast("#777777", "#777777", 4.5) == "#000000"

    def test_lighten_wins_a_tie(self):
        # both 10% steps clear 1.1:1, the lighter one is returned
        assert ensure_contrast("#777777", "#777777", 1.1) == "#858585"

    def test_unreachable_ratio_returns_none(self):
        assert ensure_contrast("#777777", "#777777", 7) is None

    @pytest.mark.parametrize("bg", BACKGROUNDS)
    def test_result_meets_ratio(self, bg):
        result = ensure_contrast("#888888", bg, 3)
        assert result is not None
        assert contrast_ratio(result, bg) >= 3


class TestPickForeground:
    @pytest.mark.parametrize("bg", BACKGROUNDS)
    @pytest.mark.parametrize("preferred", ["#E6EDF5", "#777777", "#FFD59E"])
    def test_always_returns_a_readable_color(self, bg, preferred):
        result = pick_foreground(bg, preferred)
        assert normalize_hex(result) is not None
        assert contrast_ratio(result, bg) >= AA_CONTRAST or result == SAFE_FOREGROUND

    def test_keeps_preferred_at_aaa(self):
        assert pick_foreground("#0F1317", "#E6EDF5") == "#E6EDF5"

    def test_falls_back_to_aa(self):
        assert pick_foreground("#777777", "#777777") == "#000000"

    def test_falls_back_to_white(self, monkeypatch):
        monkeypatch.setattr(contrast, "ensure_contrast", lambda *args: None)
        assert pick_foreground("#777777", "#777777") == "#FFFFFF"
