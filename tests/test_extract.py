"""Tests for suggesting a tone from an image."""

import pytest
from PIL import Image

from mood_theme_generator.contrast import relative_luminance
from mood_theme_generator.extract import extract_colors, suggest_tone

DARK = (20, 24, 30)
LIGHT = (220, 225, 230)
ORANGE = (230, 120, 40)


@pytest.fixture()
def banded_image(tmp_path):
    """60x60 image with dark, light and orange horizontal bands."""
    img = Image.new("RGB", (60, 60), DARK)
    for y in range(20, 40):
        for x in range(60):
            img.putpixel((x, y), LIGHT)
    for y in range(40, 60):
        for x in range(60):
            img.putpixel((x, y), ORANGE)
    path = tmp_path / "bands.png"
    img.save(path)
    return str(path)


class TestExtractColors:
    def test_clusters_capped_at_distinct_colors(self, banded_image):
        colors = extract_colors(banded_image, n_colors=12)
        assert sorted(colors) == sorted(["#14181E", "#DCE1E6", "#E67828"])


class TestSuggestTone:
    def test_roles(self, banded_image):
        tone = suggest_tone(banded_image)
        assert set(tone) == {"surface", "ink", "accent"}
        assert relative_luminance(tone["surface"]) < 0.05
        assert relative_luminance(tone["ink"]) > 0.7
        assert tone["accent"] == "#E67828"
