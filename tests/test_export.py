"""Tests for palette JSON export, readability report and HTML preview."""

import json

import pytest

from mood_theme_generator.export import (
    create_html_preview,
    export_json,
    generate_readability_report,
    print_palette,
)
from mood_theme_generator.palette import PALETTE_KEYS, derive_palette, load_palette_from_json, resolve_tone
from mood_theme_generator.vscode import generate_theme, lint_theme

TOKENS = {"tone": {"surface": "#0F1317", "ink": "#E6EDF5", "accent": "#FFD59E"}}


class TestExportJson:
    def test_round_trip_through_loader(self, tmp_path):
        palette = derive_palette(TOKENS, "celebratory")
        path = tmp_path / "palette-celebratory.json"
        export_json(palette, str(path), "celebratory", tone=resolve_tone(TOKENS), theme_name="Garden")

        data = json.loads(path.read_text())
        assert data["_mood"] == "celebratory"
        assert data["_tone"]["surface"] == "#0F1317"
        assert data["_theme"] == "Garden"

        loaded, mood = load_palette_from_json(str(path))
        assert mood == "celebratory"
        assert loaded == palette

    def test_loader_normalizes_hex_forms(self, tmp_path):
        data = dict(derive_palette(TOKENS, "soft"))
        data.update({"surface": "0f1317", "ink": "#eee", "selection": "ffd59e8c", "accentSoft": "#fd96"})
        path = tmp_path / "palette.json"
        path.write_text(json.dumps(data))

        loaded, _ = load_palette_from_json(str(path))
        assert loaded["surface"] == "#0F1317"
        assert loaded["ink"] == "#EEEEEE"
        assert loaded["selection"] == "#FFD59E8C"
        assert loaded["accentSoft"] == "#FFDD9966"

        document = json.loads(generate_theme(loaded, "Garden"))
        assert lint_theme(document).non_hex == []

    def test_loader_rejects_incomplete_palette(self, tmp_path):
        path = tmp_path / "palette.json"
        path.write_text(json.dumps({"surface": "#000000"}))
        with pytest.raises(ValueError, match="missing palette keys"):
            load_palette_from_json(str(path))


class TestReport:
    def test_default_tone_report(self):
        report, issues = generate_readability_report(derive_palette(TOKENS, "soft"), "soft")
        assert "READABILITY REPORT" in report
        assert "Mood: SOFT" in report
        assert all(len(issue) == 4 for issue in issues)
        assert not any(issue[0] == "selectionFg" for issue in issues)

    def test_flags_low_contrast(self):
        tone = {"surface": "#777777", "ink": "#7A7A7A", "accent": "#777777"}
        report, issues = generate_readability_report(derive_palette(tone, "focused"))
        assert ("ink", "surface") in [(fg, bg) for fg, bg, _, _ in issues]
        assert "ISSUES FOUND" in report

    def test_print_palette(self, capsys):
        print_palette(derive_palette(TOKENS, "focused"), "focused")
        out = capsys.readouterr().out
        assert "MOOD PALETTE (FOCUSED)" in out
        for key in PALETTE_KEYS:
            assert key in out


class TestPreview:
    def test_writes_html(self, tmp_path):
        path = tmp_path / "preview.html"
        create_html_preview(derive_palette(TOKENS, "soft"), str(path), "soft")
        html = path.read_text()
        assert html.startswith("<!DOCTYPE html>")
        assert "background: #0F1317;" in html
        assert "Soft" in html
        assert "${" not in html
