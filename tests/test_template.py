"""Tests for placeholder rendering."""

from mood_theme_generator.template import placeholders, render


class TestRender:
    def test_unknown_placeholder_is_left_verbatim(self):
        palette = {"surface": "#0F1317"}
        assert (
            render("bg=${surface} missing=${doesNotExist}", palette)
            == "bg=#0F1317 missing=${doesNotExist}"
        )

    def test_repeated_and_dotted_names(self):
        values = {"a": "1", "b.c": "2"}
        assert render("${a}${a}-${b.c}", values) == "11-2"

    def test_empty_value_is_treated_as_missing(self):
        assert render("x=${a}", {"a": ""}) == "x=${a}"

    def test_non_placeholder_text_untouched(self):
        text = "$surface {surface} $ {x} ${ spaced }"
        assert render(text, {"surface": "#000000", "x": "1"}) == text

    def test_non_string_values(self):
        assert render("size=${size}", {"size": 14}) == "size=14"


class TestPlaceholders:
    def test_order_of_first_use(self):
        assert placeholders("${b} ${a} ${b} ${c.d}") == ["b", "a", "c.d"]

    def test_none(self):
        assert placeholders("plain text") == []
