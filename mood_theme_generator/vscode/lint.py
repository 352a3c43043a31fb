import json
import os
import re
from collections import namedtuple

from ..palette.names import ANSI_COLORS

LintResult = namedtuple("LintResult", ["missing", "deprecated", "non_hex"])

DEPRECATED_PATTERNS = (re.compile(r"^quickInput\.list\."),)

REQUIRED_KEYS = (
    "editor.selectionForeground",
    "terminal.background",
    "terminal.foreground",
    "terminalCursor.foreground",
    *(f"terminal.ansi{color.capitalize()}" for color in ANSI_COLORS),
    *(f"terminal.ansiBright{color.capitalize()}" for color in ANSI_COLORS),
)

HEX_VALUE_RX = re.compile(r"^#([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def lint_theme(document):
    """Check a theme document's colors against the required and deprecated keys.

    Returns:
        LintResult of (missing keys, deprecated keys, non-hex (key, value) pairs).
        Only missing and deprecated keys count as failures.
    """
    colors = document.get("colors") or {}
    keys = list(colors)

    deprecated = [key for key in keys if any(rx.search(key) for rx in DEPRECATED_PATTERNS)]
    missing = [key for key in REQUIRED_KEYS if key not in colors]
    non_hex = [
        (key, colors[key])
        for key in keys
        if isinstance(colors[key], str) and not HEX_VALUE_RX.match(colors[key])
    ]
    return LintResult(missing=missing, deprecated=deprecated, non_hex=non_hex)


def lint_failed(result):
    return bool(result.missing or result.deprecated)


def theme_files(themes_dir):
    return sorted(
        name
        for name in os.listdir(themes_dir)
        if name.endswith(".json") and not name.endswith(".template.json")
    )


def lint_directory(themes_dir):
    """Lint every generated theme in a directory.

    Returns:
        dict of file name -> LintResult
    """
    results = {}
    for name in theme_files(themes_dir):
        with open(os.path.join(themes_dir, name)) as f:
            results[name] = lint_theme(json.load(f))
    return results
