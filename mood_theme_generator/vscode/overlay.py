"""
Mood overlays for a running editor.

Copies the mood-sensitive colors of a generated theme into the editor's
workbench.colorCustomizations so a mood can be switched without changing
the active theme.
"""

import json
import os

CUSTOMIZATIONS_KEY = "workbench.colorCustomizations"

MOOD_COLOR_KEYS = (
    "tab.activeBackground",
    "tab.activeBorder",
    "editor.selectionBackground",
    "list.activeSelectionBackground",
    "quickInputList.focusBackground",
    "input.background",
    "input.border",
    "focusBorder",
    "quickInput.background",
    "peekViewEditor.background",
    "peekViewResult.background",
)


def load_mood_colors(theme_path, cache=None):
    """Read the colors map of a theme file.

    Args:
        theme_path: Path to a generated theme JSON
        cache: Optional dict owned by the caller, keyed by path

    Returns:
        dict of color key -> value
    """
    if cache is not None and theme_path in cache:
        return cache[theme_path]
    with open(theme_path) as f:
        payload = json.load(f)
    colors = payload.get("colors") or {}
    if cache is not None:
        cache[theme_path] = colors
    return colors


def build_overlay(colors, keys=MOOD_COLOR_KEYS):
    """Subset of colors for the mood keys that are present."""
    return {key: colors[key] for key in keys if colors.get(key)}


def merge_customizations(current, overlay):
    merged = dict(current or {})
    merged.update(overlay)
    return merged


def apply_to_settings(settings_path, overlay):
    """Merge overlay into workbench.colorCustomizations of a settings JSON file.

    The file is created if missing. Returns the merged customizations.
    """
    settings = {}
    if os.path.exists(settings_path):
        with open(settings_path) as f:
            settings = json.load(f)

    merged = merge_customizations(settings.get(CUSTOMIZATIONS_KEY), overlay)
    settings[CUSTOMIZATIONS_KEY] = merged

    with open(settings_path, "w") as f:
        json.dump(settings, f, indent=2)
    return merged
