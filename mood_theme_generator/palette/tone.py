import logging
from collections import namedtuple

from ..color import parse_color

logger = logging.getLogger(__name__)

Tone = namedtuple("Tone", ["surface", "ink", "accent", "caret"])

# Fallbacks used when deriving themes
THEME_DEFAULTS = {
    "surface": "#0F1317",
    "ink": "#E6EDF5",
    "accent": "#FFD59E",
}

# Fallbacks used when writing tokens.json. Kept separate from THEME_DEFAULTS on purpose.
TOKEN_DEFAULTS = {
    "surface": "#0F1317",
    "ink": "#E6EDF3",
    "accent": "#60D394",
}


def tone_fields(tokens):
    """Return the tone mapping from a tokens document ({"tone": {...}} or flat)."""
    if not isinstance(tokens, dict):
        return {}
    tone = tokens.get("tone")
    if isinstance(tone, dict):
        return tone
    return tokens


def resolve_tone(tokens, defaults=None):
    """Resolve surface/ink/accent/caret from a tokens document.

    Args:
        tokens: Tokens dict, either {"tone": {...}} or the tone fields directly
        defaults: Fallback colors for missing or invalid fields (THEME_DEFAULTS)

    Returns:
        Tone namedtuple of #RRGGBB strings. caret falls back to accent.
    """
    defaults = defaults or THEME_DEFAULTS
    fields = tone_fields(tokens)

    resolved = {}
    for key in ("surface", "ink", "accent"):
        value = parse_color(fields.get(key))
        if value is None:
            if key in fields:
                logger.warning("Invalid %s color %r, using %s", key, fields[key], defaults[key])
            value = defaults[key]
        resolved[key] = value

    caret = parse_color(fields.get("caret")) or resolved["accent"]
    return Tone(caret=caret, **resolved)


def ensure_tone(tone):
    """Complete a partial tone dict with TOKEN_DEFAULTS, for writing tokens.json."""
    resolved = resolve_tone(tone, defaults=TOKEN_DEFAULTS)
    return {
        "surface": resolved.surface,
        "ink": resolved.ink,
        "accent": resolved.accent,
    }
