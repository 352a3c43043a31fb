import logging

from ..blend import blend_oklch, blend_rgb, with_alpha
from ..contrast import pick_foreground
from .ansi import apply_accent_emphasis, apply_mood_tuning, derive_ansi_palette
from .moods import MOODS, mood_strength
from .names import PALETTE_KEYS
from .tone import resolve_tone

logger = logging.getLogger(__name__)

# Input fields lean toward ink by a fixed amount regardless of mood
INVITATION_WEIGHT = 0.06
INVITATION_ACTIVE_WEIGHT = 0.08
HALO_WEIGHT = 0.2  # accent -> surface
SELECTION_EXTRA_TINT = 0.06
MAX_SELECTION_TINT = 0.4

# Gamma-space shades: (from, to, factor)
LINE_BLEND = 0.15  # surface -> black
LINE_SOFT_BLEND = 0.10
CHROME_BLEND = 0.25
CHROME_SOFT_BLEND = 0.18
GUTTER_BLEND = 0.65  # ink -> surface
GUTTER_SOFT_BLEND = 0.75
PLACEHOLDER_BLEND = 0.45
TAB_INACTIVE_FG_BLEND = 0.35

# Alpha levels
SELECTION_ALPHA = 0.55
SELECTION_MUTED_ALPHA = 0.3
ACCENT_SOFT_ALPHA = 0.4
FIELD_BORDER_ALPHA = 0.06
TAB_BORDER_ALPHA = 0.04
FOCUS_RING_ALPHA = 0.6
UNFOCUSED_BORDER_ALPHA = 0.45


def _mood_key(mood):
    return mood.strip().lower() if isinstance(mood, str) else None


def create_mood_palette(surface, ink, accent, strength):
    """Colors that depend on the mood strength, plus the input field tints."""
    tint = max(0.0, min(0.35, strength))
    selection_tint = max(0.0, min(MAX_SELECTION_TINT, tint + SELECTION_EXTRA_TINT))
    return {
        "moodSurface": blend_oklch(surface, accent, tint),
        "moodHalo": blend_oklch(accent, surface, HALO_WEIGHT),
        "inputBg": blend_oklch(surface, ink, INVITATION_WEIGHT),
        "inputBgActive": blend_oklch(surface, ink, INVITATION_ACTIVE_WEIGHT),
        "selectionBg": blend_oklch(surface, accent, selection_tint),
    }


def derive_palette(tokens, mood):
    """Derive the full named palette for a tone and mood.

    Args:
        tokens: Tokens dict ({"tone": {...}} or flat surface/ink/accent/caret).
                Missing or invalid colors fall back to defaults.
        mood: "soft", "focused" or "celebratory". Anything else uses the
              soft strength and neutral terminal tuning.

    Returns:
        dict mapping every name in PALETTE_KEYS to a hex string
    """
    tone = resolve_tone(tokens)
    bg, fg, accent = tone.surface, tone.ink, tone.accent
    key = _mood_key(mood)

    mood_palette = create_mood_palette(bg, fg, accent, mood_strength(key))
    mood_surface = mood_palette["moodSurface"]
    halo = mood_palette["moodHalo"]
    selection_bg = mood_palette["selectionBg"]

    # === TERMINAL ===
    ansi = derive_ansi_palette(mood_surface, fg)
    ansi = apply_mood_tuning(ansi, key)
    ansi = apply_accent_emphasis(ansi, key)

    palette = {
        "surface": bg,
        "ink": fg,
        "accent": accent,
        "accentSoft": with_alpha(accent, ACCENT_SOFT_ALPHA),
        "caret": tone.caret,
        "selection": with_alpha(accent, SELECTION_ALPHA),
        "selectionMuted": with_alpha(accent, SELECTION_MUTED_ALPHA),
        # === LINES & CHROME ===
        "line": blend_rgb(bg, "#000000", LINE_BLEND),
        "lineSoft": blend_rgb(bg, "#000000", LINE_SOFT_BLEND),
        "chrome": blend_rgb(bg, "#000000", CHROME_BLEND),
        "chromeSoft": blend_rgb(bg, "#000000", CHROME_SOFT_BLEND),
        "gutter": blend_rgb(fg, bg, GUTTER_BLEND),
        "gutterSoft": blend_rgb(fg, bg, GUTTER_SOFT_BLEND),
        # === TABS ===
        "tabActiveBg": mood_surface,
        "tabInactiveBg": bg,
        "tabBorder": with_alpha(fg, TAB_BORDER_ALPHA),
        "tabActiveBorder": halo,
        "tabUnfocusedActiveBorder": with_alpha(halo, UNFOCUSED_BORDER_ALPHA),
        "tabActiveFg": fg,
        "tabInactiveFg": blend_rgb(fg, bg, TAB_INACTIVE_FG_BLEND),
        # === INPUT FIELDS ===
        "fieldBg": mood_palette["inputBg"],
        "fieldBgActive": mood_palette["inputBgActive"],
        "fieldBorder": with_alpha(fg, FIELD_BORDER_ALPHA),
        "fieldPlaceholder": blend_rgb(fg, bg, PLACEHOLDER_BLEND),
        "focusRing": with_alpha(halo, FOCUS_RING_ALPHA),
        # === MOOD ===
        "moodSurface": mood_surface,
        "moodHalo": halo,
        "selectionBg": selection_bg,
        "inputBg": mood_palette["inputBg"],
        "selectionFg": pick_foreground(selection_bg, fg),
        "terminalBg": mood_surface,
        "terminalFg": fg,
        "terminalCursor": accent,
    }
    palette.update(ansi)

    logger.debug("Derived %d colors for mood %r", len(palette), mood)
    return {name: palette[name] for name in PALETTE_KEYS}


def derive_all(tokens, moods=MOODS, cache=None):
    """Derive a palette per mood.

    Args:
        tokens: Tokens dict passed to derive_palette
        moods: Moods to derive
        cache: Optional dict owned by the caller, keyed by mood. Only valid
               for a single tokens document.

    Returns:
        dict of mood -> palette
    """
    palettes = {}
    for mood in moods:
        if cache is not None and mood in cache:
            palettes[mood] = cache[mood]
            continue
        palettes[mood] = derive_palette(tokens, mood)
        if cache is not None:
            cache[mood] = palettes[mood]
    return palettes
