from ..blend import blend_rgb, tune
from ..color import MAX_CHROMA, Oklch, clamp, oklch_to_hex
from .moods import ACCENT_EMPHASIS, mood_tuning
from .names import ANSI_COLORS, ansi_key

# Hue anchors in OKLCH degrees
ANSI_HUES = {
    "red": 25,
    "yellow": 100,
    "green": 145,
    "cyan": 200,
    "blue": 255,
    "magenta": 320,
}

# Working points (lightness, chroma) for the chromatic slots
NORMAL_POINT = (0.68, 0.06)
BRIGHT_POINT = (0.80, 0.09)

# Neutral slots as surface -> ink blend factors
NEUTRAL_BLENDS = {
    "black": 0.65,
    "white": 0.15,
    "brightBlack": 0.45,
    "brightWhite": 0.05,
}


def _make(lightness, chroma, hue):
    return oklch_to_hex(
        Oklch(
            l=clamp(lightness, 0.0, 1.0),
            c=clamp(chroma, 0.0, MAX_CHROMA),
            h=(hue + 360) % 360,
        )
    )


def derive_ansi_palette(surface, ink):
    """Build the 16 terminal colors, keyed by terminalAnsi* names.

    Args:
        surface: Terminal background (the mood surface)
        ink: Terminal foreground

    Returns:
        dict of 16 colors, normal slots first
    """
    colors = {}
    for bright in (False, True):
        lightness, chroma = BRIGHT_POINT if bright else NORMAL_POINT
        for color in ANSI_COLORS:
            key = ansi_key(color, bright)
            if color in ANSI_HUES:
                colors[key] = _make(lightness, chroma, ANSI_HUES[color])
            else:
                neutral = f"bright{color.capitalize()}" if bright else color
                colors[key] = blend_rgb(surface, ink, NEUTRAL_BLENDS[neutral])
    return colors


def apply_mood_tuning(colors, mood):
    """Return a copy of the ANSI colors with the mood's general tuning applied."""
    tuning = mood_tuning(mood)
    tuned = dict(colors)
    for color in ANSI_COLORS:
        tuned[ansi_key(color)] = tune(tuned[ansi_key(color)], tuning.normal)
        bright_key = ansi_key(color, bright=True)
        tuned[bright_key] = tune(tuned[bright_key], tuning.bright)
    return tuned


def apply_accent_emphasis(colors, mood):
    """Return a copy with the mood's one-off accent emphasis applied, if it has one."""
    emphasis = ACCENT_EMPHASIS.get(mood)
    if emphasis is None:
        return dict(colors)
    tuned = dict(colors)
    for color in emphasis["colors"]:
        tuned[ansi_key(color)] = tune(tuned[ansi_key(color)], emphasis["tuning"].normal)
        bright_key = ansi_key(color, bright=True)
        tuned[bright_key] = tune(tuned[bright_key], emphasis["tuning"].bright)
    return tuned
