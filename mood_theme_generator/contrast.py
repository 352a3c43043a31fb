from .blend import blend_rgb
from .color import hex_to_rgb

AAA_CONTRAST = 7.0
AA_CONTRAST = 4.5
SAFE_FOREGROUND = "#FFFFFF"

CONTRAST_STEPS = 10


def relative_luminance(color):
    """Calculate relative luminance per WCAG 2.0. Unparseable colors count as black."""
    rgb = hex_to_rgb(color)
    if rgb is None:
        return 0.0

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = rgb
    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(color1, color2):
    """Calculate contrast ratio between two colors (order doesn't matter)"""
    lum1 = relative_luminance(color1)
    lum2 = relative_luminance(color2)
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def ensure_contrast(color, bg_color, min_contrast):
    """
    Nudge color toward white or black until it meets min_contrast against bg_color.

    Tries blend steps of 0.1 up to 1.0, lightening before darkening at each
    step. Returns the color unchanged if it already passes, or None if no
    step gets there.
    """
    if contrast_ratio(color, bg_color) >= min_contrast:
        return color

    for i in range(1, CONTRAST_STEPS + 1):
        step = i / CONTRAST_STEPS
        lighter = blend_rgb(color, "#FFFFFF", step)
        if contrast_ratio(lighter, bg_color) >= min_contrast:
            return lighter
        darker = blend_rgb(color, "#000000", step)
        if contrast_ratio(darker, bg_color) >= min_contrast:
            return darker

    return None


def pick_foreground(bg_color, preferred):
    """Pick a readable foreground for bg_color: AAA, then AA, then plain white."""
    return (
        ensure_contrast(preferred, bg_color, AAA_CONTRAST)
        or ensure_contrast(preferred, bg_color, AA_CONTRAST)
        or SAFE_FOREGROUND
    )
