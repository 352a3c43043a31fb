from collections import namedtuple

from .color import (
    MAX_CHROMA,
    Oklch,
    clamp,
    hex_to_oklch,
    hex_to_rgb,
    normalize_hex,
    oklch_to_hex,
    rgb_to_hex,
    to_byte,
)

Tuning = namedtuple("Tuning", ["l", "c"])

INVALID_ALPHA_COLOR = "#00000033"


def blend_rgb(color1, color2, factor=0.5):
    """Blend two colors in gamma-encoded RGB. factor=0 returns color1, factor=1 returns color2."""
    a = hex_to_rgb(color1)
    b = hex_to_rgb(color2)
    if a is None or b is None:
        return normalize_hex(color1) or normalize_hex(color2) or "#000000"
    weight = clamp(factor, 0.0, 1.0)
    return rgb_to_hex(*(x + (y - x) * weight for x, y in zip(a, b)))


def blend_oklch(color1, color2, factor=0.5):
    """Blend two colors in OKLCH, taking the short way around the hue circle.

    Falls back to an RGB blend when either color can't be parsed.
    """
    a = hex_to_oklch(color1)
    b = hex_to_oklch(color2)
    if a is None or b is None:
        return blend_rgb(color1, color2, factor)
    t = clamp(factor, 0.0, 1.0)
    # wrap into [-180, 180) before scaling
    hue_delta = ((b.h - a.h + 540) % 360 - 180) * t
    return oklch_to_hex(
        Oklch(
            l=a.l + (b.l - a.l) * t,
            c=a.c + (b.c - a.c) * t,
            h=(a.h + hue_delta + 360) % 360,
        )
    )


def opacity_to_hex(opacity):
    """Convert 0.0-1.0 opacity to an uppercase hex byte (00-FF)."""
    return f"{to_byte(clamp(opacity, 0.0, 1.0) * 255):02X}"


def with_alpha(color, alpha):
    """Append an alpha byte to a color, giving #RRGGBBAA."""
    normalized = normalize_hex(color)
    if normalized is None:
        return INVALID_ALPHA_COLOR
    return f"{normalized}{opacity_to_hex(alpha)}"


def tune(color, delta):
    """Shift OKLCH lightness by delta.l and scale chroma by (1 + delta.c), keeping hue."""
    current = hex_to_oklch(color)
    if current is None:
        return color
    return oklch_to_hex(
        Oklch(
            l=clamp(current.l + delta.l, 0.0, 1.0),
            c=clamp(current.c * (1 + delta.c), 0.0, MAX_CHROMA),
            h=current.h,
        )
    )
