import math
import re
from collections import namedtuple

import numpy as np

Oklch = namedtuple("Oklch", ["l", "c", "h"])

MAX_CHROMA = 0.4

HEX_RX = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.I)
OKLCH_RX = re.compile(
    r"oklch\(\s*([\d.]+%?)\s+([\d.]+)\s+([\d.]+)(?:deg|°)?(?:\s*/\s*([\d.]+%?))?\s*\)",
    re.I,
)

# Linear sRGB -> LMS, and cube-rooted LMS -> OKLab (Ottosson)
_RGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
_LMS_TO_LAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
_LAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)
_LMS_TO_RGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)


def clamp(value, low, high):
    return max(low, min(high, value))


def to_byte(value):
    """Round half up and clamp to 0-255."""
    return int(clamp(math.floor(value + 0.5), 0, 255))


def normalize_hex(value):
    """Normalize a hex color string to uppercase #RRGGBB.

    Accepts 3, 4, 6 or 8 hex digits with or without a leading '#'. Short
    forms are expanded by doubling each digit and alpha digits are dropped.

    Returns:
        The normalized string, or None if the value is not a color
    """
    if not isinstance(value, str):
        return None
    match = HEX_RX.match(value.strip())
    if not match:
        return None
    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits[:6].upper()}"


def rgb_to_hex(r, g, b):
    return f"#{to_byte(r):02X}{to_byte(g):02X}{to_byte(b):02X}"


def hex_to_rgb(value):
    normalized = normalize_hex(value)
    if normalized is None:
        return None
    return tuple(int(normalized[i : i + 2], 16) for i in (1, 3, 5))


def srgb_to_linear(value):
    if value <= 0.04045:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def linear_to_srgb(value):
    if value <= 0.0031308:
        return 12.92 * value
    return 1.055 * value ** (1 / 2.4) - 0.055


def hex_to_oklch(value):
    """Convert a hex color to OKLCH.

    L is clamped to 0-1, C to 0-0.4 and H normalized to [0, 360).

    Returns:
        Oklch namedtuple, or None if the value is not a color
    """
    rgb = hex_to_rgb(value)
    if rgb is None:
        return None
    linear = np.array([srgb_to_linear(channel / 255) for channel in rgb])
    lms = np.cbrt(_RGB_TO_LMS @ linear)
    lightness, a, b = _LMS_TO_LAB @ lms

    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a)) % 360
    return Oklch(
        l=clamp(float(lightness), 0.0, 1.0),
        c=clamp(chroma, 0.0, MAX_CHROMA),
        h=hue,
    )


def oklch_to_hex(color):
    """Convert an OKLCH color to hex.

    Out-of-gamut colors are clipped per linear channel; no error is raised.
    """
    hue = math.radians(color.h)
    lab = np.array([color.l, math.cos(hue) * color.c, math.sin(hue) * color.c])
    lms = (_LAB_TO_LMS @ lab) ** 3
    linear = _LMS_TO_RGB @ lms

    channels = []
    for channel in linear:
        srgb = linear_to_srgb(clamp(float(channel), 0.0, 1.0))
        channels.append(clamp(srgb, 0.0, 1.0) * 255)
    return rgb_to_hex(*channels)


def parse_oklch(text):
    """Parse a CSS oklch() value such as 'oklch(72% 0.11 145 / 0.9)'.

    Lightness given as a percentage is scaled to 0-1. Alpha is ignored.
    """
    if not isinstance(text, str):
        return None
    match = OKLCH_RX.search(text)
    if not match:
        return None
    raw_l, raw_c, raw_h = match.group(1), match.group(2), match.group(3)
    try:
        lightness = float(raw_l.rstrip("%"))
        chroma = float(raw_c)
        hue = float(raw_h)
    except ValueError:
        return None
    if raw_l.endswith("%"):
        lightness /= 100
    return Oklch(l=lightness, c=chroma, h=hue % 360)


def parse_color(value):
    """Resolve a hex or oklch() string to #RRGGBB, or None."""
    normalized = normalize_hex(value)
    if normalized:
        return normalized
    parsed = parse_oklch(value)
    if parsed:
        return oklch_to_hex(parsed)
    return None
