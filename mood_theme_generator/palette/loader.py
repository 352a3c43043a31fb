import json

from ..color import HEX_RX, normalize_hex
from .moods import DEFAULT_MOOD
from .names import PALETTE_KEYS


def _normalize_entry(value):
    """'0f1317' -> '#0F1317', '#eee' -> '#EEEEEE'; 4- and 8-digit forms keep their alpha byte."""
    color = normalize_hex(value)
    if not color:
        return None
    digits = HEX_RX.match(value.strip()).group(1)
    if len(digits) == 8:
        return color + digits[6:].upper()
    if len(digits) == 4:
        return color + (digits[3] * 2).upper()
    return color


def load_palette_from_json(json_path):
    """Load a palette previously written by export_json.

    Args:
        json_path: Path to palette JSON file

    Returns:
        tuple: (palette dict of hex strings, mood name)

    Raises:
        ValueError: If the file is missing any palette key
    """
    with open(json_path) as f:
        data = json.load(f)

    palette = {}
    mood = DEFAULT_MOOD

    for key, value in data.items():
        # Skip metadata keys
        if key.startswith("_"):
            if key == "_mood" and isinstance(value, str):
                mood = value
            continue

        color = _normalize_entry(value)
        if color:
            palette[key] = color

    missing = [key for key in PALETTE_KEYS if key not in palette]
    if missing:
        raise ValueError(f"{json_path} is missing palette keys: {', '.join(missing)}")

    return palette, mood
