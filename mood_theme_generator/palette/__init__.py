from .generator import derive_all, derive_palette
from .loader import load_palette_from_json
from .moods import DEFAULT_MOOD, MOODS, resolve_mood
from .names import PALETTE_KEYS
from .tone import THEME_DEFAULTS, TOKEN_DEFAULTS, Tone, ensure_tone, resolve_tone

__all__ = [
    "DEFAULT_MOOD",
    "MOODS",
    "PALETTE_KEYS",
    "THEME_DEFAULTS",
    "TOKEN_DEFAULTS",
    "Tone",
    "derive_all",
    "derive_palette",
    "ensure_tone",
    "load_palette_from_json",
    "resolve_mood",
    "resolve_tone",
]
