"""Mood palettes and editor themes derived from brand tone colors."""

from .palette import MOODS, PALETTE_KEYS, derive_all, derive_palette
from .template import render

__all__ = ["MOODS", "PALETTE_KEYS", "derive_all", "derive_palette", "render"]
