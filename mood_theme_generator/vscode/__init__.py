from .lint import REQUIRED_KEYS, lint_directory, lint_failed, lint_theme
from .overlay import apply_to_settings, build_overlay, load_mood_colors
from .template import DEFAULT_TEMPLATE
from .theme import generate_theme, theme_title, write_mood_themes

__all__ = [
    "DEFAULT_TEMPLATE",
    "REQUIRED_KEYS",
    "apply_to_settings",
    "build_overlay",
    "generate_theme",
    "lint_directory",
    "lint_failed",
    "lint_theme",
    "load_mood_colors",
    "theme_title",
    "write_mood_themes",
]
