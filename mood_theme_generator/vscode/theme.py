import os

from ..palette import DEFAULT_MOOD, MOODS, derive_palette
from ..template import render
from .template import DEFAULT_TEMPLATE


def theme_title(slug, mood=None):
    """'gratia-garden', 'soft' -> 'Gratia Garden (Soft)'"""
    title = " ".join(part.capitalize() for part in slug.replace("_", "-").split("-") if part)
    if mood:
        title = f"{title} ({mood.capitalize()})"
    return title


def generate_theme(palette, theme_name, template=None):
    """Render a theme document from a palette.

    Args:
        palette: The color palette dict
        theme_name: Display name, available to the template as ${themeName}
        template: Template text with ${name} placeholders (DEFAULT_TEMPLATE if None)

    Returns:
        The rendered document text
    """
    values = dict(palette)
    values["themeName"] = theme_name
    return render(template or DEFAULT_TEMPLATE, values)


def mood_theme_path(output_dir, slug, mood):
    return os.path.join(output_dir, f"{slug}-{mood}.json")


def write_mood_themes(tokens, output_dir, slug, template=None, moods=MOODS, palettes=None):
    """Write one theme file per mood, plus <slug>.json for the default mood.

    Args:
        tokens: Tokens dict for derive_palette
        output_dir: Directory for the theme files
        slug: File name stem, also used for the display name
        template: Optional template text
        moods: Moods to write
        palettes: Optional dict of mood -> palette already derived from tokens

    Returns:
        list of written paths
    """
    os.makedirs(output_dir, exist_ok=True)
    palettes = palettes or {}
    written = []

    for mood in moods:
        palette = palettes.get(mood) or derive_palette(tokens, mood)
        themed = generate_theme(palette, theme_title(slug, mood), template)

        out_path = mood_theme_path(output_dir, slug, mood)
        with open(out_path, "w") as f:
            f.write(themed)
        written.append(out_path)

        if mood == DEFAULT_MOOD:
            default_path = os.path.join(output_dir, f"{slug}.json")
            with open(default_path, "w") as f:
                f.write(themed)
            written.append(default_path)

    return written
