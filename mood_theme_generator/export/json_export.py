import json


def export_json(palette, filepath, mood, tone=None, theme_name=None):
    """Export palette as JSON with mood and tone metadata.

    Args:
        palette: The color palette dict
        filepath: Output file path
        mood: Mood the palette was derived for
        tone: Optional Tone the palette was derived from
        theme_name: Theme display name for metadata
    """
    data = dict(palette)

    data["_mood"] = mood

    if tone is not None:
        data["_tone"] = dict(tone._asdict())

    data["_note"] = (
        "16 terminal colors: terminalAnsi black/red/green/yellow/blue/magenta/cyan/white "
        "with Bright variants. 8-digit values carry an alpha byte."
    )

    if theme_name:
        data["_theme"] = theme_name

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
