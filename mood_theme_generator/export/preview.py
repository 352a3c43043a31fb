from ..contrast import contrast_ratio, pick_foreground
from ..palette.names import ANSI_KEYS, UI_KEYS
from ..template import render

PREVIEW_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>Mood Palette Preview</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: 'SF Mono', 'Fira Code', monospace;
            background: ${surface};
            color: ${ink};
            padding: 40px;
            min-height: 100vh;
        }
        h1 { margin-bottom: 10px; font-weight: 400; }
        .mood-badge {
            display: inline-block;
            padding: 4px 12px;
            border-radius: 4px;
            font-size: 12px;
            margin-bottom: 30px;
            background: ${moodSurface};
            border: 1px solid ${moodHalo};
        }
        h2 {
            margin: 30px 0 15px 0;
            font-weight: 400;
            font-size: 14px;
            text-transform: uppercase;
            letter-spacing: 2px;
            color: ${gutter};
        }
        .palette-section {
            display: flex;
            flex-wrap: wrap;
            gap: 15px;
        }
        .color-card {
            width: 160px;
            border-radius: 8px;
            overflow: hidden;
            background: ${chromeSoft};
        }
        .color-swatch {
            height: 64px;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 12px;
        }
        .color-info { padding: 10px; font-size: 11px; }
        .color-name { font-weight: 600; margin-bottom: 4px; }
        .terminal-grid {
            display: grid;
            grid-template-columns: repeat(8, 1fr);
            gap: 10px;
            padding: 16px;
            border-radius: 8px;
            background: ${terminalBg};
        }
        .terminal-color { padding: 14px 0; text-align: center; font-size: 11px; }
        .selection-sample {
            margin-top: 30px;
            padding: 16px;
            border-radius: 8px;
            background: ${selectionBg};
            color: ${selectionFg};
        }
    </style>
</head>
<body>
    <h1>Mood Palette</h1>
    <div class="mood-badge">${moodName}</div>
    <h2>Interface</h2>
    <div class="palette-section">
${uiCards}
    </div>
    <h2>Terminal</h2>
    <div class="terminal-grid">
${terminalColors}
    </div>
    <div class="selection-sample">Selected text reads like this.</div>
</body>
</html>
"""


def make_card(name, value, surface):
    swatch_fg = pick_foreground(value[:7], "#FFFFFF")
    ratio = contrast_ratio(value[:7], surface)
    return (
        f'        <div class="color-card">'
        f'<div class="color-swatch" style="background: {value}; color: {swatch_fg}">{ratio:.1f}:1</div>'
        f'<div class="color-info"><div class="color-name">{name}</div>{value}</div></div>'
    )


def make_terminal_color(name, value):
    label = name.replace("terminalAnsi", "")
    return f'        <div class="terminal-color" style="color: {value}">{label}</div>'


def create_html_preview(palette, output_path, mood):
    """Create an HTML preview of the palette"""
    surface = palette["surface"]
    values = dict(palette)
    values["moodName"] = mood.capitalize()
    values["uiCards"] = "\n".join(make_card(n, palette[n], surface) for n in UI_KEYS)
    values["terminalColors"] = "\n".join(make_terminal_color(n, palette[n]) for n in ANSI_KEYS)

    with open(output_path, "w") as f:
        f.write(render(PREVIEW_TEMPLATE, values))
