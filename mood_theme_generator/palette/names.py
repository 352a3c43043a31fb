# Every palette carries exactly these keys, in this order.

ANSI_COLORS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


def ansi_key(color, bright=False):
    """ansi_key("red", bright=True) -> "terminalAnsiBrightRed" """
    prefix = "terminalAnsiBright" if bright else "terminalAnsi"
    return f"{prefix}{color.capitalize()}"


UI_KEYS = (
    "surface",
    "ink",
    "accent",
    "accentSoft",
    "caret",
    "selection",
    "selectionMuted",
    "line",
    "lineSoft",
    "chrome",
    "chromeSoft",
    "gutter",
    "gutterSoft",
    "tabActiveBg",
    "tabInactiveBg",
    "tabBorder",
    "tabActiveBorder",
    "tabUnfocusedActiveBorder",
    "tabActiveFg",
    "tabInactiveFg",
    "fieldBg",
    "fieldBgActive",
    "fieldBorder",
    "fieldPlaceholder",
    "focusRing",
    "moodSurface",
    "moodHalo",
    "selectionBg",
    "inputBg",
    "selectionFg",
    "terminalBg",
    "terminalFg",
    "terminalCursor",
)

ANSI_KEYS = tuple(ansi_key(color) for color in ANSI_COLORS) + tuple(
    ansi_key(color, bright=True) for color in ANSI_COLORS
)

PALETTE_KEYS = UI_KEYS + ANSI_KEYS
