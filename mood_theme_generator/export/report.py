from ..contrast import AA_CONTRAST, AAA_CONTRAST, contrast_ratio
from ..palette.names import ANSI_KEYS

MIN_TERMINAL_CONTRAST = 3.0

# (category, [(foreground key, background key)], minimum ratio)
REPORT_CATEGORIES = [
    ("TEXT", [("ink", "surface"), ("ink", "moodSurface")], AAA_CONTRAST),
    ("SELECTION", [("selectionFg", "selectionBg")], AA_CONTRAST),
    (
        "TABS",
        [("tabActiveFg", "tabActiveBg"), ("tabInactiveFg", "tabInactiveBg")],
        AA_CONTRAST,
    ),
    ("TERMINAL", [(key, "terminalBg") for key in ANSI_KEYS[1:]], MIN_TERMINAL_CONTRAST),
]


def _opaque(value):
    return value[:7]


def generate_readability_report(palette, mood=None):
    """Generate a readability report for inspection

    Returns:
        tuple: (report text, list of (fg key, bg key, achieved, required))
    """
    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    if mood:
        report.append(f"Mood: {mood.upper()}")
    report.append(f"Surface:      {palette['surface']}")
    report.append(f"Mood surface: {palette['moodSurface']}")

    issues = []

    for cat_name, pairs, min_contrast in REPORT_CATEGORIES:
        report.append(f"\n{cat_name} (min: {min_contrast}:1)")
        report.append("-" * 50)
        for fg_key, bg_key in pairs:
            fg = _opaque(palette[fg_key])
            bg = _opaque(palette[bg_key])
            ratio = contrast_ratio(fg, bg)

            status = "✓" if ratio >= min_contrast else "✗ FAIL"
            if ratio < min_contrast:
                issues.append((fg_key, bg_key, ratio, min_contrast))

            report.append(f"  {fg_key:26} {fg} on {bg_key:14} {ratio:4.1f}:1  {status}")

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for fg_key, bg_key, achieved, required in issues:
            report.append(f"  - {fg_key} on {bg_key}: {achieved:.1f}:1, needs {required}:1")
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_palette(palette, mood):
    """Print palette info"""
    surface = _opaque(palette["surface"])

    print("\n" + "=" * 60)
    print(f"MOOD PALETTE ({mood.upper()})")
    print("=" * 60)

    for key, value in palette.items():
        contrast = contrast_ratio(_opaque(value), surface)
        print(f"  {key:26} {value:9}  (contrast: {contrast:.1f}:1)")
