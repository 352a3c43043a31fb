import argparse
import json
import logging
import os
import sys

from .export import create_html_preview, export_json, generate_readability_report, print_palette
from .extract import suggest_tone
from .palette import MOODS, derive_all, load_palette_from_json, resolve_mood, resolve_tone
from .tokens import (
    pull_tokens,
    read_tokens,
    resolve_skin,
    resolve_source,
    watch_tokens,
)
from .vscode import (
    apply_to_settings,
    build_overlay,
    generate_theme,
    lint_directory,
    lint_failed,
    load_mood_colors,
    theme_title,
    write_mood_themes,
)

DEFAULT_SLUG = "gratia-garden-dark"
DEFAULT_TOKENS = "tokens.json"
FALLBACK_TOKENS = "tokens.example.json"
DEFAULT_THEMES_DIR = "themes"

# Stylesheets checked for tone tokens, after $THEME_TOKENS
CSS_CANDIDATES = (
    os.path.join("..", "garden-core", "ui", "src", "styles", "tokens.css"),
    os.path.join("..", "garden-core", "packages", "tokens", "theme.css"),
    os.path.join("..", "ui", "src", "styles", "tokens.css"),
    os.path.join("..", "..", "ui", "src", "styles", "tokens.css"),
)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Derive mood palettes from brand tone colors and render editor themes"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Render a theme file per mood")
    generate.add_argument(
        "--tokens",
        metavar="JSON",
        default=DEFAULT_TOKENS,
        help=f"Tokens JSON (default: {DEFAULT_TOKENS}, falls back to {FALLBACK_TOKENS})",
    )
    generate.add_argument(
        "--from-palette",
        metavar="JSON",
        help="Render from a previously exported palette JSON instead of tokens",
    )
    generate.add_argument("--template", metavar="PATH", help="Theme template with ${name} placeholders")
    generate.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=DEFAULT_THEMES_DIR,
        help=f"Output directory (default: {DEFAULT_THEMES_DIR})",
    )
    generate.add_argument("--name", default=DEFAULT_SLUG, help=f"Theme file stem (default: {DEFAULT_SLUG})")
    generate.add_argument(
        "--mood",
        action="append",
        choices=MOODS,
        help="Mood to generate (repeatable, default: all)",
    )
    generate.add_argument("--palette", action="store_true", help="Also export palette JSON per mood")
    generate.add_argument("--preview", action="store_true", help="Also write an HTML preview per mood")
    generate.add_argument("--report", action="store_true", help="Print palettes and readability reports")

    tokens = subparsers.add_parser("tokens", help="Pull tone tokens from a stylesheet into tokens.json")
    tokens.add_argument("--source", metavar="CSS", help="Stylesheet to read (default: $THEME_TOKENS, then known paths)")
    tokens.add_argument("--output", "-o", default=DEFAULT_TOKENS, help=f"Tokens file to write (default: {DEFAULT_TOKENS})")
    tokens.add_argument("--skin", default=None, help="Skin block to apply (default: $THEME_SKIN or MOON, 'none' to skip)")
    tokens.add_argument("--watch", action="store_true", help="Keep watching the stylesheet for changes")

    lint = subparsers.add_parser("lint", help="Check generated themes for required and deprecated keys")
    lint.add_argument("themes_dir", nargs="?", default=DEFAULT_THEMES_DIR)

    extract = subparsers.add_parser("extract", help="Suggest tone tokens from an image")
    extract.add_argument("image_path", help="Path to the source image")
    extract.add_argument("--output", "-o", default=None, help="Write tokens JSON here instead of printing it")

    overlay = subparsers.add_parser("overlay", help="Extract the mood colors of a theme as editor overrides")
    overlay.add_argument("theme_path", help="Generated theme JSON")
    overlay.add_argument("--settings", metavar="JSON", help="Merge into this editor settings.json")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "generate": _run_generate,
        "tokens": _run_tokens,
        "lint": _run_lint,
        "extract": _run_extract,
        "overlay": _run_overlay,
    }
    try:
        return handlers[args.command](args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _read_template(path):
    if not path:
        return None
    with open(path) as f:
        return f.read()


def _run_generate(args):
    """Generate theme files for each mood."""
    template = _read_template(args.template)
    output_dir = args.output
    os.makedirs(output_dir, exist_ok=True)

    if args.from_palette:
        return _run_from_palette(args, template)

    fallback = FALLBACK_TOKENS if args.tokens == DEFAULT_TOKENS else None
    tokens = read_tokens(args.tokens, fallback_path=fallback)
    tone = resolve_tone(tokens)
    moods = args.mood or list(MOODS)

    print(f"Tone: surface={tone.surface} ink={tone.ink} accent={tone.accent}")

    palettes = derive_all(tokens, moods)
    for mood, palette in palettes.items():
        if args.report:
            print_palette(palette, mood)
            report, _ = generate_readability_report(palette, mood)
            print("\n" + report)
        if args.palette:
            export_json(
                palette,
                os.path.join(output_dir, f"palette-{mood}.json"),
                mood,
                tone=tone,
                theme_name=theme_title(args.name, mood),
            )
        if args.preview:
            create_html_preview(palette, os.path.join(output_dir, f"palette_preview-{mood}.html"), mood)

    written = write_mood_themes(tokens, output_dir, args.name, template, moods, palettes=palettes)
    for path in written:
        print(f"Theme → {path}")
    return 0


def _run_from_palette(args, template):
    """Render a single theme from an exported palette JSON."""
    palette, mood = load_palette_from_json(args.from_palette)
    mood = resolve_mood(mood)
    out_path = os.path.join(args.output, f"{args.name}-{mood}.json")

    with open(out_path, "w") as f:
        f.write(generate_theme(palette, theme_title(args.name, mood), template))

    print(f"Theme → {out_path}")
    return 0


def _run_tokens(args):
    """Pull tone tokens, optionally watching the stylesheet."""
    skin = resolve_skin(args.skin if args.skin is not None else os.environ.get("THEME_SKIN"))
    if args.source:
        candidates = [args.source]
    else:
        candidates = [os.environ.get("THEME_TOKENS"), *CSS_CANDIDATES]

    source = resolve_source(candidates, fallback_json=FALLBACK_TOKENS)
    if source is None:
        print("No token source found; set THEME_TOKENS or add tokens.example.json", file=sys.stderr)
        return 1

    payload = pull_tokens(source, args.output, skin=skin)
    print(f"Wrote {args.output} ← {source.path}")
    print(json.dumps(payload["tone"], indent=2))

    if args.watch:
        if source.kind != "css":
            print("Watch mode needs a stylesheet source; not watching.")
            return 0
        print(f"Watching {source.path} for token changes (Ctrl+C to stop)")
        try:
            watch_tokens(source, args.output, skin=skin)
        except KeyboardInterrupt:
            pass
    return 0


def _run_lint(args):
    """Lint generated theme files."""
    results = lint_directory(args.themes_dir)

    for name, result in results.items():
        if result.deprecated:
            print(f"✖ {name}: deprecated keys:\n   - " + "\n   - ".join(result.deprecated))
        if result.missing:
            print(f"✖ {name}: missing keys:\n   - " + "\n   - ".join(result.missing))
        if result.non_hex:
            pairs = [f"{key} → {value}" for key, value in result.non_hex]
            print(f"! {name}: non-hex values (ok if intentional):\n   - " + "\n   - ".join(pairs))

    if any(lint_failed(r) for r in results.values()):
        print("Theme lint failed.")
        return 1
    print("✓ Theme lint passed.")
    return 0


def _run_extract(args):
    """Suggest tone tokens from an image."""
    print(f"Analyzing: {args.image_path}")
    tone = suggest_tone(args.image_path)
    payload = {"tone": tone, "meta": {"source": os.path.basename(args.image_path)}}

    if args.output:
        with open(args.output, "w") as f:
            json.dump(payload, f, indent=2)
        print(f"Wrote {args.output}")
    else:
        print(json.dumps(payload, indent=2))
    return 0


def _run_overlay(args):
    """Print or apply the mood overlay of a theme."""
    overlay = build_overlay(load_mood_colors(args.theme_path))
    if args.settings:
        apply_to_settings(args.settings, overlay)
        print(f"Applied {len(overlay)} mood colors to {args.settings}")
    else:
        print(json.dumps(overlay, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
