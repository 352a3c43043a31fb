"""
Tone token ingestion.

Pulls surface/ink/accent out of a design-system stylesheet (or a fallback
tokens JSON) and writes them to tokens.json for the theme generator.
"""

import json
import logging
import os
import re
import time
from collections import namedtuple
from datetime import datetime, timezone

from .color import parse_color
from .palette.tone import ensure_tone, tone_fields

logger = logging.getLogger(__name__)

TokenSource = namedtuple("TokenSource", ["path", "kind"])

DEFAULT_SKIN = "MOON"
DARK_THEME_SELECTOR = ":root[data-theme='dark']"
SKIN_SELECTOR = ":root[data-skin-id='{skin}']"

TONE_RX = re.compile(r"--tone-(surface|ink|accent)\s*:\s*([^;]+);", re.I)
COLOR_RX = re.compile(r"--color-(surface|text|accent)\s*:\s*([^;]+);", re.I)

WATCH_INTERVAL = 0.25  # seconds between mtime checks
WATCH_DEBOUNCE = 0.12


def resolve_skin(raw):
    """Skin name from an environment-style value: unset -> MOON, "none" -> None."""
    if raw is None or raw == "":
        return DEFAULT_SKIN
    if raw.lower() == "none":
        return None
    return raw.upper()


def extract_block(css, selector):
    """Return the body of the brace block following selector, or None."""
    anchor = css.find(selector)
    if anchor == -1:
        return None
    brace_start = css.find("{", anchor)
    if brace_start == -1:
        return None
    depth = 0
    for i in range(brace_start, len(css)):
        char = css[i]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return css[brace_start + 1 : i]
    return None


def _collect_colors(block):
    tone = {}
    for name, raw in COLOR_RX.findall(block):
        value = parse_color(raw)
        if value is None:
            continue
        key = "ink" if name.lower() == "text" else name.lower()
        tone[key] = value
    return tone


def parse_css_tone(css, skin=None):
    """Extract a tone dict from stylesheet text.

    Later sources override earlier ones: --tone-* declarations, then
    --color-* inside the dark theme block, then --color-* inside the skin
    block when a skin is given. Values that aren't hex or oklch() are skipped.
    """
    tone = {}
    for name, raw in TONE_RX.findall(css):
        value = parse_color(raw)
        if value:
            tone[name.lower()] = value

    dark_block = extract_block(css, DARK_THEME_SELECTOR)
    if dark_block:
        tone.update(_collect_colors(dark_block))

    if skin:
        skin_block = extract_block(css, SKIN_SELECTOR.format(skin=skin))
        if skin_block:
            tone.update(_collect_colors(skin_block))

    return tone


def resolve_source(candidates, fallback_json=None):
    """Pick the first existing stylesheet, else the fallback JSON, else None."""
    for candidate in candidates:
        if candidate and os.path.isfile(candidate):
            return TokenSource(candidate, "css")
    if fallback_json and os.path.isfile(fallback_json):
        return TokenSource(fallback_json, "json")
    return None


def read_tokens(path, fallback_path=None):
    """Read a tokens JSON document.

    An unreadable primary path falls back to fallback_path. Malformed JSON is
    logged and treated as an empty document.
    """
    try:
        with open(path) as f:
            source = f.read()
    except OSError:
        if not fallback_path:
            raise
        logger.info("%s not readable, using %s", path, fallback_path)
        with open(fallback_path) as f:
            source = f.read()

    try:
        data = json.loads(source)
    except json.JSONDecodeError as e:
        logger.warning("Ignoring malformed tokens JSON in %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def write_tokens(tone, out_path, source_path):
    payload = {
        "tone": ensure_tone(tone),
        "meta": {
            "source": source_path,
            "generatedAt": datetime.now(timezone.utc).isoformat(),
        },
    }
    with open(out_path, "w") as f:
        json.dump(payload, f, indent=2)
    logger.info("Wrote %s from %s", out_path, source_path)
    return payload


def pull_tokens(source, out_path, skin=None):
    """Read tone values from source and write them to out_path.

    Returns:
        The written payload dict
    """
    if source.kind == "css":
        with open(source.path) as f:
            tone = parse_css_tone(f.read(), skin=skin)
    else:
        tone = tone_fields(read_tokens(source.path))
    return write_tokens(tone, out_path, source.path)


def watch_tokens(source, out_path, skin=None, interval=WATCH_INTERVAL, debounce=WATCH_DEBOUNCE):
    """Re-pull tokens whenever the stylesheet changes. Runs until interrupted."""
    last_mtime = os.stat(source.path).st_mtime
    logger.info("Watching %s for token changes", source.path)
    while True:
        time.sleep(interval)
        try:
            mtime = os.stat(source.path).st_mtime
        except OSError as e:
            logger.warning("Watch check failed: %s", e)
            continue
        if mtime == last_mtime:
            continue
        time.sleep(debounce)
        try:
            last_mtime = os.stat(source.path).st_mtime
            pull_tokens(source, out_path, skin=skin)
        except (OSError, ValueError) as e:
            logger.warning("Watch update failed: %s", e)
