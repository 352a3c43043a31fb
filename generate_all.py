#!/usr/bin/env python3
"""
Generate mood themes for every tokens JSON and image in the repo.
Consolidates themes into out/themes/ folder.
"""

import argparse
import shutil
import subprocess
from pathlib import Path


def main():
    parser = argparse.ArgumentParser(
        description="Generate mood themes from tokens JSON files and images"
    )
    parser.add_argument(
        "--mood",
        action="append",
        default=None,
        help="Only generate this mood (repeatable)",
    )
    args = parser.parse_args()

    root = Path(__file__).parent
    images_dir = root / "images"
    palettes_dir = root / "palettes"
    out_dir = root / "out"
    themes_dir = out_dir / "themes"

    themes_dir.mkdir(parents=True, exist_ok=True)

    image_extensions = {".png", ".jpg", ".jpeg"}

    images = []
    if images_dir.exists():
        images = [f for f in images_dir.iterdir() if f.suffix.lower() in image_extensions]

    token_files = []
    if palettes_dir.exists():
        token_files = [f for f in palettes_dir.iterdir() if f.suffix.lower() == ".json"]

    if not images and not token_files:
        print(f"No images in {images_dir} or tokens in {palettes_dir}")
        return

    print(f"Found {len(images)} images and {len(token_files)} token files to process\n")

    # Images first become tokens files, then go through the same path
    for image_path in sorted(images):
        theme_name = image_path.stem
        theme_out_dir = out_dir / theme_name
        theme_out_dir.mkdir(parents=True, exist_ok=True)
        tokens_path = theme_out_dir / "tokens.json"

        print(f"{'=' * 60}")
        print(f"Extracting tone from image: {theme_name}")
        print(f"{'=' * 60}")

        cmd = [
            "uv",
            "run",
            "mood-theme-generator",
            "extract",
            str(image_path),
            "-o",
            str(tokens_path),
        ]
        result = subprocess.run(cmd, cwd=root)
        if result.returncode != 0:
            print(f"Error extracting {theme_name}")
            continue

        token_files.append(tokens_path)

    for tokens_path in sorted(token_files):
        theme_name = tokens_path.stem if tokens_path.parent == palettes_dir else tokens_path.parent.name
        theme_out_dir = out_dir / theme_name

        print(f"{'=' * 60}")
        print(f"Generating from tokens: {theme_name}")
        print(f"{'=' * 60}")

        cmd = [
            "uv",
            "run",
            "mood-theme-generator",
            "generate",
            "--tokens",
            str(tokens_path),
            "-o",
            str(theme_out_dir),
            "--name",
            theme_name,
            "--preview",
        ]
        for mood in args.mood or []:
            cmd.extend(["--mood", mood])

        result = subprocess.run(cmd, cwd=root)

        if result.returncode != 0:
            print(f"Error generating {theme_name}")
            continue

        _copy_themes(theme_out_dir, theme_name, themes_dir)
        print()

    print(f"{'=' * 60}")
    print("Done! All themes consolidated in:")
    print(f"  {themes_dir}")
    print(f"{'=' * 60}")


def _copy_themes(theme_out_dir, theme_name, themes_dir):
    """Copy generated theme files to the consolidated themes directory."""
    for theme in sorted(theme_out_dir.glob(f"{theme_name}*.json")):
        shutil.copy(theme, themes_dir / theme.name)
        print(f"Copied {theme.name} to {themes_dir}")


if __name__ == "__main__":
    main()
