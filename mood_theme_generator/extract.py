"""
Suggest a tone (surface, ink, accent) from an image.

Clusters the image's pixels with k-means and picks the darkest cluster for
the surface, the lightest for the ink and the most chromatic for the accent.
"""

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from .color import Oklch, hex_to_oklch, oklch_to_hex, rgb_to_hex
from .contrast import ensure_contrast, relative_luminance

MAX_SURFACE_LIGHTNESS = 0.22  # Surfaces are pushed at least this dark
MAX_SURFACE_CHROMA = 0.04
MIN_INK_LIGHTNESS = 0.9
MAX_INK_CHROMA = 0.02
MIN_ACCENT_CONTRAST = 3.0  # Accent against surface, for borders and cursors


def extract_colors(image_path, n_colors=12):
    """Extract dominant colors using k-means clustering

    Returns:
        list of hex strings, one per cluster
    """
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((300, 300))
    pixels = np.array(img).reshape(-1, 3)

    # Remove extreme pixels
    mask = (pixels.sum(axis=1) > 30) & (pixels.sum(axis=1) < 735)
    filtered_pixels = pixels[mask]

    if len(filtered_pixels) < n_colors:
        filtered_pixels = pixels

    n_clusters = min(n_colors, len(np.unique(filtered_pixels, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    kmeans.fit(filtered_pixels)

    return [rgb_to_hex(*center) for center in kmeans.cluster_centers_]


def suggest_tone(image_path, n_colors=12):
    """Suggest a tone dict from an image.

    Args:
        image_path: Path to the source image
        n_colors: Number of clusters to extract

    Returns:
        dict with surface, ink and accent hex strings
    """
    colors = extract_colors(image_path, n_colors=n_colors)
    by_luminance = sorted(colors, key=relative_luminance)

    darkest = hex_to_oklch(by_luminance[0])
    surface = oklch_to_hex(
        Oklch(
            l=min(darkest.l, MAX_SURFACE_LIGHTNESS),
            c=min(darkest.c, MAX_SURFACE_CHROMA),
            h=darkest.h,
        )
    )

    lightest = hex_to_oklch(by_luminance[-1])
    ink = oklch_to_hex(
        Oklch(
            l=max(lightest.l, MIN_INK_LIGHTNESS),
            c=min(lightest.c, MAX_INK_CHROMA),
            h=lightest.h,
        )
    )

    accent = max(colors, key=lambda c: hex_to_oklch(c).c)
    accent = ensure_contrast(accent, surface, MIN_ACCENT_CONTRAST) or accent

    return {"surface": surface, "ink": ink, "accent": accent}
