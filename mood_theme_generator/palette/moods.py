from collections import namedtuple

from ..blend import Tuning

MoodTuning = namedtuple("MoodTuning", ["normal", "bright"])

MOODS = ("soft", "focused", "celebratory")
DEFAULT_MOOD = "soft"
NEUTRAL_MOOD = "focused"

MAX_MOOD_STRENGTH = 0.35  # How far surfaces may lean toward the accent

# How strongly the accent tints surface-derived colors
MOOD_STRENGTH = {
    "soft": 0.08,
    "focused": 0.14,
    "celebratory": 0.18,
}

# OKLCH nudges applied to the 8 normal and 8 bright terminal colors
ANSI_MOOD_TUNING = {
    "soft": MoodTuning(normal=Tuning(l=-0.01, c=-0.06), bright=Tuning(l=-0.02, c=-0.1)),
    "focused": MoodTuning(normal=Tuning(l=0, c=0), bright=Tuning(l=0, c=0)),
    "celebratory": MoodTuning(normal=Tuning(l=0.01, c=0.06), bright=Tuning(l=0.03, c=0.12)),
}

# Hand-picked extra emphasis on top of the table above. Only celebratory has one.
ACCENT_EMPHASIS = {
    "celebratory": {
        "colors": ("red", "magenta"),
        "tuning": MoodTuning(normal=Tuning(l=0.01, c=0.08), bright=Tuning(l=0.02, c=0.16)),
    },
}


def resolve_mood(mood):
    """Return a known mood name, or DEFAULT_MOOD for anything else."""
    if isinstance(mood, str) and mood.strip().lower() in MOODS:
        return mood.strip().lower()
    return DEFAULT_MOOD


def mood_strength(mood):
    strength = MOOD_STRENGTH.get(mood, MOOD_STRENGTH[DEFAULT_MOOD])
    return max(0.0, min(MAX_MOOD_STRENGTH, strength))


def mood_tuning(mood):
    """General ANSI tuning for a mood. Unmapped moods get the neutral (zero) tuning."""
    return ANSI_MOOD_TUNING.get(mood, ANSI_MOOD_TUNING[NEUTRAL_MOOD])
