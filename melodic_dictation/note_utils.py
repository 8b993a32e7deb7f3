"""Utility functions for formatting canonical notes."""

import re
from typing import Iterable

from .note_matcher import DEFAULT_OCTAVE, NoteMatcher
from .note_types import CanonicalNote

ENGLISH_TO_LATIN = {
    "C": "Do",
    "D": "Re",
    "E": "Mi",
    "F": "Fa",
    "G": "Sol",
    "A": "La",
    "B": "Si",
}

# Spelled-out sharp used in filenames and URLs
ASSET_SHARP_SUFFIX = "s"

_TRAILING_DIGIT = re.compile(r"(\d)$")


def to_canonical_string(note: CanonicalNote) -> str:
    """Return the canonical string form, e.g. 'C4', 'F#4', 'D5'."""
    return str(note)


def to_display(note: CanonicalNote) -> str:
    """Convert a canonical note to the Latin name shown to the user.

    The reference octave (4) is implicit and is not shown.

    Args:
        note: The canonical note

    Returns:
        str: Display name (e.g., 'Do', 'Fa#', 'Re5', 'Si3')

    Examples:
        >>> to_display(CanonicalNote("C", False, 4))  # Returns 'Do'
        >>> to_display(CanonicalNote("D", False, 5))  # Returns 'Re5'
    """
    text = ENGLISH_TO_LATIN.get(note.letter, note.letter)
    if note.sharp:
        text += "#"
    if note.octave == DEFAULT_OCTAVE:
        return text
    return f"{text}{note.octave}"


def to_asset_key(note: CanonicalNote) -> str:
    """Return the ASCII-safe key used to locate a note's audio clip (F#4 -> Fs4)."""
    accidental = ASSET_SHARP_SUFFIX if note.sharp else ""
    return f"{note.letter}{accidental}{note.octave}"


def token_to_asset_key(token: str) -> str:
    """Normalize a raw token and return its asset key."""
    return to_asset_key(NoteMatcher.normalize(token))


def display_sequence(tokens: Iterable[str]) -> str:
    """Normalize each token and join the display names, e.g. 'Fa, Sol, La, Si'."""
    return ", ".join(to_display(NoteMatcher.normalize(t)) for t in tokens)


def apply_sharp(token: str) -> str:
    """Insert a sharp marker before the octave digit of a palette token.

    'si3' becomes 'si#3'; a token without octave gets the reference octave ('fa' -> 'fa#4').
    """
    if _TRAILING_DIGIT.search(token):
        return f"{token[:-1]}#{token[-1]}"
    return f"{token}#{DEFAULT_OCTAVE}"
