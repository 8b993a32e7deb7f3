import re
from typing import Sequence

from .logger import get_logger
from .note_types import CanonicalNote

# Get logger for this module
logger = get_logger(__name__)

# Compile regex to split a sharp-free token into base name and octave digit
# This pattern matches:
# - Base name (letters only, e.g. 'C', 'DO', 'SOL')
# - Optional single trailing octave digit
NOTE_PATTERN = re.compile(r"^([A-Z]+)([0-9]?)$")

DEFAULT_OCTAVE = 4
ENGLISH_LETTERS = ("C", "D", "E", "F", "G", "A", "B")

LATIN_TO_ENGLISH = {
    "DO": "C",
    "RE": "D",
    "MI": "E",
    "FA": "F",
    "SOL": "G",
    "SO": "G",  # Truncated form found in some question data
    "LA": "A",
    "SI": "B",
}


class NoteFormatError(ValueError):
    """Raised when a note token cannot be normalized."""


class NoteMatcher:
    """
    Encapsulates logic for normalizing note tokens written in Latin or English
    notation and comparing melodic sequences of them.
    """

    @staticmethod
    def normalize(token: str) -> CanonicalNote:
        """
        Convert a note token into its canonical form.

        Args:
            token: The note token (e.g., 'do', 'fa#4', 'FA4#', 'si3', 'C#4')
        Returns:
            CanonicalNote: letter, sharp flag and octave (defaults to 4)
        Raises:
            NoteFormatError: If the token is not a recognizable note
        """
        raw = token
        text = str(token).strip().upper() if token is not None else ""
        if not text:
            raise NoteFormatError(f"Malformed note: '{raw}' is empty")

        # The sharp may sit before or after the octave digit
        sharp_count = text.count("#")
        if sharp_count > 1:
            raise NoteFormatError(f"Malformed note: '{raw}' has more than one sharp")
        sharp = sharp_count == 1
        text = text.replace("#", "")

        match = NOTE_PATTERN.match(text)
        if not match:
            raise NoteFormatError(f"Malformed note: '{raw}'")

        base, octave_digit = match.groups()
        octave = int(octave_digit) if octave_digit else DEFAULT_OCTAVE

        if base in ENGLISH_LETTERS:
            letter = base
        elif base in LATIN_TO_ENGLISH:
            letter = LATIN_TO_ENGLISH[base]
        else:
            raise NoteFormatError(f"Unrecognized note name: '{raw}'")

        note = CanonicalNote(letter=letter, sharp=sharp, octave=octave)
        logger.debug("Normalized '%s' -> %s", raw, note)
        return note

    @classmethod
    def match(cls, target: str, played: str) -> bool:
        """
        Check if two note tokens denote the same canonical note.

        Args:
            target: The expected note (e.g., 'sol', 'G4')
            played: The entered note (e.g., 'SOL4', 'g')
        Returns:
            bool: True if letter, accidental and octave all agree
        """
        return cls.normalize(target) == cls.normalize(played)

    @classmethod
    def sequences_match(cls, expected: Sequence[str], answer: Sequence[str]) -> bool:
        """
        Compare two note sequences in order.

        Order matters: ['do', 're'] does not match ['re', 'do'].

        Args:
            expected: Tokens of the question
            answer: Tokens entered by the user
        Returns:
            bool: True if both have the same length and match element-wise
        """
        if len(expected) != len(answer):
            logger.debug(
                "Length mismatch: expected %d notes, got %d", len(expected), len(answer)
            )
            return False

        expected_notes = [cls.normalize(t) for t in expected]
        answer_notes = [cls.normalize(t) for t in answer]
        result = expected_notes == answer_notes
        logger.debug(
            "Comparing %s with %s -> %s",
            [str(n) for n in expected_notes],
            [str(n) for n in answer_notes],
            "MATCH" if result else "NO MATCH",
        )
        return result


def normalize(token: str) -> CanonicalNote:
    """Module-level shortcut for NoteMatcher.normalize."""
    return NoteMatcher.normalize(token)
