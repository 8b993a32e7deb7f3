"""Fixed question pool and note palette for the dictation quiz."""

from typing import List, Optional

from .note_matcher import normalize
from .note_types import Question

NOTES_PER_QUESTION = 4

# Each entry is four Latin note tokens; octave 4 is implied when omitted
QUESTION_POOL = [
    "do re mi fa",
    "fa sol la si",
    "re do si sol",
    "do si3 do re",
    "fa mi fa sol",
    "re mi fa la",
    "do re mi do",
    "fa sol la fa",
    "fa mi re fa",
    "si3 do5 re5 sol",
    "do si do re",
    "fa mi fa la",
    "re5 si sol re5",
    "sol la si re5",
    "do mi re si3",
    "fa la sol re5",
    "si3 sol fa re",
    "sol la sol re5",
    "do mi re mi",
    "la la do5 la",
    "re5 si sol fa",
    "re fa la re5",
    "mi do re mi",
    "sol fa mi re",
    "mi re do mi",
    "sol la sol fa#",
    "do re mi sol",
    "sol fa# sol la",
    "mi do mi sol",
    "sol la si re5",
    "mi sol mi do",
    "do5 sol fa mi",
    "sol la sol fa",
    "si la sol fa",
    "sol do5 si la",
    "re fa mi re",
    "sol mi fa fa#",
    "re mi fa mi",
    "do si3 do re",
    "re mi fa sol",
    "do re mi fa",
    "re5 do5 si la",
    "re5 do4 si do5",
    "mi sol fa# fa",
    "la do5 si la",
    "mi fa sol la",
    "fa mi re mi",
    "re mi fa la",
    "sol la si re5",
]

# Asset keys preloaded at startup: si3 to re5 plus the sharps in between
NOTES_TO_LOAD = [
    "B3", "C4", "Cs4", "D4", "Ds4", "E4", "F4", "Fs4", "G4", "Gs4", "A4", "As4", "B4",
    "C5", "Cs5", "D5",
]

# Tokens emitted by the note buttons
NOTE_PALETTE = [
    "si3", "do4", "re4", "mi4", "fa4",
    "sol4", "la4", "si4", "do5", "re5",
]


def parse_question(text: str) -> Question:
    """Split a pool entry into its note tokens.

    Raises:
        ValueError: If the entry does not hold exactly four tokens
        NoteFormatError: If one of the tokens is not a recognizable note
    """
    tokens = tuple(text.split())
    if len(tokens) != NOTES_PER_QUESTION:
        raise ValueError(
            f"Question '{text}' has {len(tokens)} notes, expected {NOTES_PER_QUESTION}"
        )
    for token in tokens:
        normalize(token)
    return tokens


def load_question_pool(entries: Optional[List[str]] = None) -> List[Question]:
    """Parse every entry of the pool (the built-in one by default)."""
    if entries is None:
        entries = QUESTION_POOL
    return [parse_question(entry) for entry in entries]
