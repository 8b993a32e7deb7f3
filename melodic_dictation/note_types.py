"""Type definitions for the Melodic Dictation project."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class CanonicalNote:
    """A normalized note used for every comparison and lookup."""

    letter: str  # English letter name, one of C D E F G A B
    sharp: bool  # Whether the note carries a sharp
    octave: int  # Single octave digit, 4 is the reference octave

    def __str__(self):
        return f"{self.letter}{'#' if self.sharp else ''}{self.octave}"


# Four raw note tokens, e.g. ("do", "re", "mi", "fa")
Question = Tuple[str, ...]


class QuizState(Enum):
    """States of a quiz session."""

    AWAITING_ANSWER = "awaiting_answer"
    VALIDATING = "validating"
    TERMINAL = "terminal"


class AnswerStatus(Enum):
    """Outcome of submitting an answer."""

    INCOMPLETE = "incomplete"  # Fewer than four notes entered
    CORRECT = "correct"
    INCORRECT = "incorrect"
    CLOSED = "closed"  # Session already finished


@dataclass(frozen=True)
class PlaybackEvent:
    """A single clip scheduled at an offset (seconds) from the start of playback."""

    offset: float
    asset_key: str
    is_reference: bool = False
