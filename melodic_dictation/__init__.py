"""Melodic Dictation - an ear-training quiz for four-note melodies."""

from .note_matcher import NoteFormatError, NoteMatcher, normalize
from .note_types import CanonicalNote
from .note_utils import to_asset_key, to_canonical_string, to_display
from .quiz_session import AnswerResult, QuizSession, QuizSettings

__all__ = [
    "AnswerResult",
    "CanonicalNote",
    "NoteFormatError",
    "NoteMatcher",
    "QuizSession",
    "QuizSettings",
    "normalize",
    "to_asset_key",
    "to_canonical_string",
    "to_display",
]
