import itertools
import unittest

import pytest

from melodic_dictation.note_matcher import NoteFormatError, NoteMatcher, normalize
from melodic_dictation.note_types import CanonicalNote

LATIN_TO_LETTER = {
    "do": "C",
    "re": "D",
    "mi": "E",
    "fa": "F",
    "sol": "G",
    "la": "A",
    "si": "B",
}


def latin_cases():
    cases = []
    for (syllable, letter), octave, sharp in itertools.product(
        LATIN_TO_LETTER.items(), (3, 4, 5), (False, True)
    ):
        expected = CanonicalNote(letter, sharp, octave)
        accidental = "#" if sharp else ""
        for name in (syllable, syllable.upper(), syllable.capitalize()):
            cases.append((f"{name}{accidental}{octave}", expected))
            cases.append((f"{name}{octave}{accidental}", expected))
            if octave == 4:
                cases.append((f"{name}{accidental}", expected))
    return cases


@pytest.mark.parametrize("token, expected", latin_cases())
def test_latin_tokens_normalize_to_english_letters(token, expected):
    assert normalize(token) == expected


@pytest.mark.parametrize("token, expected", latin_cases())
def test_english_and_latin_agree(token, expected):
    accidental = "#" if expected.sharp else ""
    english = f"{expected.letter.lower()}{accidental}{expected.octave}"
    assert normalize(english) == normalize(token)


class TestNoteMatcher(unittest.TestCase):
    def test_default_octave(self):
        self.assertEqual(normalize("do"), CanonicalNote("C", False, 4))
        self.assertEqual(normalize("C"), CanonicalNote("C", False, 4))

    def test_sharp_position(self):
        expected = CanonicalNote("F", True, 4)
        self.assertEqual(normalize("FA#4"), expected)
        self.assertEqual(normalize("FA4#"), expected)
        self.assertEqual(normalize("fa#"), expected)

    def test_truncated_sol(self):
        self.assertEqual(normalize("so"), CanonicalNote("G", False, 4))
        self.assertEqual(normalize("SO5"), CanonicalNote("G", False, 5))

    def test_whitespace_is_trimmed(self):
        self.assertEqual(normalize("  Re5 "), CanonicalNote("D", False, 5))

    def test_octave_not_range_checked(self):
        self.assertEqual(normalize("do9").octave, 9)
        self.assertEqual(normalize("C0").octave, 0)

    def test_idempotent_on_canonical_output(self):
        for token in ["do", "fa#4", "si3", "C#4", "re5", "so", "la4#", "G"]:
            note = normalize(token)
            self.assertEqual(normalize(str(note)), note)

    def test_malformed_tokens(self):
        for token in ["", "   ", "xx", "H4", "do##4", "do10", "4", "#", "dó"]:
            with self.assertRaises(NoteFormatError):
                normalize(token)

    def test_error_is_value_error(self):
        with self.assertRaises(ValueError):
            normalize("ut")

    def test_match(self):
        self.assertTrue(NoteMatcher.match("sol", "G4"))
        self.assertTrue(NoteMatcher.match("si3", "b3"))
        self.assertFalse(NoteMatcher.match("si3", "si"))
        self.assertFalse(NoteMatcher.match("fa", "fa#"))

    def test_sequences_are_order_sensitive(self):
        self.assertTrue(
            NoteMatcher.sequences_match(["do", "re", "mi", "fa"], ["C4", "d", "MI4", "fa"])
        )
        self.assertFalse(
            NoteMatcher.sequences_match(["do", "re", "mi", "fa"], ["re", "do", "mi", "fa"])
        )

    def test_sequences_of_different_length(self):
        self.assertFalse(NoteMatcher.sequences_match(["do", "re", "mi", "fa"], ["do", "re", "mi"]))


if __name__ == "__main__":
    unittest.main()
