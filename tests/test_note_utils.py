import unittest

from melodic_dictation.note_matcher import normalize
from melodic_dictation.note_types import CanonicalNote
from melodic_dictation.note_utils import (
    apply_sharp,
    display_sequence,
    to_asset_key,
    to_canonical_string,
    to_display,
    token_to_asset_key,
)


class TestDisplay(unittest.TestCase):
    def test_reference_octave_is_hidden(self):
        self.assertEqual(to_display(normalize("do4")), "Do")
        self.assertEqual(to_display(normalize("sol")), "Sol")

    def test_other_octaves_are_shown(self):
        self.assertEqual(to_display(normalize("re5")), "Re5")
        self.assertEqual(to_display(normalize("si3")), "Si3")

    def test_sharp(self):
        self.assertEqual(to_display(normalize("fa#4")), "Fa#")
        self.assertEqual(to_display(normalize("do#5")), "Do#5")

    def test_sequence(self):
        self.assertEqual(display_sequence(["fa", "sol", "la", "si"]), "Fa, Sol, La, Si")
        self.assertEqual(display_sequence(["si3", "do5", "re5", "sol"]), "Si3, Do5, Re5, Sol")
        self.assertEqual(display_sequence([]), "")


class TestAssetKey(unittest.TestCase):
    def test_sharp_is_spelled_out(self):
        self.assertEqual(to_asset_key(normalize("fa#4")), "Fs4")
        self.assertEqual(token_to_asset_key("C#4"), "Cs4")
        self.assertEqual(token_to_asset_key("re#"), "Ds4")
        self.assertEqual(token_to_asset_key("sol#4"), "Gs4")
        self.assertEqual(token_to_asset_key("la#4"), "As4")

    def test_naturals(self):
        self.assertEqual(token_to_asset_key("si3"), "B3")
        self.assertEqual(token_to_asset_key("do5"), "C5")

    def test_canonical_string_keeps_octave_and_sharp(self):
        self.assertEqual(to_canonical_string(CanonicalNote("F", True, 4)), "F#4")
        self.assertEqual(to_canonical_string(normalize("do")), "C4")


class TestApplySharp(unittest.TestCase):
    def test_inserts_before_octave(self):
        self.assertEqual(apply_sharp("si3"), "si#3")
        self.assertEqual(apply_sharp("fa4"), "fa#4")

    def test_without_octave(self):
        self.assertEqual(apply_sharp("fa"), "fa#4")


if __name__ == "__main__":
    unittest.main()
