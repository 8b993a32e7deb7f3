import os
import tempfile
import unittest
from unittest import mock

import numpy as np
import soundfile as sf

from melodic_dictation.audio.asset_cache import AudioAssetCache


class TestAudioAssetCache(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.sounds_dir = self.tmp.name
        for key in ("C4", "Fs4"):
            sf.write(
                os.path.join(self.sounds_dir, f"{key}.wav"),
                np.zeros(800, dtype="float32"),
                8000,
            )

    def tearDown(self):
        self.tmp.cleanup()

    def test_load_decodes_clip(self):
        cache = AudioAssetCache(self.sounds_dir)
        clip = cache.load("Fs4")

        self.assertIsNotNone(clip)
        self.assertEqual(clip.key, "Fs4")
        self.assertEqual(clip.sample_rate, 8000)
        self.assertEqual(clip.data.shape, (800, 1))
        self.assertAlmostEqual(clip.duration, 0.1)
        self.assertIn("Fs4", cache)

    def test_repeated_loads_reuse_decoded_clip(self):
        cache = AudioAssetCache(self.sounds_dir)
        with mock.patch(
            "melodic_dictation.audio.asset_cache.sf.read", wraps=sf.read
        ) as read:
            first = cache.load("C4")
            second = cache.load("C4")

        self.assertIs(first, second)
        self.assertEqual(read.call_count, 1)

    def test_missing_file(self):
        cache = AudioAssetCache(self.sounds_dir)
        with self.assertLogs("melodic_dictation.audio.asset_cache", level="ERROR"):
            self.assertIsNone(cache.load("D5"))
        self.assertNotIn("D5", cache)

    def test_undecodable_file(self):
        with open(os.path.join(self.sounds_dir, "D4.wav"), "wb") as f:
            f.write(b"not a wav file")
        cache = AudioAssetCache(self.sounds_dir)
        with self.assertLogs("melodic_dictation.audio.asset_cache", level="ERROR"):
            self.assertIsNone(cache.load("D4"))

    def test_extension_fallback(self):
        open(os.path.join(self.sounds_dir, "E4.mp3"), "wb").close()
        cache = AudioAssetCache(self.sounds_dir, extensions=("wav", ".mp3"))

        self.assertEqual(cache.find_file("E4").name, "E4.mp3")
        self.assertEqual(cache.find_file("C4").name, "C4.wav")
        self.assertIsNone(cache.find_file("G4"))

    def test_preload(self):
        cache = AudioAssetCache(self.sounds_dir)
        with self.assertLogs("melodic_dictation.audio.asset_cache", level="WARNING"):
            loaded = cache.preload(["C4", "Fs4", "B3"])

        self.assertEqual(loaded, 2)
        self.assertEqual(len(cache), 2)


if __name__ == "__main__":
    unittest.main()
