import unittest

from melodic_dictation.audio.sequencer import PlaybackSequencer
from melodic_dictation.mock_audio import MockAssetLoader, MockAudioPlayer


class TestPlaybackSequencer(unittest.TestCase):
    def setUp(self):
        self.sleeps = []
        self.assets = MockAssetLoader(["C4", "D4", "E4", "Fs4", "B3"])
        self.player = MockAudioPlayer()

    def make(self, **kwargs):
        return PlaybackSequencer(self.assets, self.player, sleep=self.sleeps.append, **kwargs)

    def test_schedule(self):
        events = self.make().schedule(["do", "re", "mi", "fa#"])

        self.assertEqual([e.asset_key for e in events], ["C4", "C4", "D4", "E4", "Fs4"])
        self.assertTrue(events[0].is_reference)
        self.assertFalse(any(e.is_reference for e in events[1:]))
        for event, expected in zip(events, [0.2, 1.2, 1.7, 2.2, 2.7]):
            self.assertAlmostEqual(event.offset, expected)

    def test_schedule_follows_note_duration(self):
        sequencer = self.make(note_duration=0.3)
        offsets = [e.offset for e in sequencer.schedule(["si3", "do", "re", "mi"])]
        for offset, expected in zip(offsets, [0.2, 1.2, 1.5, 1.8, 2.1]):
            self.assertAlmostEqual(offset, expected)

    def test_play_question_plays_one_note_at_a_time(self):
        sequencer = self.make()
        sequencer.play_question(["do", "re", "mi", "fa#"])

        self.assertEqual(self.player.played, ["C4", "C4", "D4", "E4", "Fs4"])
        # The previous clip is stopped before every start, and once at the end
        self.assertEqual(self.player.stop_count, 6)
        for slept, expected in zip(self.sleeps, [0.2, 1.0, 0.5, 0.5, 0.5, 0.5]):
            self.assertAlmostEqual(slept, expected)
        self.assertAlmostEqual(sum(self.sleeps), sequencer.total_duration(["do", "re", "mi", "fa#"]))

    def test_missing_clip_leaves_slot_silent(self):
        sequencer = self.make()
        with self.assertLogs("melodic_dictation.audio.sequencer", level="WARNING"):
            sequencer.play_question(["do", "sol", "mi", "re"])

        self.assertEqual(self.player.played, ["C4", "C4", "E4", "D4"])
        self.assertEqual(len(self.sleeps), 6)
        self.assertAlmostEqual(sum(self.sleeps), 3.2)

    def test_duration_is_clamped(self):
        sequencer = self.make()
        self.assertEqual(sequencer.note_duration, 0.5)
        self.assertEqual(sequencer.set_note_duration(0.65), 0.65)
        self.assertEqual(sequencer.set_note_duration(1.5), 0.8)
        self.assertEqual(sequencer.set_note_duration(0.05), 0.2)
        self.assertEqual(self.make(note_duration=2.0).note_duration, 0.8)

    def test_invalid_range(self):
        with self.assertRaises(ValueError):
            self.make(min_duration=0.9, max_duration=0.5)

    def test_custom_reference_note(self):
        events = self.make(reference_note="si3").schedule(["do", "re", "mi", "fa"])
        self.assertEqual(events[0].asset_key, "B3")


if __name__ == "__main__":
    unittest.main()
