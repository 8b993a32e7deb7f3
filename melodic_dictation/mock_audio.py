import numpy as np

from .core.interfaces import AudioClip, IAssetLoader, IAudioPlayer


class MockAudioPlayer(IAudioPlayer):
    """A mock player for unit tests. Records what would have been played."""

    def __init__(self):
        self.played = []
        self.stop_count = 0

    def play(self, clip: AudioClip):
        self.played.append(clip.key)

    def stop(self):
        self.stop_count += 1


class MockAssetLoader(IAssetLoader):
    """Serves short silent clips for a fixed set of keys."""

    def __init__(self, keys, sample_rate=8000):
        self.clips = {
            key: AudioClip(key, np.zeros((sample_rate // 10, 1), dtype="float32"), sample_rate)
            for key in keys
        }
        self.requests = []

    def load(self, key):
        self.requests.append(key)
        return self.clips.get(key)

    def preload(self, keys):
        return sum(1 for key in keys if self.load(key) is not None)
