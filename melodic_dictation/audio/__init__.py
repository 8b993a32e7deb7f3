"""Audio assets and playback for Melodic Dictation."""

from .asset_cache import AudioAssetCache
from .sequencer import PlaybackSequencer

__all__ = ["AudioAssetCache", "PlaybackSequencer"]
