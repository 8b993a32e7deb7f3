"""Lazy, idempotent loading of note audio clips."""

from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence

import numpy as np
import soundfile as sf

from ..core.interfaces import AudioClip, IAssetLoader
from ..logger import get_logger

logger = get_logger(__name__)


class AudioAssetCache(IAssetLoader):
    """Decodes note clips from a sounds directory and keeps them by asset key.

    A key is read from disk at most once; later requests reuse the decoded clip.
    Failed loads are not cached, so a clip added later can still be picked up.
    """

    def __init__(self, sounds_dir: str, extensions: Sequence[str] = ("wav", "mp3")):
        """Initialize the cache.

        Args:
            sounds_dir: Directory holding files named '<asset key>.<extension>'
            extensions: File extensions to try, in order
        """
        self.sounds_dir = Path(sounds_dir)
        self.extensions = [ext.lstrip(".") for ext in extensions]
        self._clips: Dict[str, AudioClip] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._clips

    def __len__(self) -> int:
        return len(self._clips)

    def find_file(self, key: str) -> Optional[Path]:
        """Return the first existing file for a key, if any."""
        for ext in self.extensions:
            path = self.sounds_dir / f"{key}.{ext}"
            if path.exists():
                return path
        return None

    def load(self, key: str) -> Optional[AudioClip]:
        """Return the decoded clip for an asset key.

        Args:
            key: Asset key such as 'C4' or 'Fs4'

        Returns:
            The decoded clip, or None if the file is missing or cannot be decoded
        """
        clip = self._clips.get(key)
        if clip is not None:
            return clip

        path = self.find_file(key)
        if path is None:
            logger.error(
                f"No audio file for '{key}' in {self.sounds_dir} "
                f"(tried: {', '.join(self.extensions)})"
            )
            return None

        try:
            data, sample_rate = sf.read(str(path), dtype="float32", always_2d=True)
        except (RuntimeError, OSError) as e:
            # soundfile raises LibsndfileError (a RuntimeError) for undecodable files
            logger.error(f"Error decoding audio file {path}: {e}")
            return None

        clip = AudioClip(key=key, data=np.ascontiguousarray(data), sample_rate=sample_rate)
        self._clips[key] = clip
        logger.debug(
            f"Loaded {path.name}: {clip.duration:.2f}s at {sample_rate} Hz"
        )
        return clip

    def preload(self, keys: Iterable[str]) -> int:
        """Load every key up front.

        Returns:
            Number of keys that are available after loading
        """
        keys = list(keys)
        loaded = sum(1 for key in keys if self.load(key) is not None)
        if loaded == len(keys):
            logger.info(f"All {loaded} notes loaded")
        else:
            logger.warning(f"Loaded {loaded}/{len(keys)} notes from {self.sounds_dir}")
        return loaded
