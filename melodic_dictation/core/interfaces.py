"""Defines the core interfaces for the Melodic Dictation application."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np


@dataclass
class AudioClip:
    """A decoded audio asset."""

    key: str
    data: np.ndarray  # frames x channels, float32
    sample_rate: int

    @property
    def duration(self) -> float:
        return len(self.data) / float(self.sample_rate) if self.sample_rate else 0.0


class IAssetLoader(ABC):
    """Interface for loading decoded audio clips by asset key."""

    @abstractmethod
    def load(self, key: str) -> Optional[AudioClip]:
        """Return the decoded clip for a key, or None if it is unavailable."""
        pass

    @abstractmethod
    def preload(self, keys: Iterable[str]) -> int:
        """Load several clips up front and return how many are available."""
        pass


class IAudioPlayer(ABC):
    """Interface for audio output."""

    @abstractmethod
    def play(self, clip: AudioClip) -> None:
        """Start playing a clip without blocking."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop the clip currently sounding, if any."""
        pass
