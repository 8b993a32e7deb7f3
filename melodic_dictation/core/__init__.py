"""Core components for the Melodic Dictation application."""

# Import interfaces for easier access
from .interfaces import (
    AudioClip,
    IAssetLoader,
    IAudioPlayer,
)

__all__ = ["AudioClip", "IAssetLoader", "IAudioPlayer"]
