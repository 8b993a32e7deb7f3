"""Audio output through sounddevice."""

from typing import Optional

from ..core.interfaces import AudioClip, IAudioPlayer
from ..logger import get_logger

logger = get_logger(__name__)


class SoundDevicePlayer(IAudioPlayer):
    """Plays clips on an output device using sounddevice."""

    def __init__(self, device_id: Optional[int] = None):
        # Import here so the package can be used without PortAudio installed
        import sounddevice as sd

        self._sd = sd
        self._device_id = device_id

    def play(self, clip: AudioClip) -> None:
        """Start a clip; a clip still sounding is stopped first."""
        try:
            self._sd.play(clip.data, clip.sample_rate, device=self._device_id)
        except Exception as e:
            # PortAudioError and device errors must not end the session
            logger.error(f"Error playing '{clip.key}': {e}")

    def stop(self) -> None:
        try:
            self._sd.stop()
        except Exception as e:
            logger.error(f"Error stopping playback: {e}")
