"""Factory for creating Melodic Dictation components."""

import random
from typing import Any, Callable, Optional, Dict, Type

from ..audio.asset_cache import AudioAssetCache
from ..audio.player import SoundDevicePlayer
from ..audio.sequencer import PlaybackSequencer
from ..logger import get_logger
from ..quiz_session import QuizSession, QuizSettings
from .config import ConfigManager
from .events import QuizEvents
from .interfaces import IAssetLoader, IAudioPlayer

logger = get_logger(__name__)


class ComponentFactory:
    """Factory for creating Melodic Dictation components."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        """Initialize the component factory.

        Args:
            config_manager: Configuration manager, or None to create a default one
        """
        self.config_manager = config_manager or ConfigManager()

        # Register default component implementations
        self.audio_player_classes: Dict[str, Type[IAudioPlayer]] = {
            "default": SoundDevicePlayer,
        }

    def register_audio_player(self, name: str, cls: Type[IAudioPlayer]) -> None:
        """Register an alternative audio player implementation."""
        self.audio_player_classes[name] = cls

    def _settings(self, name: str, overrides: Dict[str, Any]) -> Dict[str, Any]:
        """Stored configuration restricted to the known keys, with overrides applied."""
        defaults = self.config_manager.default_configs[name]
        config = self.config_manager.get_config(name)

        unknown = sorted(key for key in config if key not in defaults)
        if unknown:
            logger.warning(f"Ignoring unknown '{name}' settings: {', '.join(unknown)}")

        settings = {key: config.get(key, value) for key, value in defaults.items()}
        settings.update(overrides)
        return settings

    def _number(self, name: str, settings: Dict[str, Any], key: str, kind: Callable) -> Any:
        """Convert a numeric setting, falling back to its default when it is malformed."""
        try:
            return kind(settings[key])
        except (TypeError, ValueError):
            default = self.config_manager.default_configs[name][key]
            logger.error(
                f"Invalid value for '{name}.{key}': {settings[key]!r}, using {default!r}"
            )
            return kind(default)

    def create_asset_cache(self, **kwargs) -> IAssetLoader:
        """Create the audio asset cache.

        Args:
            **kwargs: Overrides for the 'audio' configuration

        Returns:
            Asset cache instance
        """
        config = self._settings("audio", kwargs)

        cache = AudioAssetCache(config["sounds_dir"], extensions=config["extensions"])
        logger.info(f"Created asset cache for {config['sounds_dir']}")
        return cache

    def create_audio_player(self, implementation: str = "default", **kwargs) -> IAudioPlayer:
        """Create an audio player.

        Args:
            implementation: Name of the implementation to use
            **kwargs: Additional parameters to pass to the constructor

        Returns:
            Audio player instance

        Raises:
            ValueError: If the implementation is not registered
        """
        if implementation not in self.audio_player_classes:
            raise ValueError(f"Unknown audio player implementation: {implementation}")

        cls = self.audio_player_classes[implementation]
        instance = cls(**kwargs)

        logger.info(f"Created audio player: {implementation}")
        return instance

    def create_sequencer(
        self,
        assets: Optional[IAssetLoader] = None,
        player: Optional[IAudioPlayer] = None,
        **kwargs,
    ) -> PlaybackSequencer:
        """Create a playback sequencer.

        Args:
            assets: Asset loader, or None to create one from configuration
            player: Audio player, or None to create the default one
            **kwargs: Overrides for the 'playback' configuration

        Returns:
            Playback sequencer instance
        """
        config = self._settings("playback", kwargs)
        for key in ("note_duration", "min_duration", "max_duration", "lead_in", "reference_gap"):
            config[key] = self._number("playback", config, key, float)

        if assets is None:
            assets = self.create_asset_cache()
        if player is None:
            player = self.create_audio_player()

        return PlaybackSequencer(assets, player, **config)

    def create_session(
        self,
        rng: Optional[random.Random] = None,
        events: Optional[QuizEvents] = None,
        **kwargs,
    ) -> QuizSession:
        """Create a quiz session.

        Args:
            rng: Random source for question draws
            events: Event hub for the feedback surface
            **kwargs: Overrides for the 'quiz' configuration

        Returns:
            Quiz session instance
        """
        config = self._settings("quiz", kwargs)

        settings = QuizSettings(
            total_questions=self._number("quiz", config, "total_questions", int),
            reward=self._number("quiz", config, "reward", int),
            retry_on_incorrect=bool(config["retry_on_incorrect"]),
        )
        session = QuizSession(settings=settings, rng=rng, events=events)
        logger.info(
            f"Created quiz session: {settings.total_questions} questions, "
            f"retry_on_incorrect={settings.retry_on_incorrect}"
        )
        return session
