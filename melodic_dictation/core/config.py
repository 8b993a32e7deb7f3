"""Configuration management for Melodic Dictation components."""

from typing import Dict, Any, Optional
import copy
import json
import os
from pathlib import Path

from ..logger import get_logger

logger = get_logger(__name__)


class ConfigManager:
    """Configuration manager for Melodic Dictation components."""

    def __init__(self, config_dir: Optional[str] = None):
        """Initialize the configuration manager.

        Args:
            config_dir: Directory holding configuration files, or None to use default
        """
        if config_dir is None:
            # Use ~/.config/melodic_dictation by default
            home = os.path.expanduser("~")
            config_dir = os.path.join(home, ".config", "melodic_dictation")

        self.config_dir = Path(config_dir)

        # Default configurations
        self.default_configs = {
            "quiz": {
                "total_questions": 15,
                "reward": 250,
                "retry_on_incorrect": False,
            },
            "playback": {
                "note_duration": 0.5,
                "min_duration": 0.2,
                "max_duration": 0.8,
                "lead_in": 0.2,
                "reference_gap": 1.0,
                "reference_note": "C4",
            },
            "audio": {
                "sounds_dir": "sounds",
                "extensions": ["wav", "mp3"],
            },
        }

        # Load existing configurations, falling back to defaults
        self.configs = {}
        for config_name, default_config in self.default_configs.items():
            self.configs[config_name] = self.load_config(config_name, default_config)

    def load_config(self, name: str, default_config: Dict[str, Any]) -> Dict[str, Any]:
        """Load configuration from file or use the default.

        Args:
            name: Configuration name
            default_config: Default configuration to use if file doesn't exist

        Returns:
            Configuration dictionary
        """
        config_file = self.config_dir / f"{name}.json"

        if not config_file.exists():
            return copy.deepcopy(default_config)

        try:
            with open(config_file, "r") as f:
                config = json.load(f)
            logger.info(f"Loaded configuration from {config_file}")
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration from {config_file}: {e}")
            return copy.deepcopy(default_config)

        if not isinstance(config, dict):
            logger.error(
                f"Configuration in {config_file} is not a JSON object, using defaults"
            )
            return copy.deepcopy(default_config)

        # Ensure all default keys are present
        for key, value in default_config.items():
            if key not in config:
                config[key] = value

        return config

    def save_config(self, name: str, config: Dict[str, Any]) -> bool:
        """Save configuration to file.

        Args:
            name: Configuration name
            config: Configuration dictionary

        Returns:
            True if saved successfully, False otherwise
        """
        config_file = self.config_dir / f"{name}.json"

        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(config_file, "w") as f:
                json.dump(config, f, indent=2)
            logger.info(f"Saved configuration to {config_file}")
            return True
        except OSError as e:
            logger.error(f"Error saving configuration to {config_file}: {e}")
            return False

    def get_config(self, name: str) -> Dict[str, Any]:
        """Get configuration by name.

        Args:
            name: Configuration name

        Returns:
            Configuration dictionary
        """
        return copy.deepcopy(self.configs.get(name, {}))

    def update_config(self, name: str, updates: Dict[str, Any]) -> bool:
        """Update configuration and save to file.

        Args:
            name: Configuration name
            updates: Dictionary of updates to apply

        Returns:
            True if updated and saved successfully, False otherwise
        """
        if name not in self.configs:
            logger.error(f"Unknown configuration: {name}")
            return False

        self.configs[name].update(updates)
        return self.save_config(name, self.configs[name])

    def reset_config(self, name: str) -> bool:
        """Reset configuration to default.

        Args:
            name: Configuration name

        Returns:
            True if reset successfully, False otherwise
        """
        if name not in self.default_configs:
            logger.error(f"Unknown configuration: {name}")
            return False

        self.configs[name] = copy.deepcopy(self.default_configs[name])
        return self.save_config(name, self.configs[name])
