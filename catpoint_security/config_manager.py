"""Configuration management with file persistence and change callbacks."""

import json
import logging
import os
from dataclasses import asdict
from typing import Optional, Callable, List

from .models.config import SystemConfig
from .config.defaults import DEFAULT_PATHS
from .logging_config import get_logger
from .utils import ensure_directory_exists

logger = get_logger("config_manager")


class ConfigManager:
    """Manages system configuration with file persistence."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or DEFAULT_PATHS["config_file"]
        self._config: Optional[SystemConfig] = None
        self._config_change_callbacks: List[Callable[[SystemConfig], None]] = []

        self.load_config()

    def load_config(self) -> SystemConfig:
        """Load configuration from file or create default."""
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r') as f:
                    config_dict = json.load(f)
                self._config = SystemConfig(**config_dict)
            except (json.JSONDecodeError, TypeError) as e:
                logger.warning(f"Error loading config: {e}. Using defaults.")
                self._config = SystemConfig()
        else:
            self._config = SystemConfig()
            self.save_config()

        return self._config

    def save_config(self) -> None:
        """Save current configuration to file."""
        if self._config is None:
            return

        directory = os.path.dirname(self.config_path)
        if directory:
            ensure_directory_exists(directory)

        with open(self.config_path, 'w') as f:
            json.dump(asdict(self._config), f, indent=2)

    def get_config(self) -> SystemConfig:
        """Get current configuration."""
        if self._config is None:
            return self.load_config()
        return self._config

    def update_config(self, **kwargs) -> None:
        """Update configuration with new values; unknown keys are ignored."""
        if self._config is None:
            self.load_config()

        for key, value in kwargs.items():
            if hasattr(self._config, key):
                setattr(self._config, key, value)
            else:
                logger.warning(f"Ignoring unknown config key: {key}")

        self.save_config()

        for callback in list(self._config_change_callbacks):
            callback(self._config)

    def validate_config(self) -> bool:
        """Validate current configuration."""
        if self._config is None:
            return False

        # Threshold is a percentage
        threshold = self._config.cat_confidence_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            return False
        if not 0.0 <= threshold <= 100.0:
            return False

        if not isinstance(logging.getLevelName(str(self._config.log_level).upper()), int):
            return False

        if self._config.persist_state and not self._config.repository_path:
            return False

        if not self._config.log_dir:
            return False

        return True

    def register_change_callback(self, callback: Callable[[SystemConfig], None]) -> None:
        """Register a callback to be called when config changes."""
        if callback not in self._config_change_callbacks:
            self._config_change_callbacks.append(callback)

    def unregister_change_callback(self, callback: Callable[[SystemConfig], None]) -> None:
        """Unregister a config change callback."""
        if callback in self._config_change_callbacks:
            self._config_change_callbacks.remove(callback)
