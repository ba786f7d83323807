"""
Configuration utility for htmlq.
"""

import copy
import logging
import os
import json
from typing import Dict, Any, Optional
import threading

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "HTMLQ_CONFIG"

DEFAULT_CONFIG: Dict[str, Any] = {
    "parser": {
        "features": "html5lib",
        "fallback_features": "html.parser",
        "from_encoding": None
    },
    "render": {
        "formatter": "minimal"
    },
    "logging": {
        "console_level": "WARNING",
        "file_level": "DEBUG",
        "file": None
    }
}


def get_config_path() -> str:
    """
    Get the config file path.

    Returns:
        str: $HTMLQ_CONFIG if set, else ~/.htmlq/config.json
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return env_path
    return os.path.join(os.path.expanduser("~"), ".htmlq", "config.json")


class Config:
    """Configuration manager for htmlq."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the config file
        """
        self.config_path = config_path or get_config_path()
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()

        # Load config if it exists
        self.load()

        logger.debug(f"Configuration initialized (config_path: {self.config_path})")

    def load(self) -> None:
        """Load configuration from file, layered over the defaults."""
        self._set_defaults()
        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            return

        if not isinstance(data, dict):
            logger.error(f"Configuration in {self.config_path} is not a JSON object, using defaults")
            return

        with self._lock:
            _merge(self.config, data)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'parser.features')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return default
                config = config[part]

            return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'render.formatter')
            value: Configuration value
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    config[part] = {}
                config = config[part]

            config[parts[-1]] = value

    def _set_defaults(self) -> None:
        """Set default configuration values."""
        with self._lock:
            self.config = copy.deepcopy(DEFAULT_CONFIG)


def _merge(target: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    """Recursively merge overrides into target."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value


# Module-level config instance, loaded on first use
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config(config_path: Optional[str] = None) -> Config:
    """
    Replace the global config instance.

    Args:
        config_path: Path to load from (default location if None)

    Returns:
        Config: The new global instance
    """
    global _config
    _config = Config(config_path)
    return _config
