"""
Configuration management for the Tafl CLI.

Handles loading and managing CLI configuration settings from files and environment.
"""

import os
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from ..game.constants import Side

logger = logging.getLogger(__name__)


class CLIConfig:
    """Manages CLI configuration settings."""

    DEFAULT_CONFIG = {
        # Game settings
        'first_turn': 'attacker',  # attacker, defender

        # Output formatting
        'color_output': True,
        'show_coordinates': True,

        # CLI behavior
        'verbose': False,
        'quiet': False,
    }

    BOOLEAN_KEYS = ('color_output', 'show_coordinates', 'verbose', 'quiet')

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default locations.
        """
        self._config = self.DEFAULT_CONFIG.copy()
        self._config_file = config_file or self._find_config_file()
        self._load_config()

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in standard locations."""
        config_locations = [
            Path.cwd() / '.tafl.json',
            Path.cwd() / 'tafl.json',
            Path.home() / '.tafl.json',
            Path.home() / '.config' / 'tafl.json',
        ]

        for config_path in config_locations:
            if config_path.exists() and config_path.is_file():
                logger.debug(f"Found config file: {config_path}")
                return str(config_path)

        return None

    def _load_config(self):
        """Load configuration from file and environment variables."""
        if self._config_file and os.path.exists(self._config_file):
            try:
                with open(self._config_file, 'r') as f:
                    file_config = json.load(f)
                    self._config.update(file_config)
                    logger.debug(f"Loaded config from {self._config_file}")
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Failed to load config file {self._config_file}: {e}")

        self._load_env_config()

    def _load_env_config(self):
        """Load configuration from environment variables."""
        env_mappings = {
            'TAFL_FIRST_TURN': 'first_turn',
            'TAFL_COLOR': 'color_output',
            'TAFL_SHOW_COORDINATES': 'show_coordinates',
            'TAFL_VERBOSE': 'verbose',
            'TAFL_QUIET': 'quiet',
        }

        for env_var, config_key in env_mappings.items():
            env_value = os.environ.get(env_var)
            if env_value is not None:
                if config_key in self.BOOLEAN_KEYS:
                    self._config[config_key] = env_value.lower() in ('true', '1', 'yes', 'on')
                else:
                    self._config[config_key] = env_value

    @property
    def first_turn(self) -> Side:
        """The configured opening side; unknown names fall back to attacker."""
        value = self._config.get('first_turn', 'attacker')
        try:
            return Side.from_string(str(value))
        except ValueError:
            logger.warning(f"Invalid first_turn value {value!r}, using attacker")
            return Side.ATTACKER

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value."""
        self._config[key] = value

    def save(self, config_file: str = None):
        """Save current configuration to file."""
        target_file = config_file or self._config_file
        if not target_file:
            config_dir = Path.home() / '.config'
            config_dir.mkdir(exist_ok=True)
            target_file = str(config_dir / 'tafl.json')

        try:
            with open(target_file, 'w') as f:
                json.dump(self._config, f, indent=2)
            logger.info(f"Configuration saved to {target_file}")
        except IOError as e:
            logger.error(f"Failed to save config to {target_file}: {e}")
            raise

    def to_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary."""
        return self._config.copy()

    def __repr__(self):
        return f"CLIConfig(config_file={self._config_file})"


# Global configuration instance
_config = None

def get_config() -> CLIConfig:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = CLIConfig()
    return _config

def set_config(config: CLIConfig):
    """Set global configuration instance."""
    global _config
    _config = config
