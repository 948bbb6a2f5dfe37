"""Configuration module for the Gymnasium bridge."""

import copy
import yaml
import os
from typing import Dict, Any


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), '..', 'config', 'default.yaml')

# Values used when neither the YAML file nor set() provides a key
DEFAULTS: Dict[str, Any] = {
    'gym': {
        'module': 'gymnasium',
        'factory': 'make',
    },
    'tensor': {
        'device': 'cpu',
    },
    'logging': {
        'level': 'INFO',
        'log_dir': 'logs',
        'file': 'gym_bridge.log',
        'max_bytes': 10 * 1024 * 1024,
        'backup_count': 5,
    },
}


def merge_settings(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``overrides`` into ``base`` in place and return it."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge_settings(base[key], value)
        else:
            base[key] = value
    return base


class Config:
    """Configuration manager layering YAML settings over built-in defaults."""

    def __init__(self, config_path: str = None):
        """Initialize configuration with optional config file path."""
        self._config = copy.deepcopy(DEFAULTS)
        if config_path:
            self.load_config(config_path)
        elif os.path.exists(DEFAULT_CONFIG_PATH):
            self.load_config(DEFAULT_CONFIG_PATH)

    def load_config(self, config_path: str):
        """Load configuration from a YAML file on top of the defaults."""
        with open(config_path, 'r') as f:
            # An empty file loads as None
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{config_path} must contain a mapping, got {type(loaded).__name__}")
        self._config = merge_settings(copy.deepcopy(DEFAULTS), loaded)

    def get(self, key_path: str, default=None):
        """Get a configuration value using dot notation (e.g., 'gym.module')."""
        value = self._config
        try:
            for key in key_path.split('.'):
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key_path: str, value: Any):
        """Set a configuration value using dot notation."""
        *parents, leaf = key_path.split('.')
        section = self._config
        for key in parents:
            section = section.setdefault(key, {})
        section[leaf] = value

    def to_dict(self) -> Dict[str, Any]:
        """Return a deep copy of the effective configuration."""
        return copy.deepcopy(self._config)


# Global configuration instance
config = Config()
