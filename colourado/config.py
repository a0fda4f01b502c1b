"""Configuration management."""

from pathlib import Path
from typing import Optional, Dict, Any
import os

import yaml

from colourado.core.logging_utils import get_logger


OUTPUT_FORMATS = ('swatch', 'hex', 'rgb')

_TRUE_TOKENS = {'1', 'true', 'yes', 'on', 'adjacent'}
_FALSE_TOKENS = {'0', 'false', 'no', 'off', 'spread'}


def _parse_int(value: str) -> int:
    return int(value)


def _parse_bool(value: str) -> bool:
    token = value.strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def _parse_format(value: str) -> str:
    token = value.strip().lower()
    if token not in OUTPUT_FORMATS:
        raise ValueError(f"unknown format {value!r}")
    return token


class Config:
    """Configuration manager."""

    ENV_MAPPINGS = {
        'COLOURADO_COUNT': (('palette', 'count'), _parse_int),
        'COLOURADO_TYPE': (('palette', 'type'), str.lower),
        'COLOURADO_ADJACENT': (('palette', 'adjacent'), _parse_bool),
        'COLOURADO_FORMAT': (('preview', 'format'), _parse_format),
    }

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to YAML config file (optional)
        """
        self.config = self._load_defaults()

        if config_file and config_file.exists():
            self.load_from_file(config_file)

        self._load_from_env()

    def _load_defaults(self) -> Dict[str, Any]:
        """Load default configuration."""
        return {
            'palette': {
                'count': 4,
                'type': 'random',
                'adjacent': False,
            },
            'preview': {
                'format': 'swatch',
                'per_row': 10,
            },
        }

    def load_from_file(self, config_file: Path) -> None:
        """Load configuration from YAML file."""
        try:
            with open(config_file, 'r') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            get_logger().warning(f"Could not load config file {config_file}: {e}")
            return

        if file_config is None:
            return
        if not isinstance(file_config, dict):
            get_logger().warning(
                f"Ignoring config file {config_file}: expected a mapping at top level"
            )
            return
        self._merge_config(self.config, file_config)

    def _merge_config(self, base: Dict, override: Dict) -> None:
        """Recursively merge configuration dictionaries."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        for env_var, (config_path, parse) in self.ENV_MAPPINGS.items():
            value = os.getenv(env_var)
            if not value:
                continue
            try:
                parsed = parse(value)
            except ValueError:
                get_logger().warning(f"Ignoring invalid value for {env_var}: {value!r}")
                continue
            self._set_nested(self.config, config_path, parsed)

    def _set_nested(self, config: Dict, path: tuple, value: Any) -> None:
        """Set nested configuration value."""
        for key in path[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]
        config[path[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dotted key, e.g. 'palette.count'."""
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """Set configuration value by dotted key."""
        self._set_nested(self.config, tuple(key.split('.')), value)


def load_config(config_file: Optional[Path] = None) -> Config:
    """
    Load configuration.

    Args:
        config_file: Path to config file (optional)

    Returns:
        Config instance
    """
    return Config(config_file)
