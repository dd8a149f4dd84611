"""
Configuration handling for xclips
"""
import copy
import os
from typing import Dict, Any, Optional

import yaml

from .errors import ConfigError


DEFAULT_CONFIG_NAMES = ('xclips.yml', 'xclips.yaml')


class Config:
    """Application configuration: defaults, then YAML file, then CLI arguments"""

    DEFAULT_CONFIG = {
        'timestamps_file': None,
        'clips': [],
        'output': None,
        'dry_run': False,
        'log_level': 'INFO',
        'ffmpeg': {
            'binary': 'ffmpeg',
            'codec': 'copy',   # stream copy, no re-encoding
        },
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize the configuration

        Args:
            config_file: Path to a YAML configuration file (optional)
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file:
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> None:
        """
        Load configuration from a YAML file

        Args:
            config_file: Path to the configuration file
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"cannot load configuration file {config_file}: {e}") from e

        if not file_config:
            return
        if not isinstance(file_config, dict):
            raise ConfigError(f"configuration file {config_file} must contain a mapping")
        for key, value in file_config.items():
            if key == 'ffmpeg' and isinstance(value, dict):
                self._deep_merge(self.config[key], value)
            else:
                self.config[key] = value
        self._validate(config_file)

    def _validate(self, config_file: str) -> None:
        """
        Check the types of the known keys after loading a file

        Args:
            config_file: Path of the loaded file, used in error messages
        """
        def fail(key, expected):
            raise ConfigError(f"{config_file}: '{key}' must be {expected}")

        for key in ('timestamps_file', 'output'):
            if self.config.get(key) is not None and not isinstance(self.config[key], str):
                fail(key, "a string")
        clips = self.config.get('clips')
        if clips is not None and not isinstance(clips, str):
            if not isinstance(clips, list) or not all(isinstance(c, str) for c in clips):
                fail('clips', "a list of strings")
        if not isinstance(self.config.get('dry_run'), (bool, type(None))):
            fail('dry_run', "true or false")
        if not isinstance(self.config.get('log_level'), (str, type(None))):
            fail('log_level', "a string")
        ffmpeg = self.config.get('ffmpeg')
        if ffmpeg is not None:
            if not isinstance(ffmpeg, dict):
                fail('ffmpeg', "a mapping")
            for key in ('binary', 'codec'):
                if not isinstance(ffmpeg.get(key), str):
                    fail(f'ffmpeg.{key}', "a string")

    def _deep_merge(self, base: dict, update: dict) -> None:
        """
        Deep merge of nested dictionaries

        Args:
            base: Dictionary to update in place
            update: Dictionary with the updates
        """
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Update the configuration from CLI arguments.
        CLI arguments take precedence over the configuration file; ``None``
        values are ignored.

        Args:
            args: Dictionary of CLI arguments
        """
        for key, value in args.items():
            if value is not None:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value

        Args:
            key: Configuration key
            default: Value returned when the key is missing

        Returns:
            The configuration value
        """
        return self.config.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """Return a shallow copy of the whole configuration"""
        return self.config.copy()


def find_default_config(directory: Optional[str] = None) -> Optional[str]:
    """Return the first ``xclips.yml``/``xclips.yaml`` found in ``directory`` (cwd by default)."""
    directory = directory or os.getcwd()
    for name in DEFAULT_CONFIG_NAMES:
        candidate = os.path.join(directory, name)
        if os.path.exists(candidate):
            return candidate
    return None
