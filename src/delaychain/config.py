"""
GUI configuration - optional YAML file plus command-line overrides.

Example delaychain.yml:

    display:
      width: 480
      height: 800
      fullscreen: true
      fps: 60
      backend: pygame
      brightness: 100
      gamma: 1.0

    link:
      host: bela.local
      host_port: 7562
      listen_host: 0.0.0.0
      listen_port: 7563
      control_address: /gui/control
      buffer_address: /gui/buffer

    logging:
      level: INFO

Every key is optional; missing ones keep their defaults.
"""

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .display.display_backend import BACKENDS
from .link.osc_link import BUFFER_ADDRESS, CONTROL_ADDRESS, DEFAULT_HOST_PORT, DEFAULT_LISTEN_PORT

log = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = 'delaychain.yml'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')

# YAML section -> fields it may set
SECTIONS = {
    'display': ('width', 'height', 'fullscreen', 'fps', 'backend', 'brightness', 'gamma'),
    'link': ('host', 'host_port', 'listen_host', 'listen_port', 'control_address', 'buffer_address'),
    'logging': ('level',),
}


class ConfigError(ValueError):
    """Configuration file or values are invalid."""


@dataclass(frozen=True)
class GUIConfig:
    """All runtime settings for the GUI."""

    # Display
    width: int = 480
    height: int = 800
    fullscreen: bool = False
    fps: int = 60
    backend: str = 'auto'
    brightness: float = 100.0
    gamma: float = 1.0

    # Link
    host: str = 'bela.local'
    host_port: int = DEFAULT_HOST_PORT
    listen_host: str = '0.0.0.0'
    listen_port: int = DEFAULT_LISTEN_PORT
    control_address: str = CONTROL_ADDRESS
    buffer_address: str = BUFFER_ADDRESS

    # Logging
    level: str = 'INFO'

    # Headless soak runs: stop after this many frames
    max_frames: Optional[int] = None

    def __post_init__(self):
        self.validate()

    def validate(self):
        """
        Check every value.

        Raises:
            ConfigError: First invalid value found
        """
        _check_int('width', self.width, 1, 16384)
        _check_int('height', self.height, 1, 16384)
        _check_int('fps', self.fps, 1, 240)
        _check_int('host_port', self.host_port, 1, 65535)
        _check_int('listen_port', self.listen_port, 0, 65535)
        _check_number('brightness', self.brightness, 1.0, 100.0)
        _check_number('gamma', self.gamma, 0.5, 3.0)

        if not isinstance(self.fullscreen, bool):
            raise ConfigError(f"fullscreen must be true or false, got {self.fullscreen!r}")
        if self.backend not in BACKENDS:
            raise ConfigError(f"backend must be one of {', '.join(BACKENDS)}, got {self.backend!r}")
        if not isinstance(self.host, str) or not self.host:
            raise ConfigError("host must be a non-empty string")
        if not isinstance(self.listen_host, str) or not self.listen_host:
            raise ConfigError("listen_host must be a non-empty string")
        for name in ('control_address', 'buffer_address'):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.startswith('/'):
                raise ConfigError(f"{name} must be an OSC address starting with '/', got {value!r}")
        if str(self.level).upper() not in LOG_LEVELS:
            raise ConfigError(f"level must be one of {', '.join(LOG_LEVELS)}, got {self.level!r}")
        if self.max_frames is not None:
            _check_int('max_frames', self.max_frames, 1, None)

    def with_overrides(self, **overrides) -> 'GUIConfig':
        """
        Copy with the given fields replaced; None values are ignored.

        Raises:
            ConfigError: Unknown field or invalid value
        """
        known = {f.name for f in dataclasses.fields(self)}
        changes = {}
        for name, value in overrides.items():
            if name not in known:
                raise ConfigError(f"Unknown setting: {name}")
            if value is not None:
                changes[name] = value
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, config_dict: Optional[Dict[str, Any]]) -> 'GUIConfig':
        """
        Create GUIConfig from the sectioned dictionary loaded from YAML.

        Args:
            config_dict: {'display': {...}, 'link': {...}, 'logging': {...}}

        Returns:
            GUIConfig instance

        Raises:
            ConfigError: Unknown section or key, or invalid value
        """
        if config_dict is None:
            return cls()
        if not isinstance(config_dict, dict):
            raise ConfigError("Configuration must be a mapping of sections")

        values = {}
        for section, entries in config_dict.items():
            if section not in SECTIONS:
                raise ConfigError(f"Unknown config section: {section}")
            if entries is None:
                continue
            if not isinstance(entries, dict):
                raise ConfigError(f"Section '{section}' must be a mapping")
            for key, value in entries.items():
                if key not in SECTIONS[section]:
                    raise ConfigError(f"Unknown key '{key}' in section '{section}'")
                values[key] = value

        return cls(**values)


def _check_int(name: str, value: Any, low: int, high: Optional[int]):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if value < low or (high is not None and value > high):
        upper = high if high is not None else 'inf'
        raise ConfigError(f"{name} must be between {low} and {upper}, got {value}")


def _check_number(name: str, value: Any, low: float, high: float):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    if not low <= value <= high:
        raise ConfigError(f"{name} must be between {low} and {high}, got {value}")


def load_config(config_path: Optional[Path] = None) -> GUIConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (default: delaychain.yml in the
                     working directory, skipped if absent)

    Returns:
        GUIConfig instance

    Raises:
        ConfigError: File given explicitly but missing, unreadable YAML,
                     or invalid values
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_NAME
        if not config_path.exists():
            log.debug("No %s found, using defaults", DEFAULT_CONFIG_NAME)
            return GUIConfig()

    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_path}: {e}")

    config = GUIConfig.from_dict(config_dict)
    log.info("Loaded config from %s", config_path)
    return config
