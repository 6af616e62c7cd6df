"""Configuration loading.

The only setting is the bridge username, read from config.toml in the
per-user config directory for 'hue' (~/.config/hue on Linux).
"""

import tomllib
from pathlib import Path

import click

from core.errors import ConfigError
from models.types import Config

APP_NAME = 'hue'
CONFIG_FILENAME = 'config.toml'


def get_config_dir() -> Path:
    """Return the per-user config directory for this tool."""
    return Path(click.get_app_dir(APP_NAME))


def get_config_path() -> Path:
    """Return the path of the config file."""
    return get_config_dir() / CONFIG_FILENAME


def load_config(path: Path | None = None) -> Config:
    """Load and validate the config file.

    Args:
        path: Config file to read (defaults to get_config_path())

    Returns:
        Config with the bridge username

    Raises:
        ConfigError: If the file is missing, unreadable, not valid TOML,
            or has no usable 'username'
    """
    if path is None:
        path = get_config_path()

    if not path.is_file():
        raise ConfigError(f"no hue config file found at {path}")

    try:
        with open(path, 'rb') as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"failed to parse config file at {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"failed to read config file at {path}: {e}") from e

    username = data.get('username')
    if username is None:
        raise ConfigError(f"failed to parse config file at {path}: missing field 'username'")
    if not isinstance(username, str) or not username.strip():
        raise ConfigError(f"failed to parse config file at {path}: 'username' must be a non-empty string")

    return Config(username=username.strip())
