"""Cleaner configuration.

Optional defaults for the ``cmvn`` command, read from
~/.config/cmvn/config.toml. Every setting can be overridden on the
command line; a missing file simply means "use the built-in defaults".

Example::

    root = "~/work/.m2"
    silent = true
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cmvn.core.paths import get_config_path

logger = logging.getLogger(__name__)


class CleanerConfig(BaseModel):
    """Configuration for the repository cleaner.

    Attributes:
        root: Maven root directory (the one holding ``repository/``).
            None means the platform default.
        silent: Skip the confirmation prompt by default.
    """

    model_config = ConfigDict(extra="forbid")

    root: Annotated[
        str | None,
        Field(description="Maven root path (None = platform default)"),
    ] = None
    silent: Annotated[
        bool,
        Field(description="Skip the confirmation prompt"),
    ] = False


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> CleanerConfig:
    """Load cleaner configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated CleanerConfig. Defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return CleanerConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        config = CleanerConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config
