"""XDG-compliant path management for cmvn.

cmvn keeps no state between runs; the only file it reads on its own
behalf lives in the configuration directory:

- Config: ~/.config/cmvn/config.toml
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "cmvn"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/cmvn/ (or XDG_CONFIG_HOME/cmvn/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the cleaner configuration file path.

    Returns:
        Path to ~/.config/cmvn/config.toml.
    """
    return get_config_dir() / "config.toml"

