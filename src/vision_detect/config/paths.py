"""Centralized path management for vision-detect.

User configuration lives under a single base directory, which can be
overridden with the VISION_DETECT_HOME environment variable.

Default location: ~/.vision-detect
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "VISION_DETECT_HOME"

# Name of the per-project config file looked up in the working directory
LOCAL_CONFIG_NAME = "vision-detect.toml"


@lru_cache(maxsize=1)
def get_home() -> Path:
    """Get the base directory for vision-detect user data.

    Resolution order:
    1. VISION_DETECT_HOME environment variable (if set)
    2. Platform default (~/.vision-detect)

    Returns:
        Path to the home directory.
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()

    return Path.home() / ".vision-detect"


def get_config_path() -> Path:
    """Get the default user config file path."""
    return get_home() / "config.toml"


def get_default_config_paths() -> list[Path]:
    """Get ordered list of config file locations searched by the loader."""
    return [
        Path(LOCAL_CONFIG_NAME),  # Current directory
        get_config_path(),  # ~/.vision-detect/config.toml (or VISION_DETECT_HOME)
        Path("/etc/vision-detect/config.toml"),  # System-wide
    ]
