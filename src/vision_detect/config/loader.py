"""Configuration loading from TOML files and environment variables."""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import SecretStr, ValidationError

from vision_detect.config.models import ConfigError, DetectConfig
from vision_detect.config.paths import get_default_config_paths

logger = logging.getLogger(__name__)


def _get_section(config: dict[str, Any], key: str) -> dict[str, Any]:
    """Get (creating if missing) a nested table of the raw config."""
    section = config.get(key)
    if section is None:
        section = config[key] = {}
    return section


def _resolve_env(config: dict[str, Any]) -> dict[str, Any]:
    """Fill settings from environment variables where not set in config.

    GOOGLE_APPLICATION_CREDENTIALS is not read here; the Google auth library
    picks it up itself as part of Application Default Credentials.
    """
    vision = _get_section(config, "vision")

    # An API key only applies when no service account file is configured
    if vision.get("api_key") is None and vision.get("credentials_file") is None:
        if value := os.environ.get("GOOGLE_API_KEY"):
            vision["api_key"] = SecretStr(value)

    if vision.get("api_endpoint") is None:
        if value := os.environ.get("VISION_DETECT_API_ENDPOINT"):
            vision["api_endpoint"] = value

    if config.get("samples_dir") is None:
        if value := os.environ.get("VISION_DETECT_SAMPLES_DIR"):
            config["samples_dir"] = value

    return config


def _find_config_file(path: Path | None) -> Path | None:
    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return config_path

    for default_path in get_default_config_paths():
        expanded = default_path.expanduser()
        if expanded.exists():
            return expanded
    return None


def load_config(path: Path | None = None) -> DetectConfig:
    """Load configuration from a TOML file and the environment.

    Args:
        path: Explicit path to config file. If None, searches default
            locations and falls back to defaults when none exists.

    Returns:
        Validated DetectConfig instance.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        ConfigError: If the file is not valid TOML or fails validation.
    """
    raw_config: dict[str, Any] = {}

    config_path = _find_config_file(path)
    if config_path is not None:
        logger.debug("Loading config from %s", config_path)
        try:
            with config_path.open("rb") as f:
                raw_config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    raw_config = _resolve_env(raw_config)

    try:
        return DetectConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
