"""Configuration module."""

from vision_detect.config.loader import load_config
from vision_detect.config.models import ConfigError, DetectConfig, VisionConfig
from vision_detect.config.paths import get_config_path, get_home

__all__ = [
    "ConfigError",
    "DetectConfig",
    "VisionConfig",
    "get_config_path",
    "get_home",
    "load_config",
]
