"""Configuration models using Pydantic."""

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, SecretStr, model_validator

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ConfigError(Exception):
    """Configuration error."""

    pass


class VisionConfig(BaseModel):
    """Connection settings for the Cloud Vision API.

    When neither credentials_file nor api_key is set, the client falls back
    to Application Default Credentials.
    """

    credentials_file: Path | None = None
    api_endpoint: str | None = None
    quota_project_id: str | None = None
    api_key: SecretStr | None = None

    @model_validator(mode="after")
    def _validate_auth(self) -> "VisionConfig":
        """Reject configs that name both a service account and an API key."""
        if self.api_key is not None and self.credentials_file is not None:
            raise ValueError(
                "Set either [vision].api_key or [vision].credentials_file, not both"
            )
        return self


class DetectConfig(BaseModel):
    """Root configuration model."""

    # Directory holding the bundled sample images used by all-local
    samples_dir: Path = Path("resources")
    log_level: LogLevel | None = None
    vision: VisionConfig = Field(default_factory=VisionConfig)
