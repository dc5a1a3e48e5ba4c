"""Cloud Vision client construction."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from google.api_core.client_options import ClientOptions
from google.cloud import vision

from vision_detect.config.models import VisionConfig

logger = logging.getLogger(__name__)


class AnnotatorClient(Protocol):
    """The one operation of the Cloud Vision API this program relies on."""

    def batch_annotate_images(
        self, *, requests: Sequence[vision.AnnotateImageRequest]
    ) -> vision.BatchAnnotateImagesResponse:
        """Annotate a batch of images, returning responses in request order."""
        ...


def _client_options(config: VisionConfig) -> ClientOptions | None:
    kwargs: dict[str, str] = {}
    if config.api_endpoint:
        kwargs["api_endpoint"] = config.api_endpoint
    if config.quota_project_id:
        kwargs["quota_project_id"] = config.quota_project_id
    if config.api_key is not None:
        kwargs["api_key"] = config.api_key.get_secret_value()
    if not kwargs:
        return None
    return ClientOptions(**kwargs)


def create_client(config: VisionConfig) -> vision.ImageAnnotatorClient:
    """Create the process-wide Cloud Vision client.

    Uses the configured service account file when present, otherwise
    Application Default Credentials (or the API key in client options).

    Raises:
        google.auth.exceptions.DefaultCredentialsError: If no credentials
            can be found.
    """
    options = _client_options(config)

    if config.credentials_file is not None:
        credentials_file = config.credentials_file.expanduser()
        logger.debug("Using service account file %s", credentials_file)
        return vision.ImageAnnotatorClient.from_service_account_file(
            str(credentials_file), client_options=options
        )

    logger.debug(
        "Using %s",
        "API key" if config.api_key is not None else "application default credentials",
    )
    return vision.ImageAnnotatorClient(client_options=options)
