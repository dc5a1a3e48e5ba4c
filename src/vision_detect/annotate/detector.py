"""Single-feature image annotation against the Cloud Vision API."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from google.cloud import vision

from vision_detect.annotate.capabilities import Capability
from vision_detect.annotate.client import AnnotatorClient

logger = logging.getLogger(__name__)


def build_request(
    content: bytes, feature: vision.Feature.Type
) -> vision.AnnotateImageRequest:
    """Build a request asking for exactly one feature on one image."""
    return vision.AnnotateImageRequest(
        image=vision.Image(content=content),
        features=[vision.Feature(type_=feature)],
    )


class Detector:
    """Runs one capability against one local image and prints the results.

    The client is created once by the caller and only read here.
    """

    def __init__(self, client: AnnotatorClient, out: TextIO) -> None:
        self._client = client
        self._out = out

    def _print(self, text: str) -> None:
        self._out.write(f"{text}\n")

    def detect(self, capability: Capability, path: str | Path) -> None:
        """Annotate the image at path and print each result entry.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        content = Path(path).read_bytes()
        request = build_request(content, capability.feature)

        logger.info(
            "Requesting %s for %s (%d bytes)",
            capability.feature.name,
            path,
            len(content),
        )
        batch = self._client.batch_annotate_images(requests=[request])
        if len(batch.responses) != 1:
            logger.warning(
                "Expected one response for %s, got %d", path, len(batch.responses)
            )

        for response in batch.responses:
            if "error" in response:
                self._print(f"Error: {response.error.message}")
                return

            for entry in capability.entries(response):
                self._print(capability.render(entry))
