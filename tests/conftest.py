"""Shared test fixtures and factories."""

from collections.abc import Sequence
from pathlib import Path

import pytest
from google.cloud import vision

from vision_detect.annotate.dispatcher import LOCAL_SAMPLES
from vision_detect.config.paths import get_home

# =============================================================================
# Remote client fakes
# =============================================================================


class FakeAnnotatorClient:
    """Records requests and replays canned responses in order."""

    def __init__(self, *responses: vision.AnnotateImageResponse) -> None:
        self._responses = list(responses)
        self.calls: list[list[vision.AnnotateImageRequest]] = []

    def batch_annotate_images(
        self, *, requests: Sequence[vision.AnnotateImageRequest]
    ) -> vision.BatchAnnotateImagesResponse:
        self.calls.append(list(requests))
        if self._responses:
            response = self._responses.pop(0)
        else:
            response = vision.AnnotateImageResponse()
        return vision.BatchAnnotateImagesResponse(responses=[response])

    @property
    def features(self) -> list[vision.Feature.Type]:
        """The single feature type of each recorded call."""
        return [call[0].features[0].type_ for call in self.calls]


@pytest.fixture
def make_client() -> type[FakeAnnotatorClient]:
    """Factory for fake clients primed with canned responses."""
    return FakeAnnotatorClient


@pytest.fixture
def fake_client() -> FakeAnnotatorClient:
    return FakeAnnotatorClient()


# =============================================================================
# Files
# =============================================================================


@pytest.fixture
def image_file(tmp_path: Path) -> Path:
    """A small local file standing in for an image."""
    path = tmp_path / "image.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")
    return path


@pytest.fixture
def samples_dir(tmp_path: Path) -> Path:
    """A directory holding every sample image all-local expects."""
    directory = tmp_path / "resources"
    directory.mkdir()
    for _, filename in LOCAL_SAMPLES:
        (directory / filename).write_bytes(filename.encode())
    return directory


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path: Path):
    """Keep tests away from the user's config and credentials."""
    monkeypatch.setenv("VISION_DETECT_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("VISION_DETECT_API_ENDPOINT", raising=False)
    monkeypatch.delenv("VISION_DETECT_SAMPLES_DIR", raising=False)
    monkeypatch.delenv("VISION_DETECT_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    get_home.cache_clear()
    yield
    get_home.cache_clear()


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})
