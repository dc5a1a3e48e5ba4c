"""Route a command name and path to a detection capability."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from vision_detect.annotate.capabilities import CAPABILITIES, get_capability
from vision_detect.annotate.detector import Detector

logger = logging.getLogger(__name__)

PROGRAM_NAME = "vision-detect"

ALL_LOCAL = "all-local"

COMMANDS = [ALL_LOCAL, *CAPABILITIES]

# Cloud Storage URIs are recognized but not supported
GCS_PREFIX = "gs://"

# (command, bundled sample image) pairs run by all-local, in order
LOCAL_SAMPLES: list[tuple[str, str]] = [
    ("faces", "face_no_surprise.jpg"),
    ("labels", "wakeupcat.jpg"),
    ("landmarks", "landmark.jpg"),
    ("logos", "logos.png"),
    ("text", "text.jpg"),
    ("properties", "landmark.jpg"),
    ("safe-search", "wakeupcat.jpg"),
]


class UnknownCommandError(ValueError):
    """Raised when the command name matches no capability."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(
            f"Unknown command '{command}'. Available: {' | '.join(COMMANDS)}"
        )


def usage_text() -> str:
    return (
        "Usage:\n"
        f'\t{PROGRAM_NAME} "<command>" "<path-to-image>"\n'
        "Commands:\n"
        f"\t{' | '.join(COMMANDS)}\n"
        "Path:\n"
        "\tA file path (ex: ./resources/wakeupcat.jpg) or a URI for a Cloud Storage "
        "resource (gs://...)\n"
    )


def print_usage(out: TextIO) -> None:
    out.write(usage_text())


def is_known_command(command: str) -> bool:
    return command == ALL_LOCAL or command in CAPABILITIES


class Dispatcher:
    """Dispatches `<command> <path>` arguments to capability handlers."""

    def __init__(self, detector: Detector, samples_dir: Path, out: TextIO) -> None:
        self._detector = detector
        self._samples_dir = samples_dir
        self._out = out

    def run(self, args: list[str]) -> None:
        """Run the command named by args[0] against the path in args[1].

        Raises:
            UnknownCommandError: If args[0] names no command.
            OSError: If an image file cannot be read.
        """
        if not args:
            print_usage(self._out)
            return

        command = args[0]
        path = args[1] if len(args) > 1 else ""

        if command == ALL_LOCAL:
            self.run_all_local()
            return

        capability = get_capability(command)
        if capability is None:
            raise UnknownCommandError(command)

        if path.startswith(GCS_PREFIX):
            logger.debug("Skipping %s: Cloud Storage paths are not supported", path)
            return

        self._detector.detect(capability, path)

    def run_all_local(self) -> None:
        """Run every capability against the bundled sample images.

        A missing sample aborts the remaining sequence.
        """
        for command, filename in LOCAL_SAMPLES:
            self._detector.detect(CAPABILITIES[command], self._samples_dir / filename)
