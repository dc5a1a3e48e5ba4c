"""Main CLI application."""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from google.api_core.exceptions import GoogleAPICallError
from google.auth.exceptions import DefaultCredentialsError

from vision_detect.annotate.client import create_client
from vision_detect.annotate.detector import Detector
from vision_detect.annotate.dispatcher import (
    Dispatcher,
    is_known_command,
    print_usage,
)
from vision_detect.cli.console import dim, error
from vision_detect.config import ConfigError, load_config
from vision_detect.logging import configure_logging

logger = logging.getLogger(__name__)

AUTH_HELP = (
    "Authenticate with `gcloud auth application-default login`, or set "
    "[vision].credentials_file or GOOGLE_API_KEY."
)

app = typer.Typer(
    name="vision-detect",
    help="Detect faces, labels, landmarks, logos, text, colors and "
    "safe-search flags in images with the Cloud Vision API.",
    add_completion=False,
)


@app.command()
def detect(
    command: Annotated[
        str | None,
        typer.Argument(
            help="all-local | faces | labels | landmarks | logos | text | "
            "safe-search | properties",
            show_default=False,
        ),
    ] = None,
    path: Annotated[
        str,
        typer.Argument(help="Local image path (gs:// URIs are not supported)"),
    ] = "",
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
        ),
    ] = None,
) -> None:
    """Run one detection against an image and print the results."""
    out = sys.stdout

    if command is None:
        print_usage(out)
        return

    if not is_known_command(command):
        error(f"Unknown command '{command}'")
        print_usage(out)
        raise typer.Exit(1)

    configure_logging()
    try:
        detect_config = load_config(config)
    except (FileNotFoundError, ConfigError) as e:
        error(str(e))
        raise typer.Exit(1) from None
    if detect_config.log_level:
        configure_logging(detect_config.log_level)

    try:
        client = create_client(detect_config.vision)
    except DefaultCredentialsError as e:
        error(f"No Google Cloud credentials: {e}")
        dim(AUTH_HELP)
        raise typer.Exit(1) from None

    dispatcher = Dispatcher(
        Detector(client, out),
        samples_dir=detect_config.samples_dir.expanduser(),
        out=out,
    )
    try:
        dispatcher.run([command, path])
    except OSError as e:
        error(f"Cannot read image: {e}")
        raise typer.Exit(1) from None
    except GoogleAPICallError as e:
        logger.debug("Vision API call failed", exc_info=True)
        error(f"Vision API call failed: {e}")
        raise typer.Exit(1) from None


if __name__ == "__main__":
    app()
