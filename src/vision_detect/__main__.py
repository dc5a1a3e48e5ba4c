"""Allow running as ``python -m vision_detect``."""

from vision_detect.cli.app import app

if __name__ == "__main__":
    app()
