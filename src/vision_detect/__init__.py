"""Command-line sample for the Google Cloud Vision API."""

__version__ = "0.1.0"
