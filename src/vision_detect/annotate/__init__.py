"""Cloud Vision feature detection."""

from vision_detect.annotate.capabilities import CAPABILITIES, Capability, get_capability
from vision_detect.annotate.client import AnnotatorClient, create_client
from vision_detect.annotate.detector import Detector, build_request
from vision_detect.annotate.dispatcher import (
    ALL_LOCAL,
    COMMANDS,
    Dispatcher,
    UnknownCommandError,
    print_usage,
)

__all__ = [
    "ALL_LOCAL",
    "AnnotatorClient",
    "CAPABILITIES",
    "COMMANDS",
    "Capability",
    "Detector",
    "Dispatcher",
    "UnknownCommandError",
    "build_request",
    "create_client",
    "get_capability",
    "print_usage",
]
