"""Centralized logging configuration for vision-detect.

The CLI calls configure_logging() once at startup. Log records go to stderr
so detection results printed on stdout stay machine-readable.

Logging Levels:
- DEBUG: Config resolution, request shapes, declined inputs
- INFO: One line per remote call
- WARNING: Unexpected response shapes, missing optional config
- ERROR: Failures that abort the command
"""

import logging
import os
import re
from dataclasses import dataclass, field

ENV_VAR = "VISION_DETECT_LOG_LEVEL"

DEFAULT_LEVEL = "WARNING"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Default patterns for secret detection and redaction
DEFAULT_REDACT_PATTERNS: list[str] = [
    # Google API keys
    r"\b(AIza[0-9A-Za-z\-_]{20,})\b",
    # OAuth access tokens issued by Google
    r"\b(ya29\.[0-9A-Za-z\-_.]{20,})",
    # ENV-style assignments: API_KEY=secret or API_KEY: secret
    r"\b[A-Z0-9_]+(?:KEY|TOKEN|SECRET|PASSWORD)\s*[=:]\s*([^\s\"']{8,})",
    # Bearer tokens in headers
    r"\bBearer\s+([A-Za-z0-9._\-+=]{20,})\b",
    # PEM private key blocks (service account JSON embeds these)
    r"-----BEGIN [A-Z ]*PRIVATE KEY-----[\s\S]+?-----END [A-Z ]*PRIVATE KEY-----",
]


@dataclass
class SecretRedactor:
    """Redacts credentials from log messages.

    Matches are replaced with partially masked versions so a key can still
    be identified without being leaked.
    """

    patterns: list[re.Pattern[str]] = field(default_factory=list)
    enabled: bool = True

    def __post_init__(self) -> None:
        if not self.patterns:
            self.patterns = [
                re.compile(p, re.IGNORECASE) for p in DEFAULT_REDACT_PATTERNS
            ]

    def redact(self, text: str) -> str:
        """Redact secrets from text, preserving partial info for debugging."""
        if not self.enabled or not text:
            return text
        result = text
        for pattern in self.patterns:
            result = pattern.sub(self._mask_match, result)
        return result

    def _mask_match(self, match: re.Match[str]) -> str:
        full = match.group(0)

        if "PRIVATE KEY" in full:
            lines = full.strip().split("\n")
            if len(lines) >= 2:
                return f"{lines[0]}\n...redacted...\n{lines[-1]}"
            return "***PRIVATE KEY***"

        token = match.group(1) if match.lastindex else full

        # Already masked
        if "..." in token:
            return full

        if len(token) < 12:
            return full.replace(token, "***") if token != full else "***"

        masked = f"{token[:4]}...{token[-4:]}"
        return full.replace(token, masked) if token != full else masked


_redactor = SecretRedactor()


class ComponentFormatter(logging.Formatter):
    """Formatter that shortens logger paths and redacts secrets.

    Converts full module paths to short component names:
    - vision_detect.annotate.detector -> annotate
    - vision_detect.config.loader -> config
    """

    def format(self, record: logging.LogRecord) -> str:
        parts = record.name.split(".")
        if len(parts) >= 2 and parts[0] == "vision_detect":
            record.component = parts[1]
        else:
            record.component = parts[0]
        return _redactor.redact(super().format(record))


# Third-party loggers that are too noisy at INFO level
NOISY_LOGGERS = [
    "google",
    "google.auth",
    "google.api_core",
    "grpc",
    "urllib3",
]


def resolve_level(level: str | None = None) -> str:
    """Resolve the effective level name from argument, env var, or default."""
    if level is None:
        level = os.environ.get(ENV_VAR, DEFAULT_LEVEL)
    level = level.upper()
    if level not in LEVELS:
        return DEFAULT_LEVEL
    return level


def configure_logging(level: str | None = None) -> None:
    """Configure logging for vision-detect.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
            If None, uses VISION_DETECT_LOG_LEVEL env var or WARNING.
    """
    log_level = getattr(logging, resolve_level(level))

    handler = logging.StreamHandler()
    handler.setFormatter(
        ComponentFormatter(
            "%(asctime)s | %(levelname)-8s | %(component)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    logging.basicConfig(
        level=log_level,
        handlers=[handler],
        force=True,
    )

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(
            max(log_level, logging.WARNING)
        )
