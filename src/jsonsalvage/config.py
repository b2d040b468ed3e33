"""Environment-based settings for the jsonsalvage CLI and server.

The extraction core takes no configuration. Settings only cover the outer
surfaces: where logs go, how verbose they are, and how much text the HTTP
endpoint accepts.

Environment variables:
    JSONSALVAGE_LOG_LEVEL: Level name for the jsonsalvage logger (default WARNING).
    JSONSALVAGE_LOG_FILE: Write logs to this file instead of stderr.
    JSONSALVAGE_MAX_INPUT_CHARS: Largest text accepted by POST /extract
        (default 1000000).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from collections.abc import Mapping

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_INPUT_CHARS = 1_000_000


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    """Resolved settings.

    Attributes:
        log_level: Upper-case logging level name.
        log_file: Path of the log file, or None to log to stderr.
        max_input_chars: Maximum length of text accepted over HTTP.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str | None = None
    max_input_chars: int = DEFAULT_MAX_INPUT_CHARS


def _as_level(value: str, *, key: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Invalid log level for {key}: {value!r}")
    return level


def _as_positive_int(value: str, *, key: str) -> int:
    try:
        number = int(value)
    except ValueError as e:
        raise ConfigError(f"Invalid int for {key}: {value!r}") from e
    if number <= 0:
        raise ConfigError(f"{key} must be positive, got {number}")
    return number


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read Settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Settings with defaults for any variable that is unset or empty.

    Raises:
        ConfigError: If a variable is set to an invalid value.
    """
    env = os.environ if environ is None else environ
    log_level = env.get("JSONSALVAGE_LOG_LEVEL") or DEFAULT_LOG_LEVEL
    max_input_chars = env.get("JSONSALVAGE_MAX_INPUT_CHARS")
    return Settings(
        log_level=_as_level(log_level, key="JSONSALVAGE_LOG_LEVEL"),
        log_file=env.get("JSONSALVAGE_LOG_FILE") or None,
        max_input_chars=(
            _as_positive_int(max_input_chars, key="JSONSALVAGE_MAX_INPUT_CHARS")
            if max_input_chars
            else DEFAULT_MAX_INPUT_CHARS
        ),
    )
