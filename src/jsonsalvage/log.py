"""Logging setup for the jsonsalvage CLI and server.

Every module logs through ``logging.getLogger("jsonsalvage.<module>")``.
configure_logging() routes the ``jsonsalvage`` logger to a single handler,
either a file or stderr, so log lines never mix with results on stdout.
"""
import logging
import sys

from jsonsalvage.config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

_handler: logging.Handler | None = None


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a handler and level to the package logger.

    Calling this again replaces the handler installed by the previous call.

    Args:
        settings: Settings providing log_level and log_file.

    Returns:
        The configured ``jsonsalvage`` logger.
    """
    global _handler

    logger = logging.getLogger("jsonsalvage")
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()

    if settings.log_file:
        _handler = logging.FileHandler(settings.log_file)
    else:
        _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(_handler)
    logger.setLevel(settings.log_level)
    logger.propagate = False
    logger.debug(f"Logging configured: level={settings.log_level}, file={settings.log_file}")
    return logger
