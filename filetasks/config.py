"""
Runtime configuration helpers.

This module centralizes settings loaded from environment variables so the
command-line tools never hard-code data locations or log levels.
"""

import logging
import os


FUNKO_DATA_DIR_ENV = "FUNKO_DATA_DIR"
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_FUNKO_DATA_DIR = "funkos"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_funko_data_dir() -> str:
    """
    Return the root directory that holds every user's collection.

    :returns: ``FUNKO_DATA_DIR`` if set, otherwise ``funkos`` relative to the
        current working directory.
    """

    return os.environ.get(FUNKO_DATA_DIR_ENV) or DEFAULT_FUNKO_DATA_DIR


def get_log_level() -> str:
    """
    Read and validate the log level name.

    :raises RuntimeError: If ``LOG_LEVEL`` is not a standard level name.
    :returns: Upper-cased level name.
    """

    level = (os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    if level not in VALID_LOG_LEVELS:
        valid = ", ".join(VALID_LOG_LEVELS)
        raise RuntimeError(
            f"Invalid {LOG_LEVEL_ENV} value {level!r} (expected one of: {valid})."
        )
    return level


def configure_logging() -> None:
    """Configure root logging for the command-line entry points."""
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
