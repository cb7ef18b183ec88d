"""Environment configuration helpers.

Settings are read from the process environment, optionally seeded from
a ``.env`` file.  Values are looked up at call time rather than cached
at import so they can be changed per test or per process.

* ``EVENTITER_ERROR_CHANNEL`` – channel name treated as the error
  channel when :func:`eventiter.adapt` is not given one (``"error"``).
* ``EVENTITER_LOG_LEVEL`` – level applied by :func:`configure_logging`
  (``"WARNING"``).
"""

import logging
import os
from typing import Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

if not load_dotenv():
    logger.debug("No .env file found or could not be loaded.")

DEFAULT_ERROR_CHANNEL = "error"
DEFAULT_LOG_LEVEL = "WARNING"

# Mapping from setting name to the environment variable that overrides it
ENV_VARS = {
    "error_channel": "EVENTITER_ERROR_CHANNEL",
    "log_level": "EVENTITER_LOG_LEVEL",
}


def get_error_channel() -> str:
    """Return the configured error channel name."""
    return os.getenv(ENV_VARS["error_channel"]) or DEFAULT_ERROR_CHANNEL


def get_log_level() -> str:
    """Return the configured log level name, upper-cased."""
    value = os.getenv(ENV_VARS["log_level"]) or DEFAULT_LOG_LEVEL
    return value.strip().upper()


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Set the level of the ``eventiter`` logger and return it.

    Only the package logger is touched; handlers are left to the
    application.
    """
    if level is None:
        level = get_log_level()
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    package_logger = logging.getLogger("eventiter")
    package_logger.setLevel(level)
    return package_logger


__all__ = [
    "DEFAULT_ERROR_CHANNEL",
    "DEFAULT_LOG_LEVEL",
    "get_error_channel",
    "get_log_level",
    "configure_logging",
]
