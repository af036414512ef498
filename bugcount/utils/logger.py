# bugcount/utils/logger.py

"""
Centralized logger configuration for bugcount.

Provides a `get_logger(name: str)` function. On first request, it:
  - Configures a StreamHandler to stderr
  - Sets a default formatter: "YYYY-MM-DD HH:MM:SS LEVEL [logger_name] message"
  - Defaults to WARNING level so stdout/stderr stay quiet for the CLI
    (override with BUGCOUNT_LOG=DEBUG etc.)
"""

import logging
import os

from bugcount.utils.settings import ENV_LOG_LEVEL

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def get_logger(name: str = None) -> logging.Logger:
    """
    Return a logger named `bugcount.<name>`. On first use, configures a
    StreamHandler with a default format. Honors the BUGCOUNT_LOG environment
    variable if set to a valid level.
    """
    base_name = "bugcount"
    if name and name.startswith(base_name + "."):
        name = name[len(base_name) + 1:]
    logger_name = f"{base_name}.{name}" if name else base_name
    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter(_DEFAULT_FORMAT, datefmt=_DATEFMT)
        handler.setFormatter(fmt)
        logger.addHandler(handler)

        env_level = os.getenv(ENV_LOG_LEVEL, "").upper()
        level = logging.WARNING
        if env_level in _VALID_LEVELS:
            level = getattr(logging, env_level)
        logger.setLevel(level)

        # Prevent double-logging: do not propagate to root
        logger.propagate = False

    return logger
