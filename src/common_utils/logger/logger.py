"""Package logger for common_utils.

All records go through the ``common_utils`` logger. Modules ask for a child
with :func:`get_logger` so the originating module shows up in ``%(name)s``
while a single handler, configured once, does the output.
"""

import logging
import sys

from common_utils.core.config import settings

__all__ = ["PACKAGE_LOGGER", "logger", "setup_logger", "get_logger"]

PACKAGE_LOGGER = "common_utils"


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (the package name unless a separate tree is wanted)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls back
            to the configured ``LOG_LEVEL``.
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Return the child of the package logger for ``module_name``.

    Names outside the package (e.g. ``"__main__"``) are nested under it too,
    so every record ends up at the package handler.

    Example:
        >>> get_logger("common_utils.functional.reducers").name
        'common_utils.functional.reducers'
        >>> get_logger("scratch").name
        'common_utils.scratch'
    """
    if module_name == PACKAGE_LOGGER:
        return logger
    if module_name.startswith(f"{PACKAGE_LOGGER}."):
        return logging.getLogger(module_name)
    return logger.getChild(module_name)


# Default logger instance for the package
logger = setup_logger()
