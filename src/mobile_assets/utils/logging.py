"""Process wide loguru configuration."""

import sys

from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> | {message}"


def configure_logging(verbose: bool = False) -> int:
    """Install the stderr sink. Call once at process start.

    Errors and warnings are always shown; info and debug messages only
    when ``verbose`` is set.

    Returns:
        Id of the installed loguru handler
    """
    logger.remove()
    return logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format=LOG_FORMAT,
        colorize=None,
    )
