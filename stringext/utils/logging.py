"""Logging setup built on loguru."""

import sys

from loguru import logger

PACKAGE_NAME = "stringext"


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure loguru for command-line use.

    Replaces loguru's default handler with a single stderr sink and enables
    the package namespace, which is disabled on import so that library
    callers see no output unless they opt in.

    Args:
        verbose: Show INFO messages (progress, summaries, timings)
        debug: Show DEBUG messages (fallback paths inside the helpers)
    """
    logger.remove()

    if debug:
        level = "DEBUG"
        log_format = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | {message}"
    elif verbose:
        level = "INFO"
        log_format = "{message}"
    else:
        level = "WARNING"
        log_format = "<level>{level}</level>: {message}"

    logger.add(sys.stderr, level=level, format=log_format, colorize=None)
    logger.enable(PACKAGE_NAME)
