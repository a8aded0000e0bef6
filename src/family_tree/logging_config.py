"""Logging configuration for the family tree explorer."""

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False) -> None:
    """Configure loguru: INFO with bare messages, or DEBUG with source locations."""
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG", format="{level.icon} {name}:{line} {message}")
    else:
        logger.add(sys.stderr, level="INFO", format="{level.icon} {message}")
