"""Logging utilities for extfind.

Diagnostics go to stderr through a ``rich`` handler so that stdout only
ever carries matching paths.  The verbosity decides what is shown:
``0`` errors only, ``1`` also walk warnings such as unreadable
directories, ``2`` and above also debug messages.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = 'extfind'

_LEVELS = {0: logging.ERROR, 1: logging.WARNING}


def level_for(verbosity: int) -> int:
    return _LEVELS.get(verbosity, logging.DEBUG)


def setup_logging(verbosity: int = 0) -> logging.Logger:
    """Configure and return the ``extfind`` logger.

    Any handler installed by a previous call is replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(handler)
    logger.setLevel(level_for(verbosity))
    return logger
