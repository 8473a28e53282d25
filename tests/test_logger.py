from __future__ import annotations

import logging

from rich.logging import RichHandler

from extfind.logging.logger import LOGGER_NAME, setup_logging


def test_verbosity_levels() -> None:
    assert setup_logging(0).level == logging.ERROR
    assert setup_logging(1).level == logging.WARNING
    assert setup_logging(2).level == logging.DEBUG
    assert setup_logging(5).level == logging.DEBUG


def test_repeated_setup_keeps_a_single_handler() -> None:
    setup_logging(1)
    logger = setup_logging(1)
    assert logger is logging.getLogger(LOGGER_NAME)
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
    assert logger.handlers[0].console.stderr
