"""
openventuro.log - Logging Setup
===============================

Modules log through ``logging.getLogger(__name__)``. This module attaches
one rich handler, writing to stderr, to the ``openventuro`` logger so that
debug output never mixes with the progress lines on stdout.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from openventuro.console import err_console


LOGGER_NAME = "openventuro"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Configure the package logger.

    Safe to call more than once; the handler is only added the first time.

    Parameters
    ----------
    level : str
        Logging level name, e.g. ``"DEBUG"``.

    Returns
    -------
    logging.Logger
        The ``openventuro`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=err_console,
            show_time=False,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)

    return logger
