"""Logging setup for applications embedding the Decart adapters."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "decart_media"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def setup_logging(
    verbose: bool = False, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling this again replaces the handler it installed earlier.
    """
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    handler.set_name(PACKAGE_LOGGER)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == PACKAGE_LOGGER:
            package_logger.removeHandler(existing)
    package_logger.setLevel(level)
    package_logger.addHandler(handler)

    # Request lines from the transport are noise at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return package_logger
