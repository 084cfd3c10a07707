"""
config.py

Configuration constants and logging setup for the lending package.
"""

from __future__ import annotations
import logging

# Configuration
MAX_BORROW = 3

# Logging
LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """
    Install the package's default log format on the root logger.

    Library code only obtains named loggers; applications and harnesses call
    this once at start-up.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("library_lending").setLevel(level)
