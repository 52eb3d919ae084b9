"""Logging configuration."""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "ukwac_stream"


def setup_logging(level: str = "INFO") -> None:
    """Log readable lines to stderr.

    *level* applies to this package's loggers; other libraries stay at WARNING.
    """
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric)
