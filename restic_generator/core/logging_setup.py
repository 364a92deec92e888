"""Logging configuration for the generator.

systemd collects a generator's stderr into the journal, so everything goes
there and nothing is written to stdout.
"""
from __future__ import annotations

import logging
import sys

LOGGER_NAME = "restic_generator"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler once; later calls only adjust the level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    return logger
