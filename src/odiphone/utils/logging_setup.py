"""Logging configuration for command-line runs."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Send log records to stderr, keeping stdout free for encoded output.

    *level* is a level name already checked by ``AppConfig``.
    """
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
