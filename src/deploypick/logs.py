"""
Timestamped logging for deploypick.

Messages render as `[deploypick :: 2024-01-31 12:00:00] => message`.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

APP_NAME = "deploypick"

LOG_FORMAT = f"[{APP_NAME} :: %(asctime)s] => %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(APP_NAME)


class DeployLogFormatter(logging.Formatter):
    """Formatter producing the one-line `[app :: timestamp] => message` form."""

    def __init__(self) -> None:
        super().__init__(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Handler:
    """
    Attach a stream handler with `DeployLogFormatter` to the deploypick logger.

    Any handler installed by an earlier call is replaced, so repeated setup
    never duplicates lines.
    """
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(DeployLogFormatter())
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return handler


def log(msg: Any) -> None:
    """Log a message. Empty messages are ignored."""
    if msg:
        logger.info("%s", msg)
