"""Structured logging setup for anim2mp4."""

from __future__ import annotations

import logging
import sys
from typing import TextIO


def setup_logging(level: str = "WARNING", stream: TextIO | None = None) -> None:
    """Configure structured logging with consistent format.

    Logs go to stderr by default so stdout only carries the result line.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=stream or sys.stderr,
    )
