"""
Logging setup for the command-line entry points.

Environment switch:
    INDIGO_LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
"""
from __future__ import annotations

import logging
import os

LOG_LEVEL = os.getenv("INDIGO_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None) -> None:
    """Call once at program start (cli.main)."""
    name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
