"""
Environment-driven settings for the shape calculator.

The calculator takes no command-line flags, so the few knobs it has are read
from the environment.
"""

from __future__ import annotations

import logging
import os


LOG_LEVEL = os.getenv("SHAPECALC_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def log_level(name: str | None = None) -> int:
    """Resolve a level name such as ``"debug"`` to its numeric value."""
    level = logging.getLevelName((name or LOG_LEVEL).strip().upper())
    if isinstance(level, int):
        return level
    return logging.WARNING
