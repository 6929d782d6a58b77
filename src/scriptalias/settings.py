from __future__ import annotations

import logging
import os


def default_log_level() -> int:
    """Return the log level used by the command line.

    Override with `SCRIPTALIAS_LOG_LEVEL` (a level name such as `DEBUG`).
    """
    override = os.environ.get("SCRIPTALIAS_LOG_LEVEL")
    if override:
        level = logging.getLevelName(override.strip().upper())
        if isinstance(level, int):
            return level
    return logging.WARNING
