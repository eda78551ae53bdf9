"""
Logging configuration for termfx.

The engine logs through loguru's global logger. Nothing is logged per cell;
debug output covers shader registration, effects being added, retired or
cancelled, and frame deltas that had to be clamped.
"""

import os
import sys
from typing import Optional

from loguru import logger

from .config import get_fx_setting


LOG_LEVEL_ENV_VAR = "TERMFX_LOG_LEVEL"


def get_log_level() -> str:
    """Environment override first, then the [logging] level setting."""
    return os.environ.get(LOG_LEVEL_ENV_VAR) or get_fx_setting("logging", "level", "INFO")


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure logging sinks for termfx.

    This should be called once at startup by applications that want the
    engine's logs; Textual apps usually leave the console sink off since it
    would draw over the UI.
    """
    level = (level or get_log_level()).upper()
    logger.remove()  # Remove default handler

    log_file = get_fx_setting("logging", "file", "")
    if log_file:
        logger.add(
            sink=os.path.expanduser(log_file),
            level=level,
            rotation="10 MB",
            retention="7 days",
        )

    if get_fx_setting("logging", "console", False, bool):
        logger.add(
            sink=sys.stderr,
            level=level,
            colorize=True
        )

    logger.info(f"termfx logging configured: level={level}, file={log_file or None}")
