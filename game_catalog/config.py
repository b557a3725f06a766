"""
Environment configuration for the game catalog tools.

  GAME_CATALOG_DB         default database file for the CLI
  GAME_CATALOG_LOG_LEVEL  stderr log level for the CLI (default WARNING)
"""

import os
from pathlib import Path
from typing import Optional

from loguru import logger

DEFAULT_LOG_LEVEL = "WARNING"


def configured_db_path() -> Optional[Path]:
    """Return the database path from GAME_CATALOG_DB, or None if not configured."""
    env_path = os.environ.get("GAME_CATALOG_DB")
    return Path(env_path) if env_path else None


def configured_log_level() -> str:
    """Return GAME_CATALOG_LOG_LEVEL if loguru knows it, else DEFAULT_LOG_LEVEL."""
    level = os.environ.get("GAME_CATALOG_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    try:
        logger.level(level)
    except ValueError:
        logger.warning(
            f"Unknown GAME_CATALOG_LOG_LEVEL {level!r}, using {DEFAULT_LOG_LEVEL}."
        )
        return DEFAULT_LOG_LEVEL
    return level
