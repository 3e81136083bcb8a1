"""Core constants and paths for utklipp.

Single source of truth for on-disk locations. Modules import from here
instead of hardcoding `Path.home() / ".utklipp"`.
"""

import os
from pathlib import Path

UTKLIPP_DIR_NAME = ".utklipp"
UTKLIPP_HOME_ENV = "UTKLIPP_HOME"

# Seconds between clipboard polls
POLL_INTERVAL_SECONDS = 0.5

# Number of entries reachable through digit shortcuts
FAST_ACCESS_SLOTS = 9


def get_utklipp_dir() -> Path:
    """Get the utklipp home directory (~/.utklipp or $UTKLIPP_HOME)."""
    override = os.environ.get(UTKLIPP_HOME_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / UTKLIPP_DIR_NAME


def get_preferences_path() -> Path:
    """Get the preferences file path."""
    return get_utklipp_dir() / "preferences.json"


def get_log_dir() -> Path:
    """Get the log directory."""
    return get_utklipp_dir() / "logs"
