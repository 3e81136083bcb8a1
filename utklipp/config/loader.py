"""Preference loading and saving.

Preferences are read once at start-up and written only on an explicit save.
A missing file means defaults. Values that are the right type but out of
range are clamped with a warning so a hand-edited file never blocks start-up;
anything else (bad JSON, unknown keys, non-integers) fails fast.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from utklipp.config.load_utils import read_json_object
from utklipp.config.schema import Preferences
from utklipp.core.constants import get_preferences_path
from utklipp.core.errors import ConfigError, LoadError
from utklipp.core.secure_io import secure_mkdir, secure_write_atomic

logger = logging.getLogger(__name__)

_RANGE_ERRORS = frozenset({"greater_than_equal", "less_than_equal"})


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences, falling back to defaults when no file exists.

    Args:
        path: Explicit preferences file. Defaults to get_preferences_path().

    Returns:
        Validated Preferences.

    Raises:
        ConfigError: If the file can't be parsed or holds invalid values.
    """
    prefs_path = path or get_preferences_path()
    try:
        data = read_json_object(prefs_path, error_context="preferences")
    except LoadError as e:
        raise ConfigError(e.message) from e

    if not data:
        logger.debug("No preferences at %s, using defaults", prefs_path)
        return Preferences()

    try:
        prefs = Preferences.model_validate(data)
    except ValidationError as e:
        if not _only_range_errors(e):
            raise ConfigError(f"Invalid preferences in {prefs_path}: {e}") from e
        prefs = Preferences.clamped(**data)
        logger.warning(
            "Out-of-range preferences in %s clamped to %s",
            prefs_path,
            prefs.model_dump(),
        )

    logger.info("Preferences loaded from %s", prefs_path)
    return prefs


def save_preferences(prefs: Preferences, path: Path | None = None) -> Path:
    """Persist preferences atomically with owner-only permissions.

    Returns:
        The path written.

    Raises:
        ConfigError: If the file can't be written.
    """
    prefs_path = path or get_preferences_path()
    try:
        secure_mkdir(prefs_path.parent)
        secure_write_atomic(prefs_path, prefs.model_dump_json(indent=2) + "\n")
    except OSError as e:
        raise ConfigError(f"Failed to save preferences to {prefs_path}: {e}") from e

    logger.info("Preferences saved to %s", prefs_path)
    return prefs_path


def _only_range_errors(error: ValidationError) -> bool:
    return all(err["type"] in _RANGE_ERRORS for err in error.errors())


def with_changes(prefs: Preferences, **changes: int) -> Preferences:
    """Return `prefs` with `changes` applied, rejecting out-of-range values.

    Raises:
        ConfigError: If a changed value is invalid.
    """
    try:
        return prefs.replace(**changes)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid preferences: {details}") from e
