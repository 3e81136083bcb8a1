"""JSON object loading for preference files.

A missing file is normal (nothing saved yet) and comes back as None. A file
that exists but can't be used raises LoadError, which callers turn into
their own error type.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from utklipp.core.errors import LoadError

logger = logging.getLogger(__name__)


def read_json_object(path: Path, error_context: str = "") -> dict[str, Any] | None:
    """Read a JSON object from `path`.

    Args:
        path: File to read.
        error_context: Optional prefix for error messages (e.g., "preferences").

    Returns:
        The parsed object, {} for an empty or whitespace-only file, or None if
        the file doesn't exist.

    Raises:
        LoadError: If the file can't be read, isn't valid JSON, or holds
            something other than an object.
    """
    prefix = f"{error_context}: " if error_context else ""

    if not path.is_file():
        logger.debug("%sno file at %s", prefix, path)
        return None

    try:
        # utf-8-sig drops a BOM left by some Windows editors
        raw = path.read_text(encoding="utf-8-sig").strip()
    except OSError as e:
        raise LoadError(f"{prefix}Failed to read {path}: {e}") from e

    if not raw:
        return {}

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise LoadError(f"{prefix}Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise LoadError(f"{prefix}Expected an object in {path}, got {type(data).__name__}")

    logger.debug("%sloaded %s", prefix, path)
    return data
