"""Logging configuration for the utklipp command line.

Log records never include clipboard text; modules log lengths and entry ids
only.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from utklipp.core.secure_io import secure_mkdir

LOGGER_NAMESPACE = "utklipp"
LOG_FILE_NAME = "utklipp.log"

logger = logging.getLogger(__name__)


def configure_logging(
    log_dir: Path | None,
    level: int = logging.INFO,
    console_level: int = logging.WARNING,
) -> Path | None:
    """Configure the utklipp namespace logger.

    Sets up a rotating file handler (max 5MB per file, 3 backups) at
    `{log_dir}/utklipp.log` and a stderr handler. Calling it again replaces
    the handlers instead of stacking them.

    Args:
        log_dir: Directory for the log file. None disables file logging.
        level: Logging level for file output (default INFO).
        console_level: Logging level for console output (default WARNING).

    Returns:
        Path to the log file, or None when file logging is disabled.
    """
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root = logging.getLogger(LOGGER_NAMESPACE)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    log_file = None
    effective = console_level
    if log_dir is not None:
        secure_mkdir(log_dir)
        log_file = log_dir / LOG_FILE_NAME
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        effective = min(level, console_level)

    root.setLevel(effective)
    # Don't propagate to the root logger
    root.propagate = False

    if log_file is not None:
        logger.info("Logging to %s", log_file)
    return log_file
