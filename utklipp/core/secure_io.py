"""Owner-only file writes for utklipp preferences.

Preference files are small and rewritten whole. Writes go to a sibling temp
file that is created with 0o600 and renamed over the target, so a reader
never sees a half-written file.
"""

import os
import stat
from pathlib import Path

# Owner only
SECURE_DIR_MODE: int = stat.S_IRWXU  # 0o700
SECURE_FILE_MODE: int = stat.S_IRUSR | stat.S_IWUSR  # 0o600


def secure_mkdir(path: Path) -> None:
    """Create a directory (and missing parents) with mode 0o700.

    The final directory is chmod'ed even when it already exists.
    """
    path.mkdir(mode=SECURE_DIR_MODE, parents=True, exist_ok=True)
    os.chmod(path, SECURE_DIR_MODE)


def secure_write_atomic(path: Path, content: str | bytes) -> None:
    """Atomically replace `path` with `content`, owner read/write only.

    Args:
        path: File to write. Its parent directory must exist.
        content: Text (encoded as UTF-8) or bytes.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")

    temp_path = path.with_suffix(path.suffix + ".tmp")
    if temp_path.exists():
        # Left behind by an interrupted save
        temp_path.unlink()

    try:
        fd = os.open(
            str(temp_path),
            os.O_CREAT | os.O_EXCL | os.O_WRONLY,
            SECURE_FILE_MODE,
        )
        try:
            os.write(fd, content)
            os.fsync(fd)
        finally:
            os.close(fd)

        os.replace(temp_path, path)
        os.chmod(path, SECURE_FILE_MODE)
    except Exception:
        if temp_path.exists():
            temp_path.unlink()
        raise
