from __future__ import annotations

from pathlib import Path

from numsort.storage.errors import StorageError
from numsort.util.log import LogSink


def ensure_directory(path: Path | str, logger: LogSink) -> Path:
    """Create ``path`` (one level, no parents) unless it is already a directory.

    Raises StorageError when the filesystem rejects the mkdir.
    """
    p = Path(path)
    try:
        if p.is_dir():
            logger.info(f"Directory already exists: {p}")
            return p
        p.mkdir()
    except (OSError, ValueError) as exc:
        logger.error(f"Failed to create directory: {p} ({exc})")
        raise StorageError("Failed to create directory", p) from exc
    logger.info(f"Directory created: {p}")
    return p
