"""
Brief: Error taxonomy for directory and numbers-file operations.

Details: Components raise these at the point of failure, chained to the
underlying OSError; the pipeline is the only place they are caught.
"""
# SPDX-License-Identifier: MIT
from __future__ import annotations

from pathlib import Path


class NumsortError(Exception):
    """Base class for every error raised by numsort components."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.message = message
        self.path = Path(path) if path is not None else None
        super().__init__(message if path is None else f"{message}: {path}")


class StorageError(NumsortError):
    """A directory could not be created."""


class NumbersFileError(NumsortError, IOError):
    """A numbers file could not be opened, read or written."""
