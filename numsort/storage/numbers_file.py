"""
Brief: Write, read and sort numbers files (one decimal integer per line).

Details: Parsing follows formatted-stream extraction: whitespace-delimited
tokens are read until the first one that is not an integer, and anything after
it is ignored. Sorted output reopens the same path for writing (truncating);
atomic=True writes a temp file and os.replace()s it over the path instead.
"""
# SPDX-License-Identifier: MIT
from __future__ import annotations

import os
import re
import stat
import tempfile
from pathlib import Path
from typing import Iterable, List, TextIO

from numsort.storage.errors import NumbersFileError
from numsort.util.log import LogSink


_INT_PREFIX = re.compile(r"[+-]?[0-9]+")


def _write_lines(handle: TextIO, values: Iterable[int], logger: LogSink, label: str) -> None:
    for value in values:
        handle.write(f"{int(value)}\n")
        logger.info(f"{label}: {value}")


def _open_for_write(path: Path, logger: LogSink, failure: str) -> TextIO:
    try:
        return path.open("w", encoding="utf-8", newline="\n")
    except (OSError, ValueError) as exc:
        logger.error(f"{failure}: {path}")
        raise NumbersFileError(failure, path) from exc


def _write_through(handle: TextIO, path: Path, values: Iterable[int], logger: LogSink, label: str) -> None:
    try:
        with handle:
            _write_lines(handle, values, logger, label)
    except (OSError, ValueError) as exc:
        logger.error(f"Failed to write file: {path}")
        raise NumbersFileError("Failed to write file", path) from exc


def write_numbers(path: Path | str, values: Iterable[int], logger: LogSink) -> Path:
    """Create or truncate ``path`` and write ``values`` one per line, in order.

    Raises NumbersFileError if the file cannot be created or a write fails; a
    failed write leaves the file partially written.
    """
    p = Path(path)
    handle = _open_for_write(p, logger, "Failed to create file")
    _write_through(handle, p, values, logger, "Written number")
    logger.success(f"File created and filled with random numbers: {p}")
    return p


def parse_numbers(text: str) -> List[int]:
    """Values are unbounded ints; an out-of-range token does not stop parsing as C++ ``int`` extraction would."""
    numbers: List[int] = []
    for token in text.split():
        m = _INT_PREFIX.match(token)
        if not m:
            break
        numbers.append(int(m.group()))
        # "12abc" yields 12 and ends extraction
        if m.end() != len(token):
            break
    return numbers


def read_numbers(path: Path | str) -> List[int]:
    """Parse every leading integer in ``path``.

    Raises NumbersFileError when the file cannot be opened (including when it
    does not exist). An empty file yields an empty list.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8", errors="replace")
    except (OSError, ValueError) as exc:
        raise NumbersFileError("Failed to open file", p) from exc
    return parse_numbers(text)


def _replace_atomically(path: Path, numbers: List[int], logger: LogSink) -> None:
    try:
        fd, temp_name = tempfile.mkstemp(prefix=".tmp-", dir=str(path.parent))
    except (OSError, ValueError) as exc:
        logger.error(f"Failed to open file for writing: {path}")
        raise NumbersFileError("Failed to open file for writing", path) from exc
    try:
        _write_through(os.fdopen(fd, "w", encoding="utf-8", newline="\n"), path, numbers, logger, "Written sorted number")
        try:
            os.chmod(temp_name, stat.S_IMODE(path.stat().st_mode))
            os.replace(temp_name, path)
        except OSError as exc:
            logger.error(f"Failed to replace file: {path}")
            raise NumbersFileError("Failed to replace file", path) from exc
    finally:
        if os.path.exists(temp_name):
            os.unlink(temp_name)


def _rewrite_in_place(path: Path, numbers: List[int], logger: LogSink) -> None:
    handle = _open_for_write(path, logger, "Failed to open file for writing")
    _write_through(handle, path, numbers, logger, "Written sorted number")


def sort_numbers_file(path: Path | str, logger: LogSink, atomic: bool = False) -> List[int]:
    """Sort the integers in ``path`` ascending and write them back one per line.

    Read and write are two passes over the same path, so a crash in between can
    leave the file truncated; atomic=True replaces it via a temp file instead
    (which also swaps a symlink for a regular file). Returns the sorted values.
    Raises NumbersFileError if the file cannot be read or rewritten; a missing
    file is never created.
    """
    p = Path(path)
    try:
        numbers = read_numbers(p)
    except NumbersFileError:
        logger.error(f"Failed to open file: {p}")
        raise
    logger.info("Read numbers from file.")

    numbers = sorted(numbers)
    logger.info("Sorted the numbers.")

    if atomic:
        _replace_atomically(p, numbers, logger)
    else:
        _rewrite_in_place(p, numbers, logger)
    logger.success(f"Sorted numbers written back to file: {p}")
    return numbers
