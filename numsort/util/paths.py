"""
Brief: Working-directory path helpers (default out dir, numbers file path).

Details: Paths resolve against the current working directory, not the package
location, so runs from different folders keep separate output trees.
"""
# SPDX-License-Identifier: MIT
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from numsort.config.run_config import RunConfig


DEFAULT_OUT_DIR = "output"
DEFAULT_FILE_NAME = "random_numbers.txt"


def default_out_dir() -> Path:
    return Path.cwd() / DEFAULT_OUT_DIR


def numbers_path(config: "RunConfig") -> Path:
    return Path(config.out_dir) / config.file_name
