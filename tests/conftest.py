from __future__ import annotations

import random
from pathlib import Path
from typing import List, Tuple

import pytest

from numsort.generator.random_sequence import generate
from numsort.storage.directory import ensure_directory
from numsort.storage.numbers_file import write_numbers


ENV_KEYS = (
    "NUMSORT_OUT_DIR",
    "NUMSORT_FILE_NAME",
    "NUMSORT_COUNT",
    "NUMSORT_LOW",
    "NUMSORT_HIGH",
    "NUMSORT_ATOMIC",
    "NUMSORT_LOG_LEVEL",
)


class RecordingLogger:
    def __init__(self) -> None:
        self.records: List[Tuple[str, str]] = []

    def debug(self, msg: str) -> None:
        self.records.append(("debug", msg))

    def info(self, msg: str) -> None:
        self.records.append(("info", msg))

    def success(self, msg: str) -> None:
        self.records.append(("success", msg))

    def warn(self, msg: str) -> None:
        self.records.append(("warn", msg))

    def error(self, msg: str) -> None:
        self.records.append(("error", msg))

    def messages(self, level: str) -> List[str]:
        return [m for lvl, m in self.records if lvl == level]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so anything load_dotenv adds during a test is undone on teardown
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def work_dir(tmp_path: Path, logger: RecordingLogger) -> Path:
    return ensure_directory(tmp_path / "output", logger)


@pytest.fixture
def numbers_file(work_dir: Path, logger: RecordingLogger) -> Path:
    return write_numbers(work_dir / "test_numbers.txt", generate(100), logger)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


def read_lines(path: Path) -> List[str]:
    return path.read_text(encoding="utf-8").splitlines()


def read_ints(path: Path) -> List[int]:
    return [int(tok) for tok in path.read_text(encoding="utf-8").split()]
