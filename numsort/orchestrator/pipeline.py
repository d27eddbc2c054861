"""
Brief: Run the ensure-directory, write-random-file, sort-file pipeline.

Details: The single recovery boundary. Any exception raised by a step is
logged and returned inside a PipelineResult naming the failed step; nothing
escapes to the caller.
"""
# SPDX-License-Identifier: MIT
from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from numsort.config.run_config import RunConfig
from numsort.generator.random_sequence import generate
from numsort.storage.directory import ensure_directory
from numsort.storage.numbers_file import sort_numbers_file, write_numbers
from numsort.util.log import LogSink
from numsort.util.paths import numbers_path


@dataclass
class PipelineResult:
    path: Path
    count: int = 0
    failed_step: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def run_pipeline(config: RunConfig, logger: LogSink, rng: Optional[random.Random] = None) -> PipelineResult:
    path = numbers_path(config)
    result = PipelineResult(path=path)
    step = "ensure"
    try:
        ensure_directory(config.out_dir, logger)
        step = "write"
        values = generate(config.count, config.low, config.high, rng=rng)
        write_numbers(path, values, logger)
        result.count = len(values)
        step = "sort"
        sort_numbers_file(path, logger, atomic=config.atomic)
    except Exception as exc:  # noqa: BLE001
        logger.error(f"Exception caught: {exc}")
        result.failed_step = step
        result.error = exc
        return result
    logger.success(f"Pipeline finished: {result.count} numbers sorted in {path}")
    return result
