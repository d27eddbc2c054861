"""
Brief: Colored, leveled console logger passed explicitly to every component.

Details: One Logger is created at startup by create_logger() and handed down
by reference; nothing in the package looks a logger up globally.
"""
# SPDX-License-Identifier: MIT
from __future__ import annotations

import sys
from datetime import datetime
from typing import Protocol, TextIO

from colorama import Fore, Style, just_fix_windows_console


LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


class LogSink(Protocol):
    def debug(self, msg: str) -> None: ...

    def info(self, msg: str) -> None: ...

    def success(self, msg: str) -> None: ...

    def warn(self, msg: str) -> None: ...

    def error(self, msg: str) -> None: ...


def _ts() -> str:
    return datetime.now().strftime("%H:%M:%S")


def parse_level(name: str | None, default: str = "info") -> int:
    key = (name or default).strip().lower()
    if key == "warning":
        key = "warn"
    if key not in LEVELS:
        raise ValueError(f"Unknown log level: {name!r} (expected one of {', '.join(LEVELS)})")
    return LEVELS[key]


class Logger:
    def __init__(self, level: str = "info", out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.level = parse_level(level)
        self._out = out
        self._err = err

    def _emit(self, threshold: int, color: str, tag: str, msg: str, stream: TextIO) -> None:
        if threshold < self.level:
            return
        print(f"{color}[{_ts()}] {tag}{Style.RESET_ALL} {msg}", file=stream)

    # Resolve streams lazily so pytest's capsys swap is honoured.
    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def debug(self, msg: str) -> None:
        self._emit(LEVELS["debug"], Fore.WHITE, "DBG ", msg, self.out)

    def info(self, msg: str) -> None:
        self._emit(LEVELS["info"], Fore.CYAN, "INFO", msg, self.out)

    def success(self, msg: str) -> None:
        self._emit(LEVELS["info"], Fore.GREEN, "OK  ", msg, self.out)

    def warn(self, msg: str) -> None:
        self._emit(LEVELS["warn"], Fore.YELLOW, "WARN", msg, self.out)

    def error(self, msg: str) -> None:
        self._emit(LEVELS["error"], Fore.RED, "ERR ", msg, self.err)


def create_logger(level: str = "info") -> Logger:
    just_fix_windows_console()
    return Logger(level=level)
