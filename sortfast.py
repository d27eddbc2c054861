#!/usr/bin/env python
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from numsort.config.run_config import load_run_config, log_level_from_env
from numsort.generator.random_sequence import generate
from numsort.orchestrator.pipeline import run_pipeline
from numsort.storage.errors import NumsortError
from numsort.storage.numbers_file import sort_numbers_file, write_numbers
from numsort.util.env import load_env
from numsort.util.log import Logger, create_logger


def _common_options(default: object) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(add_help=False)
    p.add_argument("--env-file", default=default, help="Path to a .env file (default: ./.env if present)")
    p.add_argument("--log-level", default=default, choices=["debug", "info", "warn", "error"], help="Console log level")
    return p


def _build_parser() -> argparse.ArgumentParser:
    # Sub-commands must not reset options given before the command name.
    common = _common_options(argparse.SUPPRESS)

    ap = argparse.ArgumentParser(
        prog="sortfast",
        description="Create a directory, fill a file with random integers, and sort it in place",
        parents=[_common_options(None)],
    )
    sub = ap.add_subparsers(dest="command")

    run_p = sub.add_parser("run", parents=[common], help="Run the full pipeline (default)")
    run_p.add_argument("--dir", dest="out_dir", help="Output directory (default: ./output)")
    run_p.add_argument("--file", dest="file_name", help="Numbers file name inside the output directory")
    run_p.add_argument("--count", type=int, help="How many random integers to write (default 100)")
    run_p.add_argument("--atomic", action="store_true", help="Replace the file via a temp file instead of rewriting it in place")

    write_p = sub.add_parser("write", parents=[common], help="Write a fresh random numbers file")
    write_p.add_argument("path", type=Path)
    write_p.add_argument("--count", type=int, help="How many random integers to write (default 100)")

    sort_p = sub.add_parser("sort", parents=[common], help="Sort an existing numbers file in place")
    sort_p.add_argument("path", type=Path)
    sort_p.add_argument("--atomic", action="store_true", help="Replace the file via a temp file instead of rewriting it in place")
    return ap


def _cmd_run(args: argparse.Namespace, logger: Logger) -> int:
    config = load_run_config(
        args.env_file,
        out_dir=getattr(args, "out_dir", None),
        file_name=getattr(args, "file_name", None),
        count=getattr(args, "count", None),
        atomic=True if getattr(args, "atomic", False) else None,
    )
    return run_pipeline(config, logger).exit_code


def _cmd_write(args: argparse.Namespace, logger: Logger) -> int:
    config = load_run_config(args.env_file, count=args.count)
    write_numbers(args.path, generate(config.count, config.low, config.high), logger)
    return 0


def _cmd_sort(args: argparse.Namespace, logger: Logger) -> int:
    config = load_run_config(args.env_file, atomic=True if args.atomic else None)
    sort_numbers_file(args.path, logger, atomic=config.atomic)
    return 0


_COMMANDS = {"run": _cmd_run, "write": _cmd_write, "sort": _cmd_sort}


def main(argv: list[str]) -> int:
    args = _build_parser().parse_args(argv)
    load_env(args.env_file)
    try:
        logger = create_logger(args.log_level or log_level_from_env())
    except ValueError as ex:
        print(f"Invalid configuration: {ex}", file=sys.stderr)
        return 2
    handler = _COMMANDS[args.command or "run"]
    try:
        return handler(args, logger)
    except ValueError as ex:
        logger.error(f"Invalid configuration: {ex}")
        return 2
    except NumsortError as ex:
        logger.error(str(ex))
        return 1


def _entrypoint() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    _entrypoint()
