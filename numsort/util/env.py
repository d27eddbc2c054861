from __future__ import annotations

import os
from pathlib import Path
from dotenv import load_dotenv


_TRUTHY = ("1", "true", "on", "yes")
_FALSY = ("0", "false", "off", "no")


def load_env(dotenv_path: str | Path | None = None) -> None:
    load_dotenv(dotenv_path if dotenv_path else None, override=False)


def get_env_str(key: str, default: str | None = None) -> str | None:
    return os.environ.get(key, default)


def get_env_int(key: str) -> int | None:
    val = (get_env_str(key, "") or "").strip()
    if not val:
        return None
    try:
        return int(val)
    except ValueError:
        raise ValueError(f"Environment variable {key} must be an integer, got {val!r}") from None


def get_env_bool(key: str) -> bool | None:
    val = (get_env_str(key, "") or "").strip().lower()
    if not val:
        return None
    if val in _TRUTHY:
        return True
    if val in _FALSY:
        return False
    raise ValueError(f"Environment variable {key} must be a boolean, got {val!r}")
