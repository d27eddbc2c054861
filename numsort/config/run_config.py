from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from numsort.generator.random_sequence import DEFAULT_HIGH, DEFAULT_LOW
from numsort.util.env import get_env_bool, get_env_int, get_env_str, load_env
from numsort.util.paths import DEFAULT_FILE_NAME, default_out_dir


class RunConfig(BaseModel):
    out_dir: Path = Field(default_factory=default_out_dir)
    file_name: str = Field(DEFAULT_FILE_NAME)
    count: int = Field(100, ge=0)
    low: int = Field(DEFAULT_LOW)
    high: int = Field(DEFAULT_HIGH)
    atomic: bool = False

    @field_validator("file_name")
    @classmethod
    def bare_file_name(cls, v: str) -> str:
        v = v.strip()
        if not v or v in (".", "..") or Path(v).name != v or "/" in v or "\\" in v or "\x00" in v:
            raise ValueError(f"file_name must be a bare file name, got {v!r}")
        return v

    @field_validator("out_dir")
    @classmethod
    def no_nul_in_dir(cls, v: Path) -> Path:
        if "\x00" in str(v):
            raise ValueError("out_dir must not contain NUL characters")
        return v

    @model_validator(mode="after")
    def check_bounds(self) -> "RunConfig":
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must not exceed high ({self.high})")
        return self


_ENV_FIELDS = {
    "out_dir": ("NUMSORT_OUT_DIR", get_env_str),
    "file_name": ("NUMSORT_FILE_NAME", get_env_str),
    "count": ("NUMSORT_COUNT", get_env_int),
    "low": ("NUMSORT_LOW", get_env_int),
    "high": ("NUMSORT_HIGH", get_env_int),
    "atomic": ("NUMSORT_ATOMIC", get_env_bool),
}


def load_run_config(env_file: Optional[str | Path] = None, **overrides: Any) -> RunConfig:
    """Build a RunConfig from .env / NUMSORT_* variables, then apply overrides.

    Overrides whose value is None are ignored so unset CLI flags fall through
    to the environment.
    """
    load_env(env_file)
    values: dict[str, Any] = {}
    for field, (key, reader) in _ENV_FIELDS.items():
        val = reader(key)
        if val is not None and val != "":
            values[field] = val
    values.update({k: v for k, v in overrides.items() if v is not None})
    return RunConfig(**values)


def log_level_from_env(default: str = "info") -> str:
    return (get_env_str("NUMSORT_LOG_LEVEL", default) or default).strip().lower()
