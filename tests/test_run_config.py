from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from numsort.config.run_config import RunConfig, load_run_config, log_level_from_env
from numsort.util.paths import numbers_path


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    config = RunConfig()
    assert config.out_dir == Path.cwd() / "output"
    assert config.file_name == "random_numbers.txt"
    assert (config.count, config.low, config.high, config.atomic) == (100, 1, 1000, False)
    assert numbers_path(config) == config.out_dir / "random_numbers.txt"


@pytest.mark.parametrize("name", ["", "a/b.txt", "..", "dir\\x.txt", "bad\x00name.txt"])
def test_rejects_non_bare_file_name(name):
    with pytest.raises(ValidationError):
        RunConfig(file_name=name)


def test_rejects_negative_count():
    with pytest.raises(ValidationError):
        RunConfig(count=-1)


def test_rejects_inverted_bounds():
    with pytest.raises(ValidationError):
        RunConfig(low=10, high=2)


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("NUMSORT_OUT_DIR", str(tmp_path / "env_out"))
    monkeypatch.setenv("NUMSORT_FILE_NAME", "nums.txt")
    monkeypatch.setenv("NUMSORT_COUNT", "12")
    monkeypatch.setenv("NUMSORT_LOW", "5")
    monkeypatch.setenv("NUMSORT_HIGH", "6")
    monkeypatch.setenv("NUMSORT_ATOMIC", "on")
    config = load_run_config()
    assert config.out_dir == tmp_path / "env_out"
    assert config.file_name == "nums.txt"
    assert (config.count, config.low, config.high, config.atomic) == (12, 5, 6, True)


def test_overrides_beat_environment_and_none_is_ignored(monkeypatch):
    monkeypatch.setenv("NUMSORT_COUNT", "12")
    assert load_run_config(count=3).count == 3
    assert load_run_config(count=None).count == 12


def test_env_file_is_loaded(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("NUMSORT_COUNT=7\nNUMSORT_LOG_LEVEL=WARN\n", encoding="utf-8")
    config = load_run_config(env_file)
    assert config.count == 7
    assert log_level_from_env() == "warn"


def test_bad_integer_in_environment(monkeypatch):
    monkeypatch.setenv("NUMSORT_COUNT", "many")
    with pytest.raises(ValueError, match="NUMSORT_COUNT"):
        load_run_config()


def test_bad_boolean_in_environment(monkeypatch):
    monkeypatch.setenv("NUMSORT_ATOMIC", "sometimes")
    with pytest.raises(ValueError, match="NUMSORT_ATOMIC"):
        load_run_config()


def test_out_dir_accepts_str():
    assert RunConfig(out_dir="some/where").out_dir == Path("some/where")


def test_rejects_nul_in_out_dir(tmp_path):
    with pytest.raises(ValidationError):
        RunConfig(out_dir=str(tmp_path) + "/bad\x00dir")
