# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_desk.config import Settings, default_data_dir

_ENV = (
    "TODO_HOME",
    "TODO_DATA_DIR",
    "TODO_TASKS_FILE",
    "TODO_LOG_DIR",
    "TODO_TIMEZONE",
    "TODO_FILE_LOGGING",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults_follow_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    s = Settings.from_env()

    assert s.home_dir == tmp_path
    assert s.data_dir == tmp_path / "Documents" / "todo-app"
    assert s.tasks_file_path == tmp_path / "Documents" / "todo-app" / "todos.json"
    assert s.log_dir == s.data_dir
    assert s.timezone == "Asia/Jakarta"
    assert s.file_logging is True


def test_missing_home_falls_back_to_cwd(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HOME", raising=False)

    s = Settings.from_env()

    assert s.home_dir is None
    assert s.data_dir == Path(".")
    assert s.tasks_file_path == Path("todos.json")


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_HOME", str(tmp_path / "other"))
    monkeypatch.setenv("TODO_TASKS_FILE", str(tmp_path / "custom.json"))
    monkeypatch.setenv("TODO_TIMEZONE", "UTC")
    monkeypatch.setenv("TODO_FILE_LOGGING", "off")

    s = Settings.from_env()

    assert s.data_dir == tmp_path / "other" / "Documents" / "todo-app"
    assert s.tasks_file_path == tmp_path / "custom.json"
    assert s.timezone == "UTC"
    assert s.file_logging is False


def test_default_data_dir_blank_home() -> None:
    assert default_data_dir("  ") == Path(".")
    assert default_data_dir(None) == Path(".")
