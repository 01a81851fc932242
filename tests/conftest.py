# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_desk.core.state import AppState
from todo_desk.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's HOME.
    """
    data_dir = tmp_path / "Documents" / "todo-app"
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        file_logging=False,
        home_dir=tmp_path,
        data_dir=data_dir,
        tasks_file_path=data_dir / "todos.json",
        log_dir=data_dir,
        timezone="Asia/Jakarta",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(settings: SimpleNamespace, clock: FakeClock) -> TaskStore:
    return TaskStore(settings.tasks_file_path, tz=settings.timezone, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired with a real TaskStore on a tmp file.
    """
    return AppState(settings=settings, task_store=store)
