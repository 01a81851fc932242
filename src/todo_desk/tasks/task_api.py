# src/todo_desk/tasks/task_api.py

from __future__ import annotations

import logging
from typing import Any

from ..core.state import AppState
from .task_models import Task

logger = logging.getLogger(__name__)


def add_todo(state: AppState, todo: str, ispriority: bool = False) -> None:
    try:
        state.task_store.add(todo, ispriority)
    except Exception:
        logger.exception("add_todo failed")


def get_todos(state: AppState) -> list[Task]:
    try:
        return state.task_store.list()
    except Exception:
        logger.exception("get_todos failed")
        return []


def get_todos_as_dicts(state: AppState) -> list[dict[str, Any]]:
    """Same as get_todos(), in the on-disk shape (what a UI layer consumes)."""
    return [t.to_dict() for t in get_todos(state)]


def update_todo(state: AppState, index: int, isdone: bool) -> None:
    try:
        state.task_store.update(index, isdone)
    except Exception:
        logger.exception("update_todo failed index=%s", index)


def remove_todo(state: AppState, index: int) -> None:
    try:
        state.task_store.remove(index)
    except Exception:
        logger.exception("remove_todo failed index=%s", index)


def last_error_message(state: AppState) -> str | None:
    """Human-readable persistence error from the last operation, if any."""
    err = getattr(state.task_store, "last_error", None)
    return str(err) if err is not None else None
