# src/todo_desk/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the front-end side.

Commands and connectors depend on this Protocol instead of TaskStore itself,
so a fake repo can stand in for tests.
"""

from typing import Any, Protocol


class TaskRepo(Protocol):
    """Position-addressed task list (see tasks/task_store.py)."""

    last_error: Any | None

    def add(self, text: str, priority: bool) -> None: ...
    def list(self) -> list[Any]: ...
    def update(self, index: int, done: bool) -> None: ...
    def remove(self, index: int) -> None: ...
    def reload(self) -> None: ...
