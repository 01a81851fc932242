# src/todo_desk/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so commands can show them (/status).
    settings: object

    # The one store for this process; injected by cli/bootstrap.py.
    task_store: TaskRepo
