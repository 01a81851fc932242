# src/todo_desk/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- makes sure the persistence directory exists (falls back to cwd),
- wires the TaskStore into AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import DEFAULT_TIMEZONE, TaskStore

logger = logging.getLogger(__name__)


def resolve_tasks_file(settings) -> Path:
    """
    Return the snapshot file path, creating its directory if needed.

    If the directory cannot be created, the file goes to the current directory.
    """
    path = Path(settings.tasks_file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        logger.warning(
            "Cannot create %s, falling back to current directory.", path.parent, exc_info=True
        )
        return Path(".") / path.name
    return path


def resolve_timezone(name: str) -> ZoneInfo:
    """
    ZoneInfo for `name`, or the default zone when the name is unknown.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(
            "Unknown timezone %r, falling back to %s.", name, DEFAULT_TIMEZONE
        )
        return ZoneInfo(DEFAULT_TIMEZONE)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(
        resolve_tasks_file(settings),
        tz=resolve_timezone(getattr(settings, "timezone", DEFAULT_TIMEZONE)),
    )
    return AppState(settings=settings, task_store=store)
