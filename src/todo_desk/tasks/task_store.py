# src/todo_desk/tasks/task_store.py

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo

from .task_models import Task, format_timestamp

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Asia/Jakarta"

Clock = Callable[[], datetime]
ErrorCallback = Callable[["TaskStoreError"], None]


class TaskStoreError(Exception):
    """Base class for persistence failures reported by TaskStore."""


class TaskLoadError(TaskStoreError):
    """The snapshot file exists but could not be read or parsed."""


class TaskSaveError(TaskStoreError):
    """The snapshot file could not be written."""


def _utc_now() -> datetime:
    return datetime.now(UTC)


class TaskStore:
    """
    In-memory task list mirrored to a JSON snapshot file.

    - The file is read once, in __init__ (or explicitly via reload()).
    - Every mutation rewrites the whole file.
    - Tasks are addressed by zero-based position; remove() shifts later tasks down.

    Failures never propagate to callers. They are logged, kept in `last_error`
    and passed to `on_error` (if given). A successful save clears `last_error`.

    Thread-safety:
    - one lock guards the list
    - mutation and save take the lock separately
    """

    def __init__(
        self,
        file_path: str | Path = "todos.json",
        *,
        tz: tzinfo | str = DEFAULT_TIMEZONE,
        clock: Clock | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        self._file_path = Path(file_path)
        self._tz = ZoneInfo(tz) if isinstance(tz, str) else tz
        self._clock = clock or _utc_now
        self._on_error = on_error
        self._lock = threading.Lock()
        self._tasks: list[Task] = []
        self.last_error: TaskStoreError | None = None

        self.reload()
        logger.info("TaskStore ready file=%s total=%s", self._file_path, len(self))

    @property
    def file_path(self) -> Path:
        return self._file_path

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    # ---- low-level helpers ----

    def _now(self) -> str:
        return format_timestamp(self._clock(), self._tz)

    def _report(self, err: TaskStoreError) -> None:
        self.last_error = err
        if self._on_error is None:
            return
        try:
            self._on_error(err)
        except Exception:
            logger.exception("TaskStore on_error callback failed.")

    def _read_file(self) -> list[Task]:
        raw = self._file_path.read_text("utf-8")
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        return [Task.from_dict(item) for item in data]

    def reload(self) -> None:
        """
        Replace the in-memory list with the file contents.

        Missing file -> empty list.
        Unreadable or malformed file -> empty list + TaskLoadError reported.
        """
        tasks: list[Task] = []
        if self._file_path.exists():
            try:
                tasks = self._read_file()
            except (OSError, ValueError, RecursionError) as e:
                logger.warning("Failed to load tasks from %s: %s", self._file_path, e)
                self._report(TaskLoadError(f"cannot load {self._file_path}: {e}"))
                tasks = []
            else:
                logger.debug("Loaded %d tasks from %s", len(tasks), self._file_path)

        with self._lock:
            self._tasks = tasks

    def save(self) -> None:
        """Overwrite the snapshot file with the current list."""
        with self._lock:
            payload = json.dumps(
                [t.to_dict() for t in self._tasks], ensure_ascii=False, indent=2
            )
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text(payload, "utf-8")
            except OSError as e:
                logger.exception("Failed to save tasks to %s", self._file_path)
                err = TaskSaveError(f"cannot save {self._file_path}: {e}")
            else:
                err = None
                self.last_error = None

        if err is not None:
            self._report(err)

    # ---- public API ----

    def add(self, text: str, priority: bool) -> None:
        task = Task(
            text=text,
            done=False,
            priority=bool(priority),
            created_at=self._now(),
            updated_at="",
        )
        with self._lock:
            self._tasks.append(task)
            position = len(self._tasks) - 1
        logger.debug("Task added index=%s priority=%s", position, task.priority)
        self.save()

    def list(self) -> list[Task]:
        with self._lock:
            return [replace(t) for t in self._tasks]

    def update(self, index: int, done: bool) -> None:
        """
        Set the done flag of the task at `index`.

        Updating always clears the priority flag and stamps updated_at.
        Out-of-range index: nothing changes, but the file is still rewritten.
        """
        stamp = self._now()
        with self._lock:
            if 0 <= index < len(self._tasks):
                task = self._tasks[index]
                task.done = bool(done)
                task.priority = False
                task.updated_at = stamp
                logger.debug("Task updated index=%s done=%s", index, task.done)
            else:
                logger.debug("update ignored: index=%s out of range", index)
        self.save()

    def remove(self, index: int) -> None:
        with self._lock:
            if 0 <= index < len(self._tasks):
                del self._tasks[index]
                logger.debug("Task removed index=%s", index)
            else:
                logger.debug("remove ignored: index=%s out of range", index)
        self.save()
