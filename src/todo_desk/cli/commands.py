# src/todo_desk/cli/commands.py

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks import task_api

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task_line(position: int, task) -> str:
    """One task as shown in the console; `position` is 1-based."""
    mark = "x" if task.done else " "
    flag = " !" if task.priority else ""
    line = f"{position:>3}. [{mark}]{flag} {task.text}  (created {task.created_at}"
    if task.updated_at:
        line += f", updated {task.updated_at}"
    return line + ")"


def _parse_position(args: list[str]) -> int | None:
    """
    1-based console position -> 0-based store index.

    Returns None when the argument is missing or not a number. Range is not
    checked here: the store ignores out-of-range indices.
    """
    if not args:
        return None
    try:
        position = int(args[0])
    except ValueError:
        return None
    return position - 1


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    store_path = getattr(state.task_store, "file_path", None)
    tasks = task_api.get_todos(state)
    done = sum(1 for t in tasks if t.done)
    err = task_api.last_error_message(state)
    return (
        "Status:\n"
        f"  File: {store_path}\n"
        f"  Timezone: {getattr(settings, 'timezone', '?')}\n"
        f"  Tasks: {len(tasks)} ({done} done)\n"
        f"  Last error: {err or 'none'}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = task_api.get_todos(state)
    if not tasks:
        return "No tasks yet. Add one with /add <text>."
    lines = ["Tasks:"]
    for i, task in enumerate(tasks, start=1):
        lines.append(format_task_line(i, task))
    return "\n".join(lines)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add text      -> normal task
    /add ! text    -> priority task
    /add !text     -> priority task
    """
    text = " ".join(args).strip()
    priority = False
    if text.startswith("!"):
        priority = True
        text = text[1:].strip()
    if not text:
        return "Usage: /add [!]<text>"

    task_api.add_todo(state, text, priority)
    label = "Priority task" if priority else "Task"
    return f"{label} added: {text}"


def cmd_add_priority(state: AppState, args: list[str]) -> str:
    return cmd_add(state, ["!", *args])


def _set_done(state: AppState, args: list[str], done: bool, usage: str) -> str:
    index = _parse_position(args)
    if index is None:
        return usage
    before = len(task_api.get_todos(state))
    task_api.update_todo(state, index, done)
    if not 0 <= index < before:
        return f"No task #{index + 1}."
    return f"Task #{index + 1} marked {'done' if done else 'not done'}."


def cmd_done(state: AppState, args: list[str]) -> str:
    return _set_done(state, args, True, "Usage: /done <number>")


def cmd_undo(state: AppState, args: list[str]) -> str:
    return _set_done(state, args, False, "Usage: /undo <number>")


def cmd_remove(state: AppState, args: list[str]) -> str:
    index = _parse_position(args)
    if index is None:
        return "Usage: /rm <number>"
    before = len(task_api.get_todos(state))
    task_api.remove_todo(state, index)
    if not 0 <= index < before:
        return f"No task #{index + 1}."
    return f"Task #{index + 1} removed."


def cmd_reload(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if emit:
        emit("Reloading tasks from disk...")
    state.task_store.reload()
    return f"Reloaded {len(task_api.get_todos(state))} tasks."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show file location, counts and last error.")
registry.register("list", cmd_list, help_text="List tasks.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add [!]<text> (! = priority).")
registry.register("add!", cmd_add_priority, help_text="Add a priority task: /add! <text>.")
registry.register("done", cmd_done, help_text="Mark task done: /done <number>.")
registry.register("undo", cmd_undo, help_text="Mark task not done: /undo <number>.")
registry.register("rm", cmd_remove, help_text="Remove a task: /rm <number>.", aliases=["del"])
registry.register("reload", cmd_reload, help_text="Re-read the task file from disk.")
