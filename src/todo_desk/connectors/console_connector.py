# src/todo_desk/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks import task_api

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def run_console_loop(
    state: AppState,
    *,
    read: InputFn = input,
    write: OutputFn = print,
) -> None:
    """
    Interactive front-end over the task store.

    Lines starting with "/" are commands; anything else is added as a new task.
    After each line, a pending persistence error (if any) is shown once.
    """
    logger.info("Console connector started.")
    write(f"[{_ts_local()}] Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    def emit(text: str) -> None:
        write(f"[{_ts_local()}] {text}")

    shown_error: str | None = None

    while True:
        try:
            user_input = read(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, user_input, emit=emit)
            if response is None:
                task_api.add_todo(state, user_input, False)
                response = f"Task added: {user_input}"
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        write(f"[{_ts_local()}] {response}")

        err = task_api.last_error_message(state)
        if err and err != shown_error:
            write(f"[{_ts_local()}] [WARN] {err}")
        shown_error = err

    logger.info("Console connector finished.")
