# tests/test_commands.py

from __future__ import annotations

from todo_desk.cli.commands import CommandRegistry, registry
from todo_desk.core.state import AppState


def test_command_registry_routes_2_and_3_params(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    notes: list[str] = []
    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/BEE y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_list_done_remove_flow(state: AppState) -> None:
    assert registry.handle(state, "/add Buy milk") == "Task added: Buy milk"
    assert registry.handle(state, "/add ! Pay rent") == "Priority task added: Pay rent"
    assert registry.handle(state, "/add! Call mom") == "Priority task added: Call mom"

    listing = registry.handle(state, "/list") or ""
    assert "1. [ ] Buy milk" in listing
    assert "2. [ ] ! Pay rent" in listing
    assert "3. [ ] ! Call mom" in listing

    assert registry.handle(state, "/done 2") == "Task #2 marked done."
    task = state.task_store.list()[1]
    assert task.done is True
    assert task.priority is False
    assert "updated" in (registry.handle(state, "/ls") or "")

    assert registry.handle(state, "/undo 2") == "Task #2 marked not done."
    assert state.task_store.list()[1].done is False

    assert registry.handle(state, "/rm 1") == "Task #1 removed."
    assert [t.text for t in state.task_store.list()] == ["Pay rent", "Call mom"]


def test_commands_report_bad_positions(state: AppState) -> None:
    registry.handle(state, "/add only")

    assert registry.handle(state, "/done") == "Usage: /done <number>"
    assert registry.handle(state, "/rm abc") == "Usage: /rm <number>"
    assert registry.handle(state, "/done 5") == "No task #5."
    assert registry.handle(state, "/rm 0") == "No task #0."
    assert registry.handle(state, "/add !") == "Usage: /add [!]<text>"
    assert len(state.task_store.list()) == 1


def test_status_and_reload(state: AppState) -> None:
    registry.handle(state, "/add a")
    status = registry.handle(state, "/status") or ""
    assert "todos.json" in status
    assert "Tasks: 1 (0 done)" in status
    assert "Last error: none" in status

    state.task_store.file_path.write_text("[]", "utf-8")
    notes: list[str] = []
    assert registry.handle(state, "/reload", emit=notes.append) == "Reloaded 0 tasks."
    assert notes


def test_help_lists_commands(state: AppState) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("add", "list", "done", "undo", "rm", "reload", "status"):
        assert f"/{name} " in text
