# tests/test_commands.py

from __future__ import annotations

import pytest

from tasklog.cli.commands import (
    EMPTY_LIST_MESSAGE,
    NOT_FOUND_MESSAGE,
    USAGES,
    CommandName,
    CommandRegistry,
    Outcome,
    registry,
)
from tasklog.errors import FormatError, InvalidIndexError
from tasklog.tasks.task_list import TaskList
from tasklog.tasks.task_models import render


def run(tasks: TaskList, *lines: str) -> list[Outcome]:
    return [registry.handle(line, tasks) for line in lines]


def test_add_then_list_renders_numbered_lines() -> None:
    tasks = TaskList()
    *_, listed = run(tasks, "todo read book", "deadline return book /by Sunday", "list")

    assert listed.mutated is False
    assert listed.message.splitlines() == [
        "1.[T][ ] read book",
        "2.[D][ ] return book (by: Sunday)",
    ]


def test_todo_appends_undone_task() -> None:
    tasks = TaskList()
    (out,) = run(tasks, "todo   buy milk ")

    assert out.mutated is True
    assert out.error is None
    assert len(tasks) == 1
    assert render(tasks[0]).startswith("[T][ ]")
    assert "Now you have 1 task(s)" in out.message


@pytest.mark.parametrize("line", ["todo", "todo    "])
def test_todo_without_description_is_format_error(line: str) -> None:
    tasks = TaskList()
    (out,) = run(tasks, line)

    assert out.mutated is False
    assert isinstance(out.error, FormatError)
    assert f"Usage: {USAGES[CommandName.TODO]}" in out.message
    assert len(tasks) == 0


@pytest.mark.parametrize(
    "line",
    [
        "deadline missing format",
        "deadline",
        "deadline /by Sunday",
        "deadline return book /by",
        "deadline return book /at Sunday",
    ],
)
def test_deadline_format_errors(line: str) -> None:
    tasks = TaskList()
    (out,) = run(tasks, line)

    assert isinstance(out.error, FormatError)
    assert out.mutated is False
    assert "/by <due date>" in out.message
    assert len(tasks) == 0


def test_event_uses_at_token() -> None:
    tasks = TaskList()
    ok, bad = run(tasks, "event project meeting /at Mon 2pm", "event project meeting /by Mon")

    assert ok.mutated is True
    assert render(tasks[0]) == "[E][ ] project meeting (at: Mon 2pm)"
    assert isinstance(bad.error, FormatError)
    assert USAGES[CommandName.EVENT] in bad.message
    assert len(tasks) == 1


def test_done_marks_only_the_target() -> None:
    tasks = TaskList()
    run(tasks, "todo a", "todo b", "todo c")
    (out,) = run(tasks, "done 2")

    assert out.mutated is True
    assert [t.is_done for t in tasks] == [False, True, False]
    assert "[T][X] b" in out.message


def test_done_twice_is_not_an_error() -> None:
    tasks = TaskList()
    run(tasks, "todo a")
    first, second = run(tasks, "done 1", "done 1")

    assert first.error is None
    assert second.error is None
    assert tasks[0].is_done is True


@pytest.mark.parametrize("line", ["done 0", "done -1", "done abc", "done", "done 5"])
def test_done_invalid_index_leaves_list_unchanged(line: str) -> None:
    tasks = TaskList()
    run(tasks, "todo a", "todo b")
    (out,) = run(tasks, line)

    assert isinstance(out.error, InvalidIndexError)
    assert out.mutated is False
    assert f"Usage: {USAGES[CommandName.DONE]}" in out.message
    assert [t.is_done for t in tasks] == [False, False]


@pytest.mark.parametrize("line", ["delete 0", "delete x", "delete", "delete 3"])
def test_delete_invalid_index_leaves_list_unchanged(line: str) -> None:
    tasks = TaskList()
    run(tasks, "todo a", "todo b")
    (out,) = run(tasks, line)

    assert isinstance(out.error, InvalidIndexError)
    assert out.mutated is False
    assert len(tasks) == 2


def test_delete_shifts_and_empty_list_message() -> None:
    tasks = TaskList()
    run(tasks, "todo a", "todo b", "todo c")

    (out,) = run(tasks, "delete 2")
    assert out.mutated is True
    assert [t.description for t in tasks] == ["a", "c"]
    assert "Now you have 2 task(s)" in out.message

    *_, listed = run(tasks, "delete 1", "delete 1", "list")
    assert len(tasks) == 0
    assert listed.message == EMPTY_LIST_MESSAGE
    assert listed.error is None


def test_bye_exits_without_mutation() -> None:
    (out,) = run(TaskList(), "bye")
    assert out.exit is True
    assert out.mutated is False
    assert out.error is None


@pytest.mark.parametrize("line", ["blah", "", "lists", "/list"])
def test_unknown_command(line: str) -> None:
    tasks = TaskList()
    (out,) = run(tasks, line)
    assert out.message == NOT_FOUND_MESSAGE
    assert out.mutated is False


@pytest.mark.parametrize("line", ["TODO shout", "LIST", "Done 1", "BYE"])
def test_command_names_are_case_sensitive(line: str) -> None:
    tasks = TaskList()
    run(tasks, "todo a")
    (out,) = run(tasks, line)

    assert out.message == NOT_FOUND_MESSAGE
    assert out.mutated is False
    assert out.exit is False
    assert len(tasks) == 1
    assert tasks[0].is_done is False


def test_done_rejects_non_ascii_and_underscored_numbers() -> None:
    tasks = TaskList()
    for i in range(10):
        run(tasks, f"todo t{i}")

    for line in ("done 1_0", "done \u0661\u0660"):
        (out,) = run(tasks, line)
        assert isinstance(out.error, InvalidIndexError)

    assert not any(t.is_done for t in tasks)


def test_help_lists_every_command() -> None:
    (out,) = run(TaskList(), "help")
    for name in CommandName:
        assert USAGES[name] in out.message


def test_registry_without_handler_reports_not_found() -> None:
    reg = CommandRegistry()
    reg.register(CommandName.BYE, lambda tasks, payload: Outcome(message="bye", exit=True))

    assert reg.handle("bye", TaskList()).exit is True
    assert reg.handle("list", TaskList()).message == NOT_FOUND_MESSAGE
    assert reg.names() == [CommandName.BYE]
