# src/tasklog/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from ..core.results import Err
from ..errors import FormatError, TaskError, ValidationError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task, new_deadline, new_event, new_todo, render
from .parser import AT_TOKEN, BY_TOKEN, parse_command, parse_index, split_payload

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "There are no tasks in your list."
NOT_FOUND_MESSAGE = "Error: Command not found."


class CommandName(StrEnum):
    LIST = "list"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    DONE = "done"
    DELETE = "delete"
    BYE = "bye"
    HELP = "help"


_NO_INPUT = " <no additional input required>"
_TASK_NUMBER = " <task number (see the list command, e.g. 1)>"

USAGES: dict[CommandName, str] = {
    CommandName.LIST: "list" + _NO_INPUT,
    CommandName.TODO: "todo <task description>",
    CommandName.DEADLINE: f"deadline <task description> {BY_TOKEN} <due date>",
    CommandName.EVENT: f"event <task description> {AT_TOKEN} <start date>",
    CommandName.DONE: "done" + _TASK_NUMBER,
    CommandName.DELETE: "delete" + _TASK_NUMBER,
    CommandName.BYE: "bye" + _NO_INPUT,
    CommandName.HELP: "help" + _NO_INPUT,
}


@dataclass(slots=True, frozen=True)
class Outcome:
    """
    Result of one dispatched command.

    - message: text for the output sink
    - mutated: the task list changed and must be persisted
    - exit: the interactive loop should stop
    - error: the user-input error, if the command was rejected
    """

    message: str
    mutated: bool = False
    exit: bool = False
    error: TaskError | None = None


CommandHandler = Callable[[TaskList, str], Outcome]


def usage_error(command: CommandName, error: TaskError) -> Outcome:
    return Outcome(
        message=f"Error: {error}\nUsage: {USAGES[command]}",
        error=error,
    )


def _added(tasks: TaskList, task: Task) -> Outcome:
    tasks.append(task)
    return Outcome(
        message=(
            "Got it. I've added this task:\n"
            f"  {render(task)}\n"
            f"Now you have {len(tasks)} task(s) in the list."
        ),
        mutated=True,
    )


class CommandRegistry:
    """Maps each CommandName to its handler and dispatches raw lines."""

    def __init__(self) -> None:
        self._handlers: dict[CommandName, CommandHandler] = {}

    def register(self, name: CommandName, handler: CommandHandler) -> None:
        self._handlers[name] = handler

    def names(self) -> list[CommandName]:
        return list(self._handlers)

    def dispatch(self, name: str, payload: str, tasks: TaskList) -> Outcome:
        try:
            command = CommandName(name)
        except ValueError:
            logger.debug("Unknown command %r", name)
            return Outcome(message=NOT_FOUND_MESSAGE)

        handler = self._handlers.get(command)
        if handler is None:
            return Outcome(message=NOT_FOUND_MESSAGE)

        outcome = handler(tasks, payload)
        if outcome.error is not None:
            logger.debug("Command %s rejected: %s", command, outcome.error)
        return outcome

    def handle(self, line: str, tasks: TaskList) -> Outcome:
        name, payload = parse_command(line)
        return self.dispatch(name, payload, tasks)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name in self._handlers:
            lines.append(f"  {USAGES[name]}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_list(tasks: TaskList, payload: str) -> Outcome:
    if not len(tasks):
        return Outcome(message=EMPTY_LIST_MESSAGE)
    return Outcome(message="\n".join(tasks.render_lines()))


def cmd_todo(tasks: TaskList, payload: str) -> Outcome:
    if not payload:
        return usage_error(CommandName.TODO, FormatError("The description of a todo cannot be empty."))
    try:
        task = new_todo(payload)
    except ValidationError as e:
        return usage_error(CommandName.TODO, e)
    return _added(tasks, task)


def _dated(
    command: CommandName,
    token: str,
    factory: Callable[[str, str], Task],
    tasks: TaskList,
    payload: str,
) -> Outcome:
    segments = split_payload(payload, token)
    if segments is None:
        return usage_error(
            command,
            FormatError(f"The {command} command needs a description and a date separated by {token}."),
        )
    try:
        task = factory(segments[0], segments[1])
    except ValidationError as e:
        return usage_error(command, e)
    return _added(tasks, task)


def cmd_deadline(tasks: TaskList, payload: str) -> Outcome:
    return _dated(CommandName.DEADLINE, BY_TOKEN, new_deadline, tasks, payload)


def cmd_event(tasks: TaskList, payload: str) -> Outcome:
    return _dated(CommandName.EVENT, AT_TOKEN, new_event, tasks, payload)


def cmd_done(tasks: TaskList, payload: str) -> Outcome:
    parsed = parse_index(payload)
    if isinstance(parsed, Err):
        return usage_error(CommandName.DONE, parsed.error)

    res = tasks.mark_done(parsed.value)
    if isinstance(res, Err):
        return usage_error(CommandName.DONE, res.error)

    return Outcome(
        message=f"Nice! I've marked this task as done:\n  {render(res.value)}",
        mutated=True,
    )


def cmd_delete(tasks: TaskList, payload: str) -> Outcome:
    parsed = parse_index(payload)
    if isinstance(parsed, Err):
        return usage_error(CommandName.DELETE, parsed.error)

    res = tasks.delete(parsed.value)
    if isinstance(res, Err):
        return usage_error(CommandName.DELETE, res.error)

    return Outcome(
        message=(
            "Noted. I've removed this task:\n"
            f"  {render(res.value)}\n"
            f"Now you have {len(tasks)} task(s) in the list."
        ),
        mutated=True,
    )


def cmd_bye(tasks: TaskList, payload: str) -> Outcome:
    return Outcome(message="Bye. Hope to see you again soon!", exit=True)


def cmd_help(tasks: TaskList, payload: str) -> Outcome:
    return Outcome(message=registry.build_help())


registry.register(CommandName.LIST, cmd_list)
registry.register(CommandName.TODO, cmd_todo)
registry.register(CommandName.DEADLINE, cmd_deadline)
registry.register(CommandName.EVENT, cmd_event)
registry.register(CommandName.DONE, cmd_done)
registry.register(CommandName.DELETE, cmd_delete)
registry.register(CommandName.BYE, cmd_bye)
registry.register(CommandName.HELP, cmd_help)
