# src/tasklog/tasks/task_codec.py

"""
Flat-file codec for the task list.

One task per line, pipe-delimited:

    T | 0 | read book
    D | 1 | return book | Sunday
    E | 0 | project meeting | Mon 2pm

Pipes inside descriptions/dates are not escaped, so such values do not
survive a round-trip.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..errors import ParseError, ValidationError
from .task_list import TaskList
from .task_models import Task, TaskKind, new_deadline, new_event, new_todo

logger = logging.getLogger(__name__)

FIELD_SEP = " | "

_DONE_FLAGS: dict[str, bool] = {"0": False, "1": True}

# tag -> (field count, factory(description, extra fields, is_done))
_DECODERS: dict[str, tuple[int, Callable[[str, list[str], bool], Task]]] = {
    TaskKind.TODO.value: (3, lambda d, _extra, done: new_todo(d, is_done=done)),
    TaskKind.DEADLINE.value: (4, lambda d, extra, done: new_deadline(d, extra[0], is_done=done)),
    TaskKind.EVENT.value: (4, lambda d, extra, done: new_event(d, extra[0], is_done=done)),
}


def encode_task(task: Task) -> str:
    flag = "1" if task.is_done else "0"
    return FIELD_SEP.join([task.kind.value, flag, task.description, *task.extra_fields()])


def decode_task(line: str) -> Task:
    parts = [p.strip() for p in line.split("|")]
    tag = parts[0]

    spec = _DECODERS.get(tag)
    if spec is None:
        raise ParseError(f"Unknown task type tag: {tag!r}")

    expected, factory = spec
    if len(parts) != expected:
        raise ParseError(f"Expected {expected} fields for type {tag}, got {len(parts)}")

    flag = parts[1]
    if flag not in _DONE_FLAGS:
        raise ParseError(f"Done flag must be 0 or 1, got {flag!r}")

    try:
        return factory(parts[2], parts[3:], _DONE_FLAGS[flag])
    except ValidationError as e:
        raise ParseError(str(e)) from e


def serialize_tasks(tasks: Iterable[Task]) -> str:
    return "".join(encode_task(t) + "\n" for t in tasks)


def deserialize_tasks(text: str) -> TaskList:
    """
    Decode a whole persisted file.

    Blank lines are ignored; malformed lines are skipped with a warning and
    loading continues with the rest.
    """
    tasks = TaskList()
    skipped = 0
    # Records end at "\n" only; descriptions may contain U+2028, \x0c, \x85, ...
    for lineno, raw in enumerate(text.split("\n"), start=1):
        line = raw.removesuffix("\r")
        if not line.strip():
            continue
        try:
            tasks.append(decode_task(line))
        except ParseError as e:
            skipped += 1
            logger.warning("Skipping malformed task line %d: %s", lineno, e)

    logger.debug("Deserialized tasks: loaded=%d skipped=%d", len(tasks), skipped)
    return tasks
