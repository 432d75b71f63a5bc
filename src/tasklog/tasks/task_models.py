# src/tasklog/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from ..errors import ValidationError


class TaskKind(StrEnum):
    """
    One-letter type tag.

    The tag is shown in the first bracket of the rendered form and is the
    first field of a persisted line.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class Task:
    description: str
    is_done: bool = False

    kind: ClassVar[TaskKind]

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def suffix(self) -> str:
        return ""

    def extra_fields(self) -> tuple[str, ...]:
        """Variant-specific fields, in persisted order."""
        return ()


@dataclass(slots=True)
class ToDo(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(Task):
    by: str = ""

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    def suffix(self) -> str:
        return f" (by: {self.by})"

    def extra_fields(self) -> tuple[str, ...]:
        return (self.by,)


@dataclass(slots=True)
class Event(Task):
    at: str = ""

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    def suffix(self) -> str:
        return f" (at: {self.at})"

    def extra_fields(self) -> tuple[str, ...]:
        return (self.at,)


def _required(value: str | None, field: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ValidationError(field)
    return text


def new_todo(description: str, *, is_done: bool = False) -> ToDo:
    return ToDo(description=_required(description, "description"), is_done=is_done)


def new_deadline(description: str, by: str, *, is_done: bool = False) -> Deadline:
    return Deadline(
        description=_required(description, "description"),
        is_done=is_done,
        by=_required(by, "by"),
    )


def new_event(description: str, at: str, *, is_done: bool = False) -> Event:
    return Event(
        description=_required(description, "description"),
        is_done=is_done,
        at=_required(at, "at"),
    )


def mark_done(task: Task) -> Task:
    """Set the completion flag. Marking a done task again is a no-op."""
    task.is_done = True
    return task


def render(task: Task) -> str:
    """Human-readable form, e.g. ``[D][X] return book (by: Sunday)``."""
    return f"[{task.kind}][{task.status_icon}] {task.description}{task.suffix()}"
