# src/tasklog/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..core.results import Err, Ok
from ..errors import InvalidIndexError
from .task_models import Task, mark_done, render

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered task collection.

    Insertion order is display order and persistence order. The user-facing
    index is 1-based (index = position + 1). Duplicates are allowed.

    Index-based operations return Ok/Err and never mutate on Err.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, position: int) -> Task:
        return self._tasks[position]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"

    def append(self, task: Task) -> Task:
        self._tasks.append(task)
        logger.debug("Task appended kind=%s size=%d", task.kind, len(self._tasks))
        return task

    def get(self, index: int) -> Ok[Task] | Err[InvalidIndexError]:
        if index < 1:
            return Err(InvalidIndexError(f"Task number must be 1 or more, got {index}.", index=index))
        if index > len(self._tasks):
            if not self._tasks:
                msg = f"Task number {index} does not exist, the list is empty."
            else:
                msg = f"Task number {index} does not exist (1-{len(self._tasks)})."
            return Err(InvalidIndexError(msg, index=index))
        return Ok(self._tasks[index - 1])

    def mark_done(self, index: int) -> Ok[Task] | Err[InvalidIndexError]:
        res = self.get(index)
        if isinstance(res, Err):
            return res
        return Ok(mark_done(res.value))

    def delete(self, index: int) -> Ok[Task] | Err[InvalidIndexError]:
        res = self.get(index)
        if isinstance(res, Err):
            return res
        removed = self._tasks.pop(index - 1)
        logger.debug("Task deleted index=%d size=%d", index, len(self._tasks))
        return Ok(removed)

    def render_lines(self) -> list[str]:
        return [f"{i}.{render(t)}" for i, t in enumerate(self._tasks, start=1)]
