# tests/test_task_list.py

from __future__ import annotations

import pytest

from tasklog.core.results import Err, Ok
from tasklog.errors import InvalidIndexError
from tasklog.tasks.task_list import TaskList
from tasklog.tasks.task_models import new_deadline, new_todo


@pytest.fixture()
def tasks() -> TaskList:
    return TaskList([new_todo("a"), new_todo("b"), new_deadline("c", "Friday")])


def test_mark_done_touches_only_the_target(tasks: TaskList) -> None:
    res = tasks.mark_done(2)
    assert isinstance(res, Ok)
    assert res.value is tasks[1]
    assert [t.is_done for t in tasks] == [False, True, False]


@pytest.mark.parametrize("index", [0, -1, 4, 100])
def test_out_of_range_index_is_err_without_mutation(tasks: TaskList, index: int) -> None:
    before = [(t.description, t.is_done) for t in tasks]

    for op in (tasks.mark_done, tasks.delete, tasks.get):
        res = op(index)
        assert isinstance(res, Err)
        assert isinstance(res.error, InvalidIndexError)
        assert res.error.index == index

    assert [(t.description, t.is_done) for t in tasks] == before


def test_delete_shifts_following_tasks_down(tasks: TaskList) -> None:
    res = tasks.delete(1)
    assert isinstance(res, Ok)
    assert res.value.description == "a"
    assert [t.description for t in tasks] == ["b", "c"]
    assert tasks.render_lines() == ["1.[T][ ] b", "2.[D][ ] c (by: Friday)"]


def test_duplicates_are_allowed() -> None:
    tasks = TaskList()
    tasks.append(new_todo("same"))
    tasks.append(new_todo("same"))
    assert len(tasks) == 2


def test_get_on_empty_list_mentions_empty() -> None:
    res = TaskList().get(1)
    assert isinstance(res, Err)
    assert "empty" in str(res.error)
