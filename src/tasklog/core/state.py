# src/tasklog/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_list import TaskList
from .ports import BlobStore


@dataclass(slots=True)
class AppState:
    """
    Runtime state shared by the console connector and the session.

    The task list is owned here and handed to the command engine for the
    duration of one command.
    """

    # Settings (or a SimpleNamespace in tests) exposing at least `data_file`.
    settings: Any
    store: BlobStore
    tasks: TaskList = field(default_factory=TaskList)
