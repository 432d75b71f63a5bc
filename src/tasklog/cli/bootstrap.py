# src/tasklog/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the concrete file store into AppState,
- loads the persisted task list (best-effort).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import BlobStore
from ..core.session import load_tasks
from ..core.state import AppState
from ..errors import StorageError
from ..tasks.task_list import TaskList
from ..tasks.task_store import FileStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, store: BlobStore | None = None) -> AppState:
    """
    Create AppState from the provided settings and load the saved tasks.

    Keeping settings/store injectable makes the app easier to test and avoids
    hidden global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    if store is None:
        store = FileStore(settings.data_dir)

    try:
        tasks = load_tasks(store, settings.data_file)
    except StorageError as e:
        logger.error("Failed to load tasks from %s; starting empty: %s", settings.data_file, e)
        logger.debug("Load failure details", exc_info=True)
        tasks = TaskList()

    return AppState(settings=settings, store=store, tasks=tasks)
