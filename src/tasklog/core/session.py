# src/tasklog/core/session.py

"""
One command, end to end.

Dispatch against the owned task list, then rewrite the persisted file in
full if the list changed. A failed save is reported but never rolls back
the in-memory change that triggered it.
"""

from __future__ import annotations

import dataclasses
import logging

from ..cli.commands import CommandRegistry, Outcome
from ..cli.commands import registry as default_registry
from ..errors import StorageError
from ..tasks.task_codec import deserialize_tasks, serialize_tasks
from ..tasks.task_list import TaskList
from .ports import BlobStore
from .state import AppState

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = "Error: An error has occurred when writing to file."


def load_tasks(store: BlobStore, name: str) -> TaskList:
    """Load the persisted list; a missing file is an empty list."""
    data = store.load(name)
    if data is None:
        return TaskList()
    tasks = deserialize_tasks(data.decode("utf-8", errors="replace"))
    logger.info("Loaded %d task(s) from %s", len(tasks), name)
    return tasks


def save_tasks(state: AppState) -> None:
    """Overwrite the persisted file with the current list. Raises StorageError."""
    data = serialize_tasks(state.tasks).encode("utf-8")
    state.store.save(state.settings.data_file, data)
    logger.debug("Saved %d task(s) to %s", len(state.tasks), state.settings.data_file)


def process_line(
    state: AppState,
    line: str,
    *,
    registry: CommandRegistry | None = None,
) -> Outcome:
    reg = registry or default_registry
    outcome = reg.handle(line, state.tasks)
    logger.debug(
        "Processed line=%r mutated=%s exit=%s error=%s",
        line,
        outcome.mutated,
        outcome.exit,
        type(outcome.error).__name__ if outcome.error else None,
    )

    if not outcome.mutated:
        return outcome

    try:
        save_tasks(state)
    except StorageError as e:
        logger.error("Failed to persist tasks to %s: %s", state.settings.data_file, e)
        logger.debug("Save failure details", exc_info=True)
        return dataclasses.replace(outcome, message=f"{outcome.message}\n{SAVE_FAILED_MESSAGE}")

    return outcome
