# src/tasklog/errors.py

"""
Error kinds used across the tracker.

User-input errors (validation, format, index) never escape dispatch: handlers
turn them into an Outcome. ParseError and StorageError are recoverable and
are caught by the loader / session respectively.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for every tracker error."""


class ValidationError(TaskError, ValueError):
    """A required task field is empty (or whitespace only)."""

    def __init__(self, field: str) -> None:
        super().__init__(f"The {field} of a task cannot be empty.")
        self.field = field


class FormatError(TaskError, ValueError):
    """A command payload does not match its usage."""


class InvalidIndexError(TaskError, IndexError):
    """Task number is missing, not a number, < 1 or past the end of the list."""

    def __init__(self, message: str, *, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class ParseError(TaskError, ValueError):
    """A persisted line cannot be decoded back into a task."""


class StorageError(TaskError, OSError):
    """The backing store failed to read or write."""
