# src/tasklog/core/results.py

"""
Tiny Ok/Err result type.

Expected user-input failures (bad task numbers) are returned, not raised.
Callers branch with isinstance(res, Err).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from ..errors import TaskError

T = TypeVar("T")
E = TypeVar("E", bound=TaskError)


@dataclass(slots=True, frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(slots=True, frozen=True)
class Err(Generic[E]):
    error: E
