# src/tasklog/cli/parser.py

"""
Command-line tokenizer.

This is the only module that knows the textual command grammar:

    <name> [<payload>]
    deadline <description> /by <date>
    event <description> /at <date>
    done|delete <n>

A stricter parser can replace these functions without touching dispatch.
"""

from __future__ import annotations

import re

from ..core.results import Err, Ok
from ..errors import InvalidIndexError

BY_TOKEN = "/by"
AT_TOKEN = "/at"

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


def parse_command(line: str) -> tuple[str, str]:
    """
    Split a raw line into (command name, payload).

    The name is the text before the first space (or the whole line); the
    payload is the trimmed remainder.
    """
    name, _sep, rest = line.partition(" ")
    return name, rest.strip()


def split_payload(payload: str, token: str) -> list[str] | None:
    """
    Split `payload` on a literal delimiter token.

    Returns trimmed segments, or None unless there are at least two segments
    and none of them is blank.
    """
    segments = [s.strip() for s in payload.split(token)]
    if len(segments) < 2 or any(not s for s in segments):
        return None
    return segments


def parse_index(payload: str) -> Ok[int] | Err[InvalidIndexError]:
    """Parse the first whitespace-delimited token of `payload` as a task number (>= 1)."""
    tokens = payload.split()
    if not tokens:
        return Err(InvalidIndexError("Task number is missing."))

    raw = tokens[0]
    if not _INDEX_RE.fullmatch(raw):
        return Err(InvalidIndexError(f"Task number must be a whole number, got {raw!r}."))
    index = int(raw)

    if index < 1:
        return Err(InvalidIndexError(f"Task number must be 1 or more, got {index}.", index=index))
    return Ok(index)
