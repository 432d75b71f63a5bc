# src/tasklog/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the console/storage swappable and makes testing easier.
"""

from typing import Callable, Protocol

Emitter = Callable[[str], None]
# Output sink for rendered text (console print or a test collector).

LineSource = Callable[[], str]
# Yields successive raw input lines; raises EOFError when exhausted (like input()).


class BlobStore(Protocol):
    """
    Byte-level load/save primitive.

    - load() returns None when the named blob does not exist yet.
    - save() overwrites the named blob in full; raises StorageError on failure.
    """

    def load(self, name: str) -> bytes | None: ...

    def save(self, name: str, data: bytes) -> None: ...
