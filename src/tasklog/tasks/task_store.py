# src/tasklog/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from ..errors import StorageError

logger = logging.getLogger(__name__)


class FileStore:
    """
    Flat-file blob store rooted at a data directory.

    Every save writes the whole blob to a temp file next to the target and
    swaps it in with os.replace, so the target is either the old or the new
    content, never a partial write.
    """

    def __init__(self, data_dir: str | Path = "data") -> None:
        self._data_dir = Path(data_dir)
        logger.debug("FileStore ready dir=%s", self._data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, name: str) -> Path:
        return self._data_dir / name

    def load(self, name: str) -> bytes | None:
        path = self.path_for(name)
        try:
            data = path.read_bytes()
        except FileNotFoundError:
            logger.info("No task file at %s, starting with an empty list.", path)
            return None
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e
        logger.debug("Loaded %d bytes from %s", len(data), path)
        return data

    def save(self, name: str, data: bytes) -> None:
        path = self.path_for(name)
        tmp = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "wb") as f:
                f.write(data)
            os.replace(tmp, path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(f"Failed to write {path}: {e}") from e
        logger.debug("Saved %d bytes to %s", len(data), path)
