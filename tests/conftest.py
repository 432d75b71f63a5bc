# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklog.core.state import AppState
from fakes import FakeStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and core modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="tasklog",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        data_file="tasks.txt",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: FakeStore) -> AppState:
    return AppState(settings=settings, store=store)
