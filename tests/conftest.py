# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from todokeep.config import get_settings
from todokeep.core.state import AppState
from todokeep.tasks.task_file import TaskFile
from todokeep.tasks.task_store import TaskStore


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Run every test inside its own tmp dir with no TODOKEEP_* variables set,
    so the default "todos.json in cwd" never touches the real working tree.
    """
    for name in ("APP_NAME", "LOG_LEVEL", "LOG_DIR", "LOG_TO_FILE", "STORE_PATH"):
        monkeypatch.delenv(f"TODOKEEP_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()

    # main() reconfigures the root logger; undo that after each test.
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    get_settings.cache_clear()


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState.

    A SimpleNamespace instead of the real config keeps unit tests independent
    of the environment.
    """
    return SimpleNamespace(
        app_name="todokeep",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        log_to_file=False,
        store_path=tmp_path / "todos.json",
    )


@pytest.fixture()
def task_file(settings: SimpleNamespace) -> TaskFile:
    return TaskFile(settings.store_path)


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, task_file: TaskFile) -> AppState:
    return AppState(settings=settings, repo=task_file, store=task_file.load())
