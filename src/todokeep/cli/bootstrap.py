# src/todokeep/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (or loads them once),
- picks the storage file,
- loads the task list into AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_file import TaskFile

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    store_path: str | Path | None = None,
    repo: TaskRepo | None = None,
) -> AppState:
    """
    Create AppState with the task list already loaded.

    Settings and the repo are injectable so tests need not touch the real
    environment or the working directory. Load errors (corrupt/unreadable
    file) propagate: nothing may go on to overwrite the user's file.
    """
    if settings is None:
        settings = get_settings()

    if repo is None:
        path = Path(store_path) if store_path is not None else settings.store_path
        repo = TaskFile(path)

    logger.debug("Using storage file %s", repo.path)
    store = repo.load()
    return AppState(settings=settings, repo=repo, store=store)
