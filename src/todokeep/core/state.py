# src/todokeep/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings kept on the state so command handlers can reach them.
    settings: object

    repo: TaskRepo
    store: TaskStore

    def save_if_dirty(self) -> bool:
        """Persist the store when it has unsaved changes. Returns True if written."""
        if not self.store.dirty:
            return False
        self.repo.save(self.store)
        return True
