# src/todokeep/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the CLI.

The command layer depends on this Protocol instead of TaskFile directly,
so tests can swap in a storage double (e.g. one whose save always fails).
"""

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_store import TaskStore


class TaskRepo(Protocol):
    """Durable storage for a whole TaskStore."""

    @property
    def path(self) -> Path: ...

    def load(self) -> TaskStore: ...
    def save(self, store: TaskStore) -> None: ...
