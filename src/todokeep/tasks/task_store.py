# src/todokeep/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.errors import NotFoundError, ValidationError
from .task_models import Task

logger = logging.getLogger(__name__)


def _clean_description(description: str) -> str:
    text = (description or "").strip()
    if not text:
        raise ValidationError("Task description must not be empty.")
    return text


class TaskStore:
    """
    In-memory task list for one invocation.

    - tasks keep insertion order; nothing is ever renumbered or reordered
    - ids come from a counter that only grows, so a deleted id is not handed
      out again while this store lives
    - every mutating call validates first, then mutates; a raised error means
      nothing changed

    The store owns its Task objects. Persisting is TaskFile's job; the store
    only tracks whether it has unsaved changes (`dirty`).
    """

    def __init__(self, tasks: Iterable[Task] | None = None, next_id: int | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

        seen: set[int] = set()
        for t in self._tasks:
            if t.id in seen:
                raise ValueError(f"duplicate task id {t.id}")
            seen.add(t.id)

        floor = max(seen, default=0) + 1
        self._next_id = floor if next_id is None else max(int(next_id), floor)
        self._dirty = False

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def dirty(self) -> bool:
        return self._dirty

    def mark_clean(self) -> None:
        self._dirty = False

    # ---- lookup ----

    def _index_of(self, task_id: int) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        raise NotFoundError(task_id)

    def get(self, task_id: int) -> Task:
        return self._tasks[self._index_of(task_id)]

    # ---- public API ----

    def add(self, description: str) -> Task:
        text = _clean_description(description)

        task = Task(id=self._next_id, description=text, completed=False)
        self._tasks.append(task)
        self._next_id += 1
        self._dirty = True
        logger.debug("Task added id=%s next_id=%s", task.id, self._next_id)
        return task

    def list_tasks(self) -> list[Task]:
        """Tasks in insertion order. An empty list is a normal result."""
        return list(self._tasks)

    def edit(self, task_id: int, new_description: str) -> Task:
        task = self.get(task_id)
        text = _clean_description(new_description)

        task.description = text
        self._dirty = True
        logger.debug("Task edited id=%s", task_id)
        return task

    def complete(self, task_id: int) -> Task:
        """Mark a task done. Completing a done task again is not an error."""
        task = self.get(task_id)
        task.completed = True
        self._dirty = True
        logger.debug("Task completed id=%s", task_id)
        return task

    def delete(self, task_id: int) -> Task:
        idx = self._index_of(task_id)
        task = self._tasks.pop(idx)
        self._dirty = True
        logger.debug("Task deleted id=%s remaining=%s", task_id, len(self._tasks))
        return task
