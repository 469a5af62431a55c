# src/todokeep/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class RecordError(ValueError):
    """A stored task record does not have the expected shape."""


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        # "task" is the on-disk key for the description.
        return {"id": self.id, "task": self.description, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise RecordError(f"expected an object, got {type(raw).__name__}")

        missing = [k for k in ("id", "task", "completed") if k not in raw]
        if missing:
            raise RecordError(f"missing field(s): {', '.join(missing)}")

        task_id = raw["id"]
        # bool is an int subclass; reject it explicitly.
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise RecordError(f"id must be an integer, got {task_id!r}")
        if task_id < 1:
            raise RecordError(f"id must be positive, got {task_id}")

        description = raw["task"]
        if not isinstance(description, str):
            raise RecordError(f"task must be a string (id={task_id})")

        completed = raw["completed"]
        if not isinstance(completed, bool):
            raise RecordError(f"completed must be true/false (id={task_id})")

        return cls(id=task_id, description=description, completed=completed)
