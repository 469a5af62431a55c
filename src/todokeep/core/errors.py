# src/todokeep/core/errors.py

"""
Error taxonomy for the task core.

Every fallible core operation either returns its value or raises one of these.
Only the CLI layer turns them into a message + process exit code.
"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for all expected (user-facing) failures."""

    exit_code: int = 1


class ValidationError(TodoError):
    """Input failed a precondition (e.g. empty description)."""

    exit_code = 3


class NotFoundError(TodoError):
    exit_code = 4

    def __init__(self, task_id: int) -> None:
        super().__init__(f"To-do with ID {task_id} not found.")
        self.task_id = task_id


class CorruptStoreError(TodoError):
    """Storage file exists but its content is not a valid task list."""

    exit_code = 5

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(
            f"Storage file {path} is corrupt ({reason}); refusing to overwrite it."
        )
        self.path = Path(path)
        self.reason = reason


class PersistenceError(TodoError):
    exit_code = 6

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Could not access storage file {path}: {reason}")
        self.path = Path(path)
        self.reason = reason
