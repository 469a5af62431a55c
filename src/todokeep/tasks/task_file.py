# src/todokeep/tasks/task_file.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from ..core.errors import CorruptStoreError, PersistenceError
from .task_models import RecordError, Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)

DEFAULT_STORE_PATH = Path("todos.json")


class TaskFile:
    """
    JSON file backing a TaskStore.

    File format: a pretty-printed JSON array of {"id", "task", "completed"}
    records. An empty file means zero tasks.

    The next-id counter is not written; on load it is rebuilt as max(id) + 1.
    So if the highest-numbered tasks are deleted and saved, those ids can come
    back after a reload.
    """

    def __init__(self, path: str | Path = DEFAULT_STORE_PATH) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    # ---- load ----

    def _read_text(self) -> str | None:
        try:
            return self._path.read_text("utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as exc:
            raise CorruptStoreError(self._path, "not valid UTF-8 text") from exc
        except OSError as exc:
            raise PersistenceError(self._path, exc.strerror or str(exc)) from exc

    def _parse(self, raw: str) -> list[Task]:
        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CorruptStoreError(
                self._path, f"invalid JSON at line {exc.lineno} column {exc.colno}"
            ) from exc

        if not isinstance(data, list):
            raise CorruptStoreError(self._path, "expected a JSON array of tasks")

        tasks: list[Task] = []
        seen: set[int] = set()
        for pos, item in enumerate(data):
            try:
                task = Task.from_dict(item)
            except RecordError as exc:
                raise CorruptStoreError(self._path, f"record #{pos}: {exc}") from exc
            if task.id in seen:
                raise CorruptStoreError(self._path, f"duplicate id {task.id}")
            seen.add(task.id)
            tasks.append(task)
        return tasks

    def load(self) -> TaskStore:
        raw = self._read_text()
        if raw is None:
            logger.info("No storage file at %s; starting with an empty list", self._path)
            return TaskStore()

        tasks = self._parse(raw)
        store = TaskStore(tasks)
        logger.info(
            "Loaded %d task(s) from %s next_id=%s", len(store), self._path, store.next_id
        )
        return store

    # ---- save ----

    def save(self, store: TaskStore) -> None:
        """
        Replace the file with the store's full task list.

        Writes a sibling temp file and os.replace()s it over the target, so a
        failure leaves the previous file as it was.
        """
        payload = json.dumps(
            [t.to_dict() for t in store.list_tasks()], ensure_ascii=False, indent=2
        )
        tmp = self._path.with_name(self._path.name + ".tmp")

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp, self._path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink()
            logger.error("Failed to save tasks to %s: %s", self._path, exc)
            raise PersistenceError(self._path, exc.strerror or str(exc)) from exc

        store.mark_clean()
        logger.info("Saved %d task(s) to %s", len(store), self._path)
