# tests/test_task_file.py

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from todokeep.core.errors import CorruptStoreError, PersistenceError
from todokeep.tasks.task_file import TaskFile
from todokeep.tasks.task_store import TaskStore


def test_missing_file_loads_empty_store(task_file: TaskFile) -> None:
    assert not task_file.exists()
    store = task_file.load()
    assert store.list_tasks() == []
    assert store.add("first").id == 1


@pytest.mark.parametrize("content", ["", "   \n", "[]"])
def test_empty_content_is_zero_tasks(task_file: TaskFile, content: str) -> None:
    task_file.path.write_text(content, "utf-8")
    store = task_file.load()
    assert len(store) == 0
    assert store.next_id == 1


def test_save_then_load_reproduces_tasks(task_file: TaskFile, store: TaskStore) -> None:
    store.add("Learn basics")
    store.add("Build app ✨")
    store.add("Ship")
    store.complete(2)
    store.delete(1)

    task_file.save(store)
    loaded = task_file.load()

    assert loaded.list_tasks() == store.list_tasks()
    assert not store.dirty
    assert not loaded.dirty


def test_save_writes_pretty_json_records(task_file: TaskFile, store: TaskStore) -> None:
    store.add("café")
    task_file.save(store)

    text = task_file.path.read_text("utf-8")
    assert "café" in text
    assert "\n  " in text
    assert json.loads(text) == [{"id": 1, "task": "café", "completed": False}]
    assert not Path(str(task_file.path) + ".tmp").exists()


def test_load_reads_file_written_by_hand(task_file: TaskFile) -> None:
    task_file.path.write_text(
        json.dumps(
            [
                {"id": 4, "task": "four", "completed": True},
                {"id": 2, "task": "two", "completed": False},
            ]
        ),
        "utf-8",
    )
    store = task_file.load()
    assert [(t.id, t.completed) for t in store.list_tasks()] == [(4, True), (2, False)]
    assert store.next_id == 5


def test_reload_may_reuse_highest_deleted_id(task_file: TaskFile, store: TaskStore) -> None:
    # The counter is not persisted, only rebuilt from max(id) + 1.
    for name in ("a", "b", "c"):
        store.add(name)
    store.delete(3)
    task_file.save(store)

    assert task_file.load().add("d").id == 3


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        "{broken",
        '{"id": 1, "task": "x", "completed": false}',
        '[{"id": 1, "task": "x"}]',
        '[{"id": "1", "task": "x", "completed": false}]',
        '[{"id": true, "task": "x", "completed": false}]',
        '[{"id": 0, "task": "x", "completed": false}]',
        '[{"id": 1, "task": 5, "completed": false}]',
        '[{"id": 1, "task": "x", "completed": "yes"}]',
        '[{"id": 1, "task": "a", "completed": false}, {"id": 1, "task": "b", "completed": false}]',
        "[1, 2, 3]",
    ],
)
def test_unparseable_content_raises_corrupt(task_file: TaskFile, content: str) -> None:
    task_file.path.write_text(content, "utf-8")
    with pytest.raises(CorruptStoreError) as ei:
        task_file.load()
    assert ei.value.path == task_file.path
    assert str(task_file.path) in str(ei.value)


def test_non_utf8_content_raises_corrupt(task_file: TaskFile) -> None:
    task_file.path.write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(CorruptStoreError):
        task_file.load()


def test_unreadable_path_raises_persistence_error(tmp_path: Path) -> None:
    directory = tmp_path / "todos.json"
    directory.mkdir()
    with pytest.raises(PersistenceError):
        TaskFile(directory).load()


def test_save_creates_parent_directory(tmp_path: Path, store: TaskStore) -> None:
    tf = TaskFile(tmp_path / "nested" / "dir" / "todos.json")
    store.add("x")
    tf.save(store)
    assert tf.load().get(1).description == "x"


def test_save_failure_raises_and_keeps_store_dirty(tmp_path: Path, store: TaskStore) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("i am a file", "utf-8")
    tf = TaskFile(blocker / "todos.json")

    store.add("x")
    with pytest.raises(PersistenceError):
        tf.save(store)
    assert store.dirty


def test_failed_replace_leaves_previous_file_intact(
    task_file: TaskFile, store: TaskStore, monkeypatch: pytest.MonkeyPatch
) -> None:
    store.add("old")
    task_file.save(store)
    before = task_file.path.read_text("utf-8")

    def boom(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(os, "replace", boom)
    store.add("new")
    with pytest.raises(PersistenceError) as ei:
        task_file.save(store)

    assert "No space left on device" in str(ei.value)
    assert task_file.path.read_text("utf-8") == before
    assert not Path(str(task_file.path) + ".tmp").exists()
