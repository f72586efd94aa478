# tests/test_tasklist.py

from __future__ import annotations

import time
from pathlib import Path

import pytest

from storage import Storage
from tasklist import InvalidDescriptionError, InvalidPriorityError, TaskList


def test_list_empty_store(task_list: TaskList) -> None:
    assert task_list.list() == []


@pytest.mark.parametrize("priority", [1, 5, 10])
def test_add_then_list(task_list: TaskList, clock, priority: int) -> None:
    task = task_list.add("write report", priority)

    [stored] = task_list.list()
    assert stored == task
    assert stored.description == "write report"
    assert stored.priority == priority
    assert stored.done is False
    assert stored.link is None
    assert stored.created_at == clock.now


def test_add_uses_wall_clock_by_default(storage: Storage) -> None:
    before = int(time.time() * 1000)
    task = TaskList(storage).add("real clock")
    assert task.created_at >= before


def test_add_default_priority_and_link(task_list: TaskList) -> None:
    task = task_list.add("read", link="https://example.com/article")
    assert task.priority == 1
    assert task.link == "https://example.com/article"
    assert task_list.list()[0].link == "https://example.com/article"


def test_sequential_ids(task_list: TaskList) -> None:
    assert task_list.add("buy milk", 3).id == 1
    assert task_list.add("call bob").id == 2
    assert [t.id for t in task_list.list()] == [1, 2]


@pytest.mark.parametrize("priority", [0, -1, 11, 100])
def test_invalid_priority_rejected_without_write(task_list: TaskList, tasks_file: Path, priority: int) -> None:
    with pytest.raises(InvalidPriorityError):
        task_list.add("nope", priority)
    assert not tasks_file.exists()

    task_list.add("existing")
    before = tasks_file.read_bytes()
    with pytest.raises(InvalidPriorityError):
        task_list.add("nope", priority)
    assert tasks_file.read_bytes() == before


@pytest.mark.parametrize("priority", [2.5, True, "3", None])
def test_non_integer_priority_rejected_without_write(task_list: TaskList, tasks_file: Path, priority) -> None:
    with pytest.raises(InvalidPriorityError):
        task_list.add("typed wrong", priority)
    assert not tasks_file.exists()
    assert task_list.list() == []


def test_invalid_priority_checked_before_reading_store(tasks_file: Path) -> None:
    tasks_file.write_text("garbage", encoding="utf-8")
    with pytest.raises(InvalidPriorityError):
        TaskList(Storage(tasks_file)).add("x", 42)


@pytest.mark.parametrize("description", ["", "   "])
def test_blank_description_rejected(task_list: TaskList, tasks_file: Path, description: str) -> None:
    with pytest.raises(InvalidDescriptionError):
        task_list.add(description)
    assert not tasks_file.exists()


def test_delete_existing_keeps_others(task_list: TaskList) -> None:
    for name in ("a", "b", "c"):
        task_list.add(name)

    assert task_list.delete(2) is True

    remaining = task_list.list()
    assert [(t.id, t.description) for t in remaining] == [(1, "a"), (3, "c")]


def test_delete_missing_leaves_file_untouched(task_list: TaskList, tasks_file: Path) -> None:
    task_list.add("a")
    before = tasks_file.read_bytes()
    mtime = tasks_file.stat().st_mtime_ns

    assert task_list.delete(99) is False
    assert tasks_file.read_bytes() == before
    assert tasks_file.stat().st_mtime_ns == mtime


def test_delete_on_empty_store_does_not_create_file(task_list: TaskList, tasks_file: Path) -> None:
    assert task_list.delete(1) is False
    assert not tasks_file.exists()


def test_id_not_reused_after_middle_delete(task_list: TaskList) -> None:
    for name in ("a", "b", "c"):
        task_list.add(name)
    task_list.delete(2)

    new = task_list.add("d")

    assert new.id == 4
    ids = [t.id for t in task_list.list()]
    assert ids == [1, 3, 4]
    assert len(set(ids)) == len(ids)


def test_mark_done_is_idempotent(task_list: TaskList, tasks_file: Path) -> None:
    task_list.add("a")
    task_list.add("b")

    assert task_list.mark_done(2) is True
    first = task_list.list()
    assert [t.done for t in first] == [False, True]

    assert task_list.mark_done(2) is True
    assert task_list.list() == first


def test_mark_done_missing(task_list: TaskList, tasks_file: Path) -> None:
    task_list.add("a")
    before = tasks_file.read_bytes()

    assert task_list.mark_done(7) is False
    assert tasks_file.read_bytes() == before


def test_operations_keep_insertion_order(task_list: TaskList, clock) -> None:
    for name in ("first", "second", "third"):
        task_list.add(name, priority=10)
        clock.advance(1000)
    task_list.mark_done(1)
    task_list.add("fourth", priority=1)

    assert [t.description for t in task_list.list()] == ["first", "second", "third", "fourth"]


def test_get(task_list: TaskList) -> None:
    task_list.add("a")
    assert task_list.get(1).description == "a"
    assert task_list.get(2) is None


def test_each_operation_reloads_from_disk(storage: Storage, clock) -> None:
    first = TaskList(storage, clock=clock)
    second = TaskList(Storage(storage.path), clock=clock)

    first.add("from first")
    second.add("from second")

    assert [t.id for t in first.list()] == [1, 2]
