# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from storage import Storage
from tasklist import TaskList


class FakeClock:
    """Deterministic millisecond clock; advance() moves it forward."""

    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def storage(tasks_file: Path) -> Storage:
    return Storage(tasks_file)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def task_list(storage: Storage, clock: FakeClock) -> TaskList:
    return TaskList(storage, clock=clock)
