from pathlib import Path
from typing import List

import pytest

from basket.application import BoardState
from basket.core import Task
from basket.infrastructure.task_store import JsonTaskRepository, TaskStoreError


class FailingRepository:
    """Repository whose writes always fail (read-only disk, full disk, ...)."""

    def __init__(self, path: Path):
        self.path = path
        self.save_calls = 0

    def exists(self) -> bool:
        return False

    def load(self) -> List[Task]:
        return []

    def save(self, tasks: List[Task]) -> None:
        self.save_calls += 1
        raise TaskStoreError(f"cannot write {self.path}: read-only file system")


@pytest.fixture
def global_path(tmp_path) -> Path:
    return tmp_path / "home" / "basket-tasks.json"


@pytest.fixture
def local_path(tmp_path) -> Path:
    return tmp_path / "project" / ".basket.json"


@pytest.fixture
def make_board(global_path, local_path):
    def _make(global_tasks=None, local_tasks=None, *, has_local=False, width=200, height=50):
        return BoardState(
            JsonTaskRepository(global_path),
            JsonTaskRepository(local_path),
            global_tasks,
            local_tasks,
            has_local=has_local,
            width=width,
            height=height,
        )

    return _make


@pytest.fixture
def failing_repo(tmp_path) -> FailingRepository:
    return FailingRepository(tmp_path / "readonly" / "basket-tasks.json")
