"""JSON persistence for task lists (``{"tasks": [...]}`` documents)."""

import json
import logging
import os
from pathlib import Path
from typing import Any, List

from basket.core import Task

GLOBAL_FILENAME = "basket-tasks.json"
LOCAL_FILENAME = ".basket.json"

logger = logging.getLogger("basket.store")


class TaskStoreError(Exception):
    """Raised when a task file cannot be read, parsed or written."""


def global_tasks_path() -> Path:
    try:
        return Path.home() / GLOBAL_FILENAME
    except (RuntimeError, KeyError):
        return Path(GLOBAL_FILENAME)


def local_tasks_path() -> Path:
    try:
        return Path(os.getcwd()) / LOCAL_FILENAME
    except OSError:
        return Path(LOCAL_FILENAME)


def _parse_document(data: Any, path: Path) -> List[Task]:
    if not isinstance(data, dict):
        raise TaskStoreError(f"{path}: expected a JSON object at top level")
    raw_tasks = data.get("tasks") or []
    if not isinstance(raw_tasks, list):
        raise TaskStoreError(f"{path}: 'tasks' must be a list")
    tasks: List[Task] = []
    for raw in raw_tasks:
        if not isinstance(raw, dict):
            raise TaskStoreError(f"{path}: task entries must be objects")
        tasks.append(Task.from_dict(raw))
    return tasks


def load_tasks(path: Path) -> List[Task]:
    """Read tasks from ``path``; a missing file is an empty list."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise TaskStoreError(f"cannot read {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TaskStoreError(f"malformed JSON in {path}: {exc}") from exc
    return _parse_document(data, path)


def save_tasks(path: Path, tasks: List[Task]) -> None:
    path = Path(path)
    payload = {"tasks": [task.to_dict() for task in tasks]}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as exc:
        raise TaskStoreError(f"cannot write {path}: {exc}") from exc
    logger.debug("saved %d task(s) to %s", len(tasks), path)


class JsonTaskRepository:
    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> List[Task]:
        return load_tasks(self.path)

    def save(self, tasks: List[Task]) -> None:
        save_tasks(self.path, tasks)
