from pathlib import Path
from typing import List, Protocol

from basket.core import Task


class TaskRepository(Protocol):
    path: Path

    def exists(self) -> bool:
        ...

    def load(self) -> List[Task]:
        ...

    def save(self, tasks: List[Task]) -> None:
        ...
