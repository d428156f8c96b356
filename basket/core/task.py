import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from .priority import Priority

TITLE_DISPLAY_LIMIT = 20

_last_id_ns = 0


def generate_task_id() -> str:
    """Nanosecond timestamp id, strictly increasing within the process."""
    global _last_id_ns
    now = time.time_ns()
    if now <= _last_id_ns:
        now = _last_id_ns + 1
    _last_id_ns = now
    return str(now)


def now_rfc3339() -> str:
    return datetime.now().astimezone().isoformat()


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: max(0, limit - 3)] + "..."


@dataclass
class Task:
    id: str
    title: str
    description: str = ""
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    created_at: str = field(default_factory=now_rfc3339)

    @classmethod
    def create(cls, title: str, priority: Priority) -> "Task":
        return cls(id=generate_task_id(), title=title, priority=Priority(priority))

    def display_title(self, limit: int = TITLE_DISPLAY_LIMIT) -> str:
        return truncate(self.title, limit)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
            "priority": int(self.priority),
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        return cls(
            id=str(data.get("id") or "") or generate_task_id(),
            title=str(data.get("title", "")),
            description=str(data.get("description") or ""),
            completed=bool(data.get("completed", False)),
            priority=Priority.coerce(data.get("priority", Priority.MEDIUM)),
            created_at=str(data.get("created_at") or ""),
        )
