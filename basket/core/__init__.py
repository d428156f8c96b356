from .priority import COLUMN_COUNT, PRIORITY_COLORS, Priority
from .task import Task, generate_task_id, truncate

__all__ = [
    "COLUMN_COUNT",
    "PRIORITY_COLORS",
    "Priority",
    "Task",
    "generate_task_id",
    "truncate",
]
