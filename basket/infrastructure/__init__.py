from .task_store import (
    JsonTaskRepository,
    TaskStoreError,
    global_tasks_path,
    load_tasks,
    local_tasks_path,
    save_tasks,
)

__all__ = [
    "JsonTaskRepository",
    "TaskStoreError",
    "global_tasks_path",
    "load_tasks",
    "local_tasks_path",
    "save_tasks",
]
