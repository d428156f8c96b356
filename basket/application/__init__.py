from .board_state import MAX_VISIBLE_TASKS, BoardState, ViewMode
from .ports import TaskRepository

__all__ = ["MAX_VISIBLE_TASKS", "BoardState", "TaskRepository", "ViewMode"]
