"""Interactive board state: view mode, selection, scrolling and task mutations.

All task lookups go through the task id; the board never keeps a live reference
to a task across events, so edits and deletions cannot leave a dangling handle.
Selection indices are relative to the *filtered view* (active list restricted to
the selected column's priority, in list order).
"""

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from basket.application.ports import TaskRepository
from basket.core import COLUMN_COUNT, Priority, Task
from basket.infrastructure.task_store import TaskStoreError
from basket.util.responsive import centered_offset, column_window, visible_column_count

MAX_VISIBLE_TASKS = 8
DEFAULT_COLUMN = Priority.MEDIUM

logger = logging.getLogger("basket.board")


class ViewMode(Enum):
    BOARD = "board"
    ADD = "add"
    EDIT = "edit"
    HELP = "help"


class BoardState:
    def __init__(
        self,
        global_repo: TaskRepository,
        local_repo: TaskRepository,
        global_tasks: Optional[List[Task]] = None,
        local_tasks: Optional[List[Task]] = None,
        *,
        has_local: bool = False,
        width: int = 0,
        height: int = 0,
    ):
        self.global_repo = global_repo
        self.local_repo = local_repo
        self.global_tasks: List[Task] = list(global_tasks or [])
        self.local_tasks: List[Task] = list(local_tasks or [])
        self.has_local = has_local
        # Local wins only when it exists and has content.
        self.showing_local = bool(has_local and self.local_tasks)
        self.mode = ViewMode.BOARD
        self.selected_col: int = int(DEFAULT_COLUMN)
        self.selected_task: int = 0
        self.scroll_offset: int = 0
        self.col_scroll_offset: int = 0
        self.editing_task_id: Optional[str] = None
        self.prompt: str = "title"
        self.draft: str = ""
        self.notice: str = ""
        self.width = width
        self.height = height
        self.update_horizontal_scroll()

    @classmethod
    def from_disk(cls, global_repo: TaskRepository, local_repo: TaskRepository, **kwargs) -> "BoardState":
        """Load both lists; a malformed file raises ``TaskStoreError``."""
        has_local = local_repo.exists()
        global_tasks = global_repo.load()
        local_tasks = local_repo.load() if has_local else []
        logger.info(
            "loaded %d global task(s), %d local task(s) (local file %s)",
            len(global_tasks),
            len(local_tasks),
            "present" if has_local else "absent",
        )
        return cls(global_repo, local_repo, global_tasks, local_tasks, has_local=has_local, **kwargs)

    # -------------------- queries --------------------
    @property
    def tasks(self) -> List[Task]:
        return self.local_tasks if self.showing_local else self.global_tasks

    @property
    def active_repo(self) -> TaskRepository:
        return self.local_repo if self.showing_local else self.global_repo

    @property
    def active_path(self) -> Path:
        return self.active_repo.path

    @property
    def source_label(self) -> str:
        return "LOCAL" if self.showing_local else "GLOBAL"

    @property
    def selected_priority(self) -> Priority:
        return Priority(self.selected_col)

    def tasks_in_column(self, priority: Priority) -> List[Task]:
        return [task for task in self.tasks if task.priority == priority]

    def current_column(self) -> List[Task]:
        return self.tasks_in_column(self.selected_priority)

    def selected_task_obj(self) -> Optional[Task]:
        column = self.current_column()
        if 0 <= self.selected_task < len(column):
            return column[self.selected_task]
        return None

    def find_task(self, task_id: Optional[str]) -> Optional[Task]:
        if task_id is None:
            return None
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def editing_task(self) -> Optional[Task]:
        return self.find_task(self.editing_task_id)

    def get_visible_columns(self) -> Tuple[int, int]:
        return column_window(self.width, self.col_scroll_offset, COLUMN_COUNT)

    # -------------------- geometry / scrolling --------------------
    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.update_horizontal_scroll()

    def update_horizontal_scroll(self) -> None:
        visible = visible_column_count(self.width, COLUMN_COUNT)
        self.col_scroll_offset = centered_offset(self.selected_col, visible, COLUMN_COUNT)

    def _ensure_selection_visible(self) -> None:
        total = len(self.current_column())
        if self.selected_task < self.scroll_offset:
            self.scroll_offset = self.selected_task
        elif self.selected_task >= self.scroll_offset + MAX_VISIBLE_TASKS:
            self.scroll_offset = self.selected_task - MAX_VISIBLE_TASKS + 1
        self.scroll_offset = max(0, min(self.scroll_offset, max(0, total - MAX_VISIBLE_TASKS)))

    def _clamp_selection(self) -> None:
        total = len(self.current_column())
        if total == 0:
            self.selected_task = 0
        elif self.selected_task >= total:
            self.selected_task = total - 1

    # -------------------- navigation --------------------
    def move_column(self, delta: int) -> None:
        self.selected_col = (self.selected_col + delta) % COLUMN_COUNT
        self._clamp_selection()
        self._ensure_selection_visible()
        self.update_horizontal_scroll()

    def column_left(self) -> None:
        self.move_column(-1)

    def column_right(self) -> None:
        self.move_column(1)

    def task_up(self) -> None:
        if self.selected_task > 0 and self.current_column():
            self.selected_task -= 1
            if self.selected_task < self.scroll_offset:
                self.scroll_offset = self.selected_task

    def task_down(self) -> None:
        total = len(self.current_column())
        if total and self.selected_task < total - 1:
            self.selected_task += 1
            if self.selected_task >= self.scroll_offset + MAX_VISIBLE_TASKS:
                self.scroll_offset = self.selected_task - MAX_VISIBLE_TASKS + 1

    # -------------------- task mutations --------------------
    def toggle_selected(self) -> None:
        selected = self.selected_task_obj()
        task = self.find_task(selected.id) if selected else None
        if not task:
            return
        task.completed = not task.completed
        self.persist()

    def delete_selected(self) -> None:
        selected = self.selected_task_obj()
        if not selected:
            return
        tasks = self.tasks
        for idx, task in enumerate(tasks):
            if task.id == selected.id:
                del tasks[idx]
                break
        else:
            return
        if self.selected_task >= len(self.current_column()) and self.selected_task > 0:
            self.selected_task -= 1
        self._ensure_selection_visible()
        self.persist()

    def move_selected(self) -> None:
        selected = self.selected_task_obj()
        task = self.find_task(selected.id) if selected else None
        if not task:
            return
        task.priority = task.priority.next()
        self.persist()
        self.selected_col = int(task.priority)
        for idx, candidate in enumerate(self.current_column()):
            if candidate.id == task.id:
                self.selected_task = idx
                break
        self._ensure_selection_visible()
        self.update_horizontal_scroll()

    def switch_source(self) -> None:
        if not self.has_local:
            # First switch creates the local list in memory; it is written on the first mutation.
            self.local_tasks = []
            self.has_local = True
            self.showing_local = True
        else:
            self.showing_local = not self.showing_local
        self.selected_col = int(DEFAULT_COLUMN)
        self.selected_task = 0
        self.scroll_offset = 0
        self.col_scroll_offset = 0
        self.update_horizontal_scroll()
        logger.info("switched to %s tasks (%s)", self.source_label, self.active_path)

    def persist(self) -> bool:
        """Write the active list to its backing file; failures keep in-memory state."""
        try:
            self.active_repo.save(self.tasks)
        except TaskStoreError as exc:
            logger.warning("save failed: %s", exc)
            self.notice = f"Save failed: {exc}"
            return False
        self.notice = ""
        return True

    # -------------------- mode transitions --------------------
    def start_add(self) -> None:
        self.mode = ViewMode.ADD
        self.prompt = "title"
        self.draft = ""

    def commit_add(self, text: str) -> Optional[Task]:
        title = text.strip()
        self.mode = ViewMode.BOARD
        if not title:
            return None
        task = Task.create(title, self.selected_priority)
        self.tasks.append(task)
        self.persist()
        return task

    def start_edit(self) -> bool:
        task = self.selected_task_obj()
        if not task:
            return False
        self.mode = ViewMode.EDIT
        self.editing_task_id = task.id
        self.prompt = "description"
        self.draft = task.description
        return True

    def commit_edit(self, text: str) -> None:
        task = self.editing_task()
        if task:
            task.description = text.strip()
            self.persist()
        self.mode = ViewMode.BOARD
        self.editing_task_id = None

    def open_help(self) -> None:
        self.mode = ViewMode.HELP

    def cancel(self) -> None:
        """Leave ADD/EDIT/HELP without applying anything."""
        self.mode = ViewMode.BOARD
        self.editing_task_id = None
