"""Terminal kanban board with global and per-project task lists."""
