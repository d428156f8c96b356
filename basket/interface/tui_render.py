"""Rendering helpers: pure functions from BoardState to FormattedText."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.formatted_text.utils import fragment_list_to_text

from basket.application import MAX_VISIBLE_TASKS, BoardState, ViewMode
from basket.core import COLUMN_COUNT, Priority, Task, truncate
from basket.infrastructure.task_store import GLOBAL_FILENAME, LOCAL_FILENAME

from .tui_display import Fragments, center_display, pad_display, pad_fragments

COLUMN_INNER_WIDTH = 26
EDIT_TITLE_LIMIT = 40

BOX_NORMAL = ("╭", "─", "╮", "│", "╰", "╯")
BOX_SELECTED = ("┏", "━", "┓", "┃", "┗", "┛")

BOARD_HINT = "h/l columns • j/k tasks • space toggle • m move • n new • e edit • d delete • t switch • ? help • q quit"
EDITOR_HINT = "ctrl+s to save • esc to cancel"
PLACEHOLDERS = {"title": "Enter task title...", "description": "Enter task description..."}

COLUMN_ORDER = " → ".join(p.label for p in Priority)

HELP_TEXT = f"""\
╔═══════════════════════════════════════╗
║          🧺 BASKET HELP               ║
╚═══════════════════════════════════════╝

NAVIGATION
  h/←  Move to left column
  l/→  Move to right column
  k/↑  Move up in column
  j/↓  Move down in column

TASK ACTIONS
  space    Toggle completion
  m        Move task to next priority
  n        Add new task
  e        Edit task description
  d        Delete task

VIEW
  t        Switch global/local
  ?        Show this help
  q        Quit

STORAGE
  Global   ~/{GLOBAL_FILENAME}
  Local    ./{LOCAL_FILENAME}

Priority columns from left to right:
  {COLUMN_ORDER}

Press ESC or q to return
"""


def _priority_class(priority: Priority) -> str:
    return priority.label.lower()


def render_header(state: BoardState) -> Fragments:
    source = "📂 LOCAL" if state.showing_local else "🌐 GLOBAL"
    return [("class:header", f"  🧺 BASKET  {source}  ")]


def render_task_card(task: Task, selected: bool) -> Fragments:
    checkbox = "☑" if task.completed else "☐"
    gutter = "▸ " if selected else "  "
    text = pad_display(f"{gutter}{checkbox} {task.display_title()}", COLUMN_INNER_WIDTH)
    if selected:
        style = "class:card.selected"
    elif task.completed:
        style = "class:card.done"
    else:
        style = "class:card"
    return [(style, text)]


def render_column(state: BoardState, priority: Priority, selected: bool) -> List[Fragments]:
    """Column content lines (without the surrounding box)."""
    pclass = _priority_class(priority)
    header_text = f"▶ {priority.label} ◀" if selected else priority.label
    separator = ("═" if selected else "─") * COLUMN_INNER_WIDTH
    lines: List[Fragments] = [
        [(f"class:priority.{pclass}", center_display(header_text, COLUMN_INNER_WIDTH))],
        [(f"class:border.{pclass}" if selected else "class:border", separator)],
        [],
    ]

    tasks = state.tasks_in_column(priority)
    if not tasks:
        lines.append([("class:text.dimmer", "No tasks")])
        return lines

    start, end = 0, len(tasks)
    if selected:
        start = state.scroll_offset
        end = min(len(tasks), state.scroll_offset + MAX_VISIBLE_TASKS)
    if selected and start > 0:
        lines.append([("class:text.dim", "    ▲ more above")])
    for idx in range(start, end):
        lines.append(render_task_card(tasks[idx], selected and idx == state.selected_task))
    if selected and end < len(tasks):
        lines.append([("class:text.dim", "    ▼ more below")])
    return lines


def _boxed(lines: List[Fragments], priority: Priority, selected: bool, height: int) -> List[Fragments]:
    tl, horiz, tr, vert, bl, br = BOX_SELECTED if selected else BOX_NORMAL
    border = f"class:border.{_priority_class(priority)}"
    inner = COLUMN_INNER_WIDTH + 2
    boxed: List[Fragments] = [[(border, tl + horiz * inner + tr)]]
    for row in range(height):
        content = lines[row] if row < len(lines) else []
        boxed.append([(border, vert + " ")] + pad_fragments(content, COLUMN_INNER_WIDTH) + [(border, " " + vert)])
    boxed.append([(border, bl + horiz * inner + br)])
    return boxed


def render_columns(state: BoardState) -> Fragments:
    start, end = state.get_visible_columns()
    priorities = [Priority(i) for i in range(start, min(end, COLUMN_COUNT))]
    contents = [render_column(state, p, int(p) == state.selected_col) for p in priorities]
    height = max((len(c) for c in contents), default=0)
    boxes = [_boxed(c, p, int(p) == state.selected_col, height) for c, p in zip(contents, priorities)]

    rows = height + 2
    result: Fragments = []
    for row in range(rows):
        if start > 0:
            result.append(("class:marker", "◀ " if row == 1 else "  "))
        for idx, box in enumerate(boxes):
            if idx:
                result.append(("", " "))
            result.extend(box[row])
        if end < COLUMN_COUNT:
            result.append(("class:marker", " ▶" if row == 1 else "  "))
        if row < rows - 1:
            result.append(("", "\n"))
    return result


def render_footer(state: BoardState) -> Fragments:
    parts: Fragments = [("class:help", BOARD_HINT)]
    if state.notice:
        parts.append(("", "\n"))
        parts.append(("class:notice", state.notice))
    return parts


def render_board(state: BoardState) -> FormattedText:
    parts: Fragments = []
    parts.extend(render_header(state))
    parts.append(("", "\n\n"))
    parts.extend(render_columns(state))
    parts.append(("", "\n\n"))
    parts.extend(render_footer(state))
    return FormattedText(parts)


def render_editor_title(state: BoardState) -> FormattedText:
    if state.mode is ViewMode.EDIT:
        task = state.editing_task()
        title = f"✏️  {truncate(task.title, EDIT_TITLE_LIMIT)}" if task else "✏️  EDIT TASK"
        return FormattedText([("class:title", title)])
    priority = state.selected_priority
    return FormattedText([(f"class:priority.{_priority_class(priority)}", f"📝 ADD TASK TO {priority.label}")])


def render_editor_hint(state: BoardState) -> FormattedText:
    return FormattedText([("class:help", EDITOR_HINT)])


def render_editor(state: BoardState, text: str = "") -> FormattedText:
    body: Tuple[str, str] = ("class:text", text) if text else ("class:text.dim", PLACEHOLDERS.get(state.prompt, ""))
    parts: Fragments = list(render_editor_title(state))
    parts.append(("", "\n\n"))
    parts.append(body)
    parts.append(("", "\n\n"))
    parts.extend(render_editor_hint(state))
    return FormattedText(parts)


def render_help(state: BoardState) -> FormattedText:
    return FormattedText([("class:text", HELP_TEXT)])


def render(state: BoardState, text: str = "") -> FormattedText:
    """Full-screen view for the current mode; ``text`` is the input buffer in ADD/EDIT."""
    if state.mode in (ViewMode.ADD, ViewMode.EDIT):
        return render_editor(state, text)
    if state.mode is ViewMode.HELP:
        return render_help(state)
    return render_board(state)


def to_plain_text(formatted: Fragments) -> str:
    return fragment_list_to_text(formatted)


__all__ = [
    "BOARD_HINT",
    "EDITOR_HINT",
    "HELP_TEXT",
    "render",
    "render_board",
    "render_columns",
    "render_column",
    "render_task_card",
    "render_editor",
    "render_editor_title",
    "render_editor_hint",
    "render_help",
    "render_header",
    "render_footer",
    "to_plain_text",
]
