"""Key dispatch tables: (view mode, key name) -> board transform.

Key names are prompt_toolkit key names so the TUI can bind each table entry
directly. The dispatcher keeps no state of its own.
"""

from enum import Enum
from typing import Callable, Dict, List, Tuple

from basket.application import BoardState, ViewMode


class Outcome(Enum):
    HANDLED = "handled"
    QUIT = "quit"
    FORWARD = "forward"  # belongs to the text-input widget


BoardAction = Callable[[BoardState], None]
TextAction = Callable[[BoardState, str], None]

QUIT_KEYS: Tuple[str, ...] = ("q", "c-c")
COMMIT_KEY = "c-s"
CANCEL_KEY = "escape"
HELP_CANCEL_KEYS: Tuple[str, ...] = (CANCEL_KEY, "q")

BOARD_KEYMAP: Dict[str, BoardAction] = {
    "h": BoardState.column_left,
    "left": BoardState.column_left,
    "l": BoardState.column_right,
    "right": BoardState.column_right,
    "k": BoardState.task_up,
    "up": BoardState.task_up,
    "j": BoardState.task_down,
    "down": BoardState.task_down,
    "space": BoardState.toggle_selected,
    "enter": BoardState.toggle_selected,
    "n": BoardState.start_add,
    "e": BoardState.start_edit,
    "d": BoardState.delete_selected,
    "m": BoardState.move_selected,
    "t": BoardState.switch_source,
    "?": BoardState.open_help,
}

ADD_KEYMAP: Dict[str, TextAction] = {
    COMMIT_KEY: BoardState.commit_add,
    CANCEL_KEY: lambda state, _text: state.cancel(),
}

EDIT_KEYMAP: Dict[str, TextAction] = {
    COMMIT_KEY: BoardState.commit_edit,
    CANCEL_KEY: lambda state, _text: state.cancel(),
}

HELP_KEYMAP: Dict[str, BoardAction] = {key: BoardState.cancel for key in HELP_CANCEL_KEYS}


def _dispatch_board(state: BoardState, key: str) -> Outcome:
    if key in QUIT_KEYS:
        return Outcome.QUIT
    action = BOARD_KEYMAP.get(key)
    if action:
        action(state)
    return Outcome.HANDLED


def _dispatch_text(keymap: Dict[str, TextAction], state: BoardState, key: str, text: str) -> Outcome:
    action = keymap.get(key)
    if not action:
        return Outcome.FORWARD
    action(state, text)
    return Outcome.HANDLED


def _dispatch_help(state: BoardState, key: str) -> Outcome:
    action = HELP_KEYMAP.get(key)
    if action:
        action(state)
    return Outcome.HANDLED


def dispatch(state: BoardState, key: str, text: str = "") -> Outcome:
    """Apply ``key`` to ``state`` for its current mode.

    ``text`` is the text-input buffer, consumed by the commit key in ADD/EDIT.
    Unknown keys are ignored in BOARD/HELP and forwarded in ADD/EDIT.
    """
    if state.mode is ViewMode.ADD:
        return _dispatch_text(ADD_KEYMAP, state, key, text)
    if state.mode is ViewMode.EDIT:
        return _dispatch_text(EDIT_KEYMAP, state, key, text)
    if state.mode is ViewMode.HELP:
        return _dispatch_help(state, key)
    return _dispatch_board(state, key)


def keys_for_mode(mode: ViewMode) -> List[str]:
    """Every key the dispatcher reacts to in ``mode`` (used to build bindings)."""
    if mode is ViewMode.ADD:
        return list(ADD_KEYMAP)
    if mode is ViewMode.EDIT:
        return list(EDIT_KEYMAP)
    if mode is ViewMode.HELP:
        return list(HELP_KEYMAP)
    return list(QUIT_KEYS) + list(BOARD_KEYMAP)


__all__ = [
    "Outcome",
    "BOARD_KEYMAP",
    "ADD_KEYMAP",
    "EDIT_KEYMAP",
    "HELP_KEYMAP",
    "QUIT_KEYS",
    "COMMIT_KEY",
    "CANCEL_KEY",
    "dispatch",
    "keys_for_mode",
]
