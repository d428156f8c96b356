#!/usr/bin/env python3
"""TUI application - BasketTUI class and cmd_tui command."""

import logging
import os
from typing import Callable, Dict, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.containers import Container, DynamicContainer
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.widgets import TextArea

from basket.application import BoardState, ViewMode
from basket.config import get_ttimeoutlen

from .tui_keys import CANCEL_KEY, Outcome, dispatch, keys_for_mode
from .tui_render import render_board, render_editor_hint, render_editor_title, render_help
from .tui_themes import DEFAULT_THEME, build_style

TEXT_CHAR_LIMIT = 500
EDITOR_HEIGHTS: Dict[ViewMode, int] = {ViewMode.ADD: 3, ViewMode.EDIT: 10}

logger = logging.getLogger("basket.tui")


class BasketTUI:
    def __init__(self, state: BoardState, theme: str = DEFAULT_THEME, *, input=None, output=None):
        self.state = state
        self.theme_name = theme
        self.style = build_style(theme)

        # Shared editor widget for task titles (ADD) and descriptions (EDIT).
        self.edit_field = TextArea(
            multiline=True,
            scrollbar=True,
            focusable=True,
            wrap_lines=True,
            height=self._editor_height,
        )
        self.edit_buffer = self.edit_field.buffer
        self.edit_buffer.on_text_changed += self._on_edit_text_changed

        self.main_window = Window(
            content=FormattedTextControl(self.get_body_text, focusable=True, show_cursor=False),
            always_hide_cursor=True,
            wrap_lines=False,
        )
        self.editor_body = HSplit(
            [
                Window(content=FormattedTextControl(lambda: render_editor_title(self.state)), height=2),
                self.edit_field,
                Window(height=1, char=" "),
                Window(content=FormattedTextControl(lambda: render_editor_hint(self.state)), height=1),
            ]
        )
        self.body_container = DynamicContainer(self._resolve_body_container)

        self.app = Application(
            layout=Layout(self.body_container, focused_element=self.main_window),
            key_bindings=self._build_key_bindings(),
            style=self.style,
            full_screen=True,
            input=input,
            output=output,
        )
        # prompt_toolkit waits ttimeoutlen to tell a lone Escape from an escape sequence.
        self.app.ttimeoutlen = get_ttimeoutlen()

    # -------------------- key handling --------------------
    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        kb.timeout = 0
        for mode in ViewMode:
            mode_active = Condition(lambda mode=mode: self.state.mode is mode)
            for key in keys_for_mode(mode):
                kb.add(key, filter=mode_active, eager=(key == CANCEL_KEY))(self._key_handler(key))
        return kb

    def _key_handler(self, key: str) -> Callable:
        def _(event):
            self.handle_key(key)

        return _

    def handle_key(self, key: str) -> Outcome:
        """Apply one key to the board; re-render or exit afterwards."""
        previous = self.state.mode
        outcome = dispatch(self.state, key, self.edit_buffer.text)
        if outcome is Outcome.QUIT:
            if self.app.is_running:
                self.app.exit()
            return outcome
        if self.state.mode is not previous:
            self._on_mode_changed()
        self.force_render()
        return outcome

    def _on_mode_changed(self) -> None:
        if self.state.mode in EDITOR_HEIGHTS:
            draft = self.state.draft
            self.edit_buffer.text = draft
            self.edit_buffer.cursor_position = len(draft)
            self._focus(self.edit_field)
        else:
            self.edit_buffer.text = ""
            self._focus(self.main_window)

    def _focus(self, target: Container) -> None:
        try:
            self.app.layout.focus(target)
        except ValueError as exc:
            logger.debug("focus change skipped: %s", exc)

    def _on_edit_text_changed(self, buffer) -> None:
        if len(buffer.text) > TEXT_CHAR_LIMIT:
            buffer.text = buffer.text[:TEXT_CHAR_LIMIT]
        self.force_render()

    # -------------------- layout --------------------
    def _resolve_body_container(self) -> Container:
        if self.state.mode in EDITOR_HEIGHTS:
            return self.editor_body
        return self.main_window

    def _editor_height(self) -> Dimension:
        return Dimension.exact(EDITOR_HEIGHTS.get(self.state.mode, 3))

    def _sync_geometry(self) -> None:
        try:
            size = self.app.output.get_size()
            width, height = size.columns, size.rows
        except (AttributeError, OSError):
            width, height = self.get_terminal_width(), self.get_terminal_height()
        self.state.resize(width, height)

    def get_body_text(self) -> FormattedText:
        self._sync_geometry()
        if self.state.mode is ViewMode.HELP:
            return render_help(self.state)
        return render_board(self.state)

    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    @staticmethod
    def get_terminal_height() -> int:
        try:
            return os.get_terminal_size().lines
        except (AttributeError, ValueError, OSError):
            return 40

    def force_render(self) -> None:
        app = getattr(self, "app", None)
        if app:
            app.invalidate()

    def run(self) -> None:
        self.app.run()


def cmd_tui(state: BoardState, theme: Optional[str] = None) -> int:
    tui = BasketTUI(state, theme=theme or DEFAULT_THEME)
    tui.run()
    return 0


__all__ = ["BasketTUI", "cmd_tui", "TEXT_CHAR_LIMIT"]
