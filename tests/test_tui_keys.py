import pytest

from basket.application import ViewMode
from basket.core import Priority, Task
from basket.interface.tui_keys import BOARD_KEYMAP, Outcome, dispatch, keys_for_mode


def _task(tid, priority=Priority.MEDIUM):
    return Task(id=str(tid), title=f"task {tid}", priority=priority, created_at="2024-01-01T00:00:00+00:00")


@pytest.mark.parametrize("key", ["q", "c-c"])
def test_quit_keys_on_board(make_board, key):
    assert dispatch(make_board(), key) is Outcome.QUIT


@pytest.mark.parametrize("key, attr, expected", [("h", "selected_col", 1), ("left", "selected_col", 1), ("l", "selected_col", 3), ("right", "selected_col", 3)])
def test_column_keys(make_board, key, attr, expected):
    state = make_board()
    assert dispatch(state, key) is Outcome.HANDLED
    assert getattr(state, attr) == expected


@pytest.mark.parametrize("down, up", [("j", "k"), ("down", "up")])
def test_row_keys(make_board, down, up):
    state = make_board([_task(1), _task(2)])
    dispatch(state, down)
    assert state.selected_task == 1
    dispatch(state, up)
    assert state.selected_task == 0


@pytest.mark.parametrize("key", ["space", "enter"])
def test_toggle_keys(make_board, key):
    state = make_board([_task(1)])
    dispatch(state, key)
    assert state.tasks[0].completed is True


def test_delete_and_move_keys(make_board):
    state = make_board([_task(1), _task(2)])
    dispatch(state, "m")
    assert state.selected_col == int(Priority.HIGH)
    dispatch(state, "d")
    assert [t.id for t in state.tasks] == ["2"]


def test_unknown_board_key_is_ignored(make_board):
    state = make_board([_task(1)])
    assert dispatch(state, "x") is Outcome.HANDLED
    assert state.mode is ViewMode.BOARD
    assert state.tasks[0].completed is False


def test_every_documented_board_key_is_bound():
    expected = {"h", "left", "l", "right", "k", "up", "j", "down", "space", "enter", "n", "e", "d", "m", "t", "?"}
    assert expected == set(BOARD_KEYMAP)
    assert {"q", "c-c"} <= set(keys_for_mode(ViewMode.BOARD))


class TestTextModes:
    def test_typing_is_forwarded_to_input(self, make_board):
        state = make_board()
        dispatch(state, "n")
        for key in ("a", "q", "?", "enter", "backspace"):
            assert dispatch(state, key) is Outcome.FORWARD
        assert state.mode is ViewMode.ADD
        assert state.tasks == []

    def test_escape_cancels_add(self, make_board):
        state = make_board()
        dispatch(state, "n")
        assert dispatch(state, "escape", "half typed") is Outcome.HANDLED
        assert state.mode is ViewMode.BOARD
        assert state.tasks == []

    def test_commit_edit(self, make_board):
        state = make_board([_task(1)])
        dispatch(state, "e")
        assert state.mode is ViewMode.EDIT
        assert dispatch(state, "c-s", "details") is Outcome.HANDLED
        assert state.tasks[0].description == "details"

    def test_edit_on_empty_column_stays_on_board(self, make_board):
        state = make_board()
        dispatch(state, "e")
        assert state.mode is ViewMode.BOARD

    def test_text_mode_keys(self):
        assert set(keys_for_mode(ViewMode.ADD)) == {"c-s", "escape"}
        assert set(keys_for_mode(ViewMode.EDIT)) == {"c-s", "escape"}


class TestHelpMode:
    @pytest.mark.parametrize("key", ["escape", "q"])
    def test_leave_help(self, make_board, key):
        state = make_board()
        dispatch(state, "?")
        assert state.mode is ViewMode.HELP
        assert dispatch(state, key) is Outcome.HANDLED
        assert state.mode is ViewMode.BOARD

    def test_other_keys_ignored(self, make_board):
        state = make_board([_task(1)])
        dispatch(state, "?")
        dispatch(state, "d")
        assert state.mode is ViewMode.HELP
        assert len(state.tasks) == 1
