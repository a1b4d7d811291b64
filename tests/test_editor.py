import pytest

from vedit.editor import HELLO_MESSAGE, Editor, Key, Mode


def _type(editor, text):
    for ch in text:
        editor.handle_key(ord(ch))


@pytest.fixture
def editor():
    ed = Editor()
    ed.set_window_size(5, 10)
    return ed


def test_initial_state():
    ed = Editor()
    assert ed.mode is Mode.NORMAL
    assert ed.running is True
    assert (ed.cursor_row, ed.cursor_col) == (0, 0)
    assert ed.rows == []
    assert ed.prompt == ""


def test_key_numbering(editor):
    assert [k.value for k in Key] == list(range(1024, 1024 + len(Key)))
    editor.handle_key(1027)
    assert editor.cursor_col == 1
    editor.handle_key(1025)
    assert editor.cursor_row == 1
    editor.handle_key(1026)
    editor.handle_key(1024)
    assert (editor.cursor_row, editor.cursor_col) == (0, 0)


@pytest.mark.parametrize("rows,cols", [(-1, 5), (5, -1)])
def test_negative_window_size_rejected(rows, cols):
    ed = Editor()
    with pytest.raises(ValueError):
        ed.set_window_size(rows, cols)


def test_set_window_size(editor):
    editor.set_window_size(7, 3)
    assert (editor.ws_rows, editor.ws_cols) == (7, 3)


def test_right_is_bounded(editor):
    for _ in range(50):
        editor.handle_key(ord("l"))
    assert editor.cursor_col == editor.ws_cols - 1


def test_left_at_origin_stays(editor):
    editor.handle_key(Key.LEFT)
    editor.handle_key(ord("h"))
    assert editor.cursor_col == 0


def test_down_and_up(editor):
    editor.handle_key(Key.DOWN)
    editor.handle_key(ord("j"))
    assert editor.cursor_row == 2
    editor.handle_key(ord("k"))
    assert editor.cursor_row == 1
    editor.handle_key(Key.UP)
    editor.handle_key(Key.UP)
    assert editor.cursor_row == 0


def test_end_and_home(editor):
    editor.handle_key(Key.END)
    assert editor.cursor_col == editor.ws_cols - 1
    editor.handle_key(Key.HOME)
    assert editor.cursor_col == 0


def test_page_down_and_up(editor):
    editor.handle_key(Key.PAGEDOWN)
    assert editor.cursor_row == editor.ws_rows - 1
    editor.handle_key(Key.PAGEUP)
    assert editor.cursor_row == 0


@pytest.mark.parametrize("lead", [":", "/"])
def test_prompt_entered(editor, lead):
    editor.handle_key(ord(lead))
    assert editor.mode is Mode.PROMPT
    assert editor.prompt == lead


def test_prompt_collects_text(editor):
    _type(editor, ":abc")
    assert editor.prompt == ":abc"


def test_quit_command(editor):
    _type(editor, ":quit")
    editor.handle_key(Key.ENTER)
    assert editor.running is False
    assert editor.mode is Mode.NORMAL


def test_hello_command_sets_error_message(editor):
    _type(editor, ":hello")
    editor.handle_key(Key.ENTER)
    assert editor.message == HELLO_MESSAGE
    assert editor.show_message and editor.is_error
    editor.handle_key(ord("l"))
    assert not editor.show_message and not editor.is_error


def test_unknown_command_keeps_running(editor):
    _type(editor, ":nothing")
    editor.handle_key(Key.ENTER)
    assert editor.running is True
    assert editor.show_message is False


def test_search_prompt_does_not_quit(editor):
    _type(editor, "/quit")
    editor.handle_key(Key.ENTER)
    assert editor.running is True


def test_backspace_edits_prompt(editor):
    _type(editor, ":quitx")
    editor.handle_key(Key.BACKSPACE)
    assert editor.prompt == ":quit"
    editor.handle_key(Key.ENTER)
    assert editor.running is False


def test_backspace_to_empty_leaves_prompt(editor):
    editor.handle_key(ord(":"))
    editor.handle_key(Key.BACKSPACE)
    assert editor.mode is Mode.NORMAL
    assert editor.prompt == ""


def test_escape_leaves_prompt(editor):
    _type(editor, ":qu")
    editor.handle_key(Key.ESC)
    assert editor.mode is Mode.NORMAL
    assert editor.running is True


def test_prompt_ignores_movement_keys(editor):
    _type(editor, ":a")
    editor.handle_key(Key.RIGHT)
    assert editor.cursor_col == 0
    assert editor.prompt == ":a"


def test_insert_mode_ignores_keys(editor):
    editor.mode = Mode.INSERT
    editor.handle_key(ord("l"))
    editor.handle_key(ord(":"))
    assert editor.cursor_col == 0
    assert editor.mode is Mode.INSERT