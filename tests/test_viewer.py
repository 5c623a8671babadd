"""Tests for key handling in the terminal viewer."""

import pytest
from unittest.mock import Mock

from hscroll.buffer import CursorPosition
from hscroll.keyboard import KeyEvent, KeyType
from hscroll.viewer import Viewer


def regular(ch):
    return KeyEvent(KeyType.REGULAR, ch, ch)


def ctrl(ch):
    return KeyEvent(KeyType.CTRL, ch, ch, is_ctrl=True)


@pytest.fixture
def viewer():
    terminal = Mock()
    terminal.width = 80
    terminal.height = 10
    viewer = Viewer(terminal=terminal)
    viewer.view.lines = ["x" * 300, "y" * 300]
    return viewer


def press(viewer, *events):
    for event in events:
        viewer.handle_key_event(event)


def test_ctrl_x_less_than_scrolls_left(viewer):
    press(viewer, ctrl('x'), regular('<'))
    assert viewer.view.get_horizontal_offset() == 79


def test_ctrl_x_greater_than_scrolls_right(viewer):
    press(viewer, ctrl('x'), regular('<'), ctrl('x'), regular('>'))
    assert viewer.view.get_horizontal_offset() == 0


def test_prefix_zero_jumps_to_line_end(viewer):
    press(viewer, ctrl('u'), regular('0'), ctrl('x'), regular('<'))
    assert viewer.view.cursor_position.column == 300
    assert viewer.view.get_horizontal_offset() == 260


def test_prefix_digits_scroll_by_columns(viewer):
    press(viewer, ctrl('u'), regular('1'), regular('2'), ctrl('x'), regular('<'))
    assert viewer.view.get_horizontal_offset() == 12


def test_bare_prefix_means_four(viewer):
    press(viewer, ctrl('u'), ctrl('f'))
    assert viewer.view.cursor_position.column == 4


def test_ctrl_x_t_toggles_truncation(viewer):
    press(viewer, ctrl('x'), regular('t'))
    assert viewer.view.truncate_lines is False
    assert "Wrap" in viewer.status_line()


def test_ctrl_g_cancels_prefix(viewer):
    press(viewer, ctrl('x'), ctrl('g'), regular('<'))
    assert viewer.view.get_horizontal_offset() == 0
    assert viewer.view.lines[0].startswith("<")
    assert viewer.status_message is None


def test_unbound_ctrl_x_key(viewer):
    press(viewer, ctrl('x'), regular('z'))
    assert viewer.status_message == "Key not bound"


def test_quit_keys(viewer):
    viewer.running = True
    press(viewer, ctrl('q'))
    assert viewer.running is False

    viewer.running = True
    press(viewer, ctrl('x'), ctrl('c'))
    assert viewer.running is False


def test_typing_inserts_text(viewer):
    viewer.view.lines = [""]
    press(viewer, regular('h'), regular('i'), KeyEvent(KeyType.SPECIAL, 'enter', '\r'))
    assert viewer.view.lines == ["hi", ""]
    assert viewer.view.cursor_position == CursorPosition(1, 0)


def test_status_line(viewer):
    viewer.filename = "notes.txt"
    viewer.view.cursor_position = CursorPosition(1, 7)
    assert viewer.status_line() == " notes.txt  L2 C7  hscroll 0  Trunc"


def test_load_missing_file(viewer, tmp_path):
    viewer.load_file(str(tmp_path / "absent.txt"))
    assert viewer.status_message.startswith("New file:")


def test_load_file(viewer, tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("one\ntwo", encoding='utf-8')
    viewer.load_file(str(path))
    assert viewer.view.lines == ["one", "two"]
