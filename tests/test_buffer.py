"""Tests for the in-memory text buffer viewport."""

import pytest

from hscroll.buffer import CursorPosition, TextBufferView, wrap_line
from hscroll.goal_column import FixedColumn, TrackEndOfLine


DIGITS = "0123456789" * 3


class TestWrapLine:
    def test_empty_line(self):
        assert wrap_line("", 10) == ([""], [0])

    def test_breaks_at_spaces(self):
        rows, counts = wrap_line("hello world foo", 11)
        assert rows == ["hello", "world foo"]
        assert counts == [6, 15]

    def test_long_word_broken(self):
        rows, counts = wrap_line("abcdefghij", 4)
        assert rows == ["abcd", "efgh", "ij"]
        assert counts == [4, 8, 10]


class TestRender:
    def test_right_marker_when_line_continues(self):
        view = TextBufferView([DIGITS], num_rows=1, num_columns=10)
        assert view.render() == ["012345678$"]

    def test_both_markers_when_scrolled(self):
        view = TextBufferView([DIGITS], num_rows=1, num_columns=10)
        view.set_horizontal_offset(10)
        assert view.render() == ["$12345678$"]

    def test_left_marker_only_at_line_end(self):
        view = TextBufferView([DIGITS], num_rows=1, num_columns=10)
        view.set_horizontal_offset(25)
        assert view.render() == ["$6789"]

    def test_short_line_past_offset_is_blank(self):
        view = TextBufferView(["abc", DIGITS], num_rows=2, num_columns=10)
        view.set_horizontal_offset(12)
        assert view.render() == ["", "$34567890$"]

    def test_wrapped_mode_fills_screen(self):
        view = TextBufferView(["hello world foo", "next"], num_rows=2,
                              num_columns=11, truncate=False)
        assert view.render() == ["hello", "world foo"]


class TestVisualCursor:
    def test_truncated(self):
        view = TextBufferView([DIGITS], num_rows=1, num_columns=10)
        view.cursor_position = CursorPosition(0, 15)
        view.set_horizontal_offset(10)
        assert view.visual_cursor() == (0, 5)

    def test_wrapped(self):
        view = TextBufferView(["hello world foo"], num_rows=3,
                              num_columns=11, truncate=False)
        view.cursor_position = CursorPosition(0, 8)
        assert view.visual_cursor() == (1, 2)


class TestScrolling:
    def test_scroll_lines_drags_caret_into_view(self):
        view = TextBufferView(["a", "b", "c", "d", "e"], num_rows=2)
        view.scroll_lines(10)
        assert view.top_row == 4
        assert view.cursor_position.row == 4
        view.scroll_lines(-10)
        assert view.top_row == 0
        assert view.cursor_position.row == 1

    def test_page_lines_keeps_context(self):
        assert TextBufferView(num_rows=10).page_lines() == 8
        assert TextBufferView(num_rows=2).page_lines() == 1

    def test_negative_offset_rejected(self):
        view = TextBufferView([DIGITS])
        with pytest.raises(ValueError):
            view.set_horizontal_offset(-1)

    def test_scroll_columns_stops_at_zero(self):
        view = TextBufferView([DIGITS])
        view.scroll_columns(5)
        view.scroll_columns(-20)
        assert view.get_horizontal_offset() == 0

    def test_invalidate_requests_redraw_and_keeps_offset(self):
        view = TextBufferView([DIGITS])
        view.set_horizontal_offset(7)
        view.invalidate()
        assert view.redraw_requested
        assert view.get_horizontal_offset() == 7


class TestLineMotion:
    def test_keeps_column_without_goal(self):
        view = TextBufferView(["a" * 20, "b" * 20])
        view.cursor_position = CursorPosition(0, 12)
        view.next_line()
        assert view.cursor_position == CursorPosition(1, 12)

    def test_honours_fixed_goal(self):
        view = TextBufferView(["a" * 20, "bb", "c" * 20])
        view.cursor_position = CursorPosition(1, 2)
        view.goal_column = FixedColumn(15)
        view.next_line()
        assert view.cursor_position == CursorPosition(2, 15)

    def test_honours_end_of_line_goal(self):
        view = TextBufferView(["a" * 20, "b" * 7])
        view.goal_column = TrackEndOfLine()
        view.next_line()
        assert view.cursor_position == CursorPosition(1, 7)

    def test_previous_line_stops_at_top(self):
        view = TextBufferView(["a", "b"])
        view.previous_line(3)
        assert view.cursor_position.row == 0


class TestInsertText:
    def test_insert_plain(self):
        view = TextBufferView(["abcdef"])
        view.cursor_position = CursorPosition(0, 3)
        view.insert_text("XY")
        assert view.lines == ["abcXYdef"]
        assert view.cursor_position == CursorPosition(0, 5)

    def test_insert_newline_splits_line(self):
        view = TextBufferView(["abcdef"])
        view.cursor_position = CursorPosition(0, 3)
        view.insert_text("x\ny")
        assert view.lines == ["abcx", "ydef"]
        assert view.cursor_position == CursorPosition(1, 1)
