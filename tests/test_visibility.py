"""Tests for the post-command visibility pass."""

from hscroll.buffer import CursorPosition, TextBufferView
from hscroll.commands import InsertTextCommand, NextLineCommand
from hscroll.config import ScrollConfig
from hscroll.goal_column import FixedColumn
from hscroll.offsets import visible_band
from hscroll.session import ScrollSession
from hscroll.visibility import VisibilityMaintainer


def make_session(line_length=200, column=0, offset=0, step=2, **config_kwargs):
    view = TextBufferView(["x" * line_length], num_rows=5, num_columns=80)
    view.cursor_position = CursorPosition(0, column)
    view.horizontal_offset = offset
    config = ScrollConfig(auto_scroll_step=step, **config_kwargs)
    return ScrollSession(host=view, config=config), VisibilityMaintainer(config)


def test_caret_far_past_right_edge_recentres():
    """width 80, offset 0, caret 85, step 2: the offset grows and the caret shows."""
    session, maintainer = make_session(column=85)
    maintainer(session)
    offset = session.host.horizontal_offset
    assert offset == 45
    assert offset >= 3
    left, right = visible_band(offset, 80)
    assert left <= 85 <= right


def test_caret_just_past_right_edge_nudges_with_extra_column():
    session, maintainer = make_session(column=79)
    maintainer(session)
    # Leaving offset 0 costs one extra column
    assert session.host.horizontal_offset == 3


def test_caret_just_past_right_edge_when_scrolled():
    session, maintainer = make_session(column=88, offset=10)
    maintainer(session)
    assert session.host.horizontal_offset == 12


def test_caret_far_left_recentres_to_origin():
    """caret 0, offset 40, step 2: scrolls right all the way back to 0."""
    session, maintainer = make_session(column=0, offset=40)
    maintainer(session)
    assert session.host.horizontal_offset == 0


def test_caret_just_left_of_band_nudges():
    session, maintainer = make_session(column=9, offset=10)
    maintainer(session)
    assert session.host.horizontal_offset == 8


def test_nudge_left_from_step_plus_one_reaches_origin():
    session, maintainer = make_session(column=2, offset=3)
    maintainer(session)
    assert session.host.horizontal_offset == 0


def test_caret_at_end_of_line_uses_extra_column():
    session, maintainer = make_session(line_length=79, column=79)
    maintainer(session)
    assert session.host.horizontal_offset == 0


def test_no_change_inside_band():
    session, maintainer = make_session(column=50, offset=20)
    maintainer(session)
    assert session.host.horizontal_offset == 20


def test_disabled_step_does_nothing():
    session, maintainer = make_session(column=150, step=None)
    maintainer(session)
    assert session.host.horizontal_offset == 0


def test_wrapped_viewport_does_nothing():
    session, maintainer = make_session(column=150)
    session.host.truncate_lines = False
    maintainer(session)
    assert session.host.horizontal_offset == 0


def test_partial_width_viewport_counts_as_truncated():
    session, maintainer = make_session(column=150)
    session.host.truncate_lines = False
    session.host.partial_width = True
    maintainer(session)
    assert session.host.horizontal_offset == 110


def test_goal_column_is_reference_after_vertical_motion():
    session, maintainer = make_session(line_length=10, column=10)
    session.this_command = NextLineCommand()
    session.tracker.temporary = FixedColumn(120)
    maintainer(session)
    assert session.host.horizontal_offset == 80


def test_caret_is_reference_after_other_commands():
    session, maintainer = make_session(line_length=10, column=10)
    session.this_command = InsertTextCommand()
    session.tracker.temporary = FixedColumn(120)
    maintainer(session)
    assert session.host.horizontal_offset == 0


def test_goal_tracking_can_be_disabled():
    session, maintainer = make_session(line_length=10, column=10, track_goal_column=False)
    session.this_command = NextLineCommand()
    session.tracker.temporary = FixedColumn(120)
    maintainer(session)
    assert session.host.horizontal_offset == 0


def test_reference_always_ends_up_in_band():
    for step in (2, 8):
        for start_offset in (0, 5, 30):
            for column in range(0, 150, 7):
                session, maintainer = make_session(line_length=300, column=column,
                                                   offset=start_offset, step=step)
                maintainer(session)
                left, right = visible_band(session.host.horizontal_offset, 80)
                assert left <= column <= right + 1, (step, start_offset, column)


def test_repeated_passes_converge_to_origin():
    """Walking the caret home one step at a time brings the offset back to 0."""
    session, maintainer = make_session(column=40, offset=40)
    for column in range(40, -1, -1):
        session.host.cursor_position.column = column
        maintainer(session)
    assert session.host.horizontal_offset == 0
