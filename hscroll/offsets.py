"""Pure offset arithmetic for horizontal scrolling."""

from typing import Optional

from .constants import ScrollConstants


def _is_bounded(max_empty_visible) -> bool:
    # bool is an int subclass but never a meaningful column count
    return isinstance(max_empty_visible, int) and not isinstance(max_empty_visible, bool)


def max_scroll_offset(display_width: int, line_end_column: int,
                      max_empty_visible: Optional[int]) -> int:
    """Largest horizontal offset allowed for the current line.

    The offset may run past the end of the line by at most
    max_empty_visible empty columns. Anything that is not an integer
    bound (None, a marker string) means the offset is unbounded.
    """
    if not _is_bounded(max_empty_visible):
        return ScrollConstants.UNBOUNDED_OFFSET
    return max(0, line_end_column - display_width + max_empty_visible + 1)


def recenter_offset(target_column: int, display_width: int, line_end_column: int,
                    max_empty_visible: Optional[int]) -> int:
    """Offset that puts target_column in the middle of the viewport.

    An offset of 1 or less snaps to 0 so the line start is never hidden
    behind a single column.
    """
    candidate = target_column - display_width // 2
    candidate = min(candidate, max_scroll_offset(display_width, line_end_column, max_empty_visible))
    if candidate <= 1:
        return 0
    return candidate


def visible_band(offset: int, display_width: int, at_end_of_line: bool = False) -> tuple[int, int]:
    """Return the (left, right) columns where the caret counts as visible.

    At offset 0 only the right edge loses a column to the continuation
    marker; once scrolled, both edges do. A caret sitting at end of line
    occupies the column after the last character, so the band gains one.
    """
    left = offset
    if offset > 0:
        right = offset + display_width - 3
    else:
        right = display_width - 2
    if at_end_of_line:
        right += 1
    return left, right
