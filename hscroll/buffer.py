"""In-memory text buffer viewport implementing the host interface.

Used by the terminal viewer and the tests. Vertical scrolling works in
buffer lines; in wrapped mode a line may take several screen rows, and
render() stops once the screen is full.
"""

from dataclasses import dataclass
from typing import Optional

from .constants import ScrollConstants
from .goal_column import GoalColumn, resolve
from .host import ViewportHost


@dataclass
class CursorPosition:
    row: int = 0
    column: int = 0


def wrap_line(line: str, num_columns: int) -> tuple[list[str], list[int]]:
    """Word-wrap a line into screen rows.

    Returns (rows, cumulative_counts) where cumulative_counts are character
    counts in the original line at the end of each row. A word longer than
    the width is broken across rows.
    """
    if not line:
        return ([""], [0])

    rows: list[str] = []
    cumulative_counts: list[int] = []
    char_count = 0
    current: Optional[str] = None

    for word in line.split(" "):
        if current is not None and len(current) + 1 + len(word) < num_columns:
            current += " " + word
            continue
        if current is not None:
            rows.append(current)
            char_count += len(current) + 1  # the space swallowed by the break
            cumulative_counts.append(char_count)
        while len(word) >= num_columns:
            rows.append(word[:num_columns])
            char_count += num_columns
            cumulative_counts.append(char_count)
            word = word[num_columns:]
        current = word

    rows.append(current)
    char_count += len(current)
    cumulative_counts.append(char_count)
    return (rows, cumulative_counts)


class TextBufferView(ViewportHost):
    """A list of lines seen through a num_rows x num_columns window."""

    goal_column: Optional[GoalColumn] = None

    def __init__(self, lines: Optional[list[str]] = None, num_rows: int = 24,
                 num_columns: int = 80, truncate: bool = True):
        self.lines: list[str] = list(lines) if lines else [""]
        self.num_rows = num_rows
        self.num_columns = num_columns
        self.cursor_position = CursorPosition()
        self.top_row = 0
        self.horizontal_offset = 0
        self.partial_width = False
        self._truncate = truncate
        self.redraw_requested = False

    # --- Geometry ---
    @property
    def display_width(self) -> int:
        return self.num_columns

    @property
    def truncate_lines(self) -> bool:
        return self._truncate

    @truncate_lines.setter
    def truncate_lines(self, value: bool) -> None:
        self._truncate = bool(value)

    def is_partial_width(self) -> bool:
        return self.partial_width

    def get_horizontal_offset(self) -> int:
        return self.horizontal_offset

    def set_horizontal_offset(self, offset: int) -> None:
        if offset < 0:
            raise ValueError(f"Horizontal offset must be non-negative, got {offset}")
        self.horizontal_offset = offset

    def scroll_columns(self, columns: int) -> None:
        self.set_horizontal_offset(max(0, self.horizontal_offset + columns))

    def invalidate(self) -> None:
        super().invalidate()
        self.redraw_requested = True

    # --- Caret ---
    @property
    def current_line(self) -> str:
        return self.lines[self.cursor_position.row]

    def caret_column(self) -> int:
        return self.cursor_position.column

    def move_caret_to_column(self, column: int) -> None:
        self.cursor_position.column = min(max(0, column), len(self.current_line))

    def is_at_end_of_line(self) -> bool:
        return self.cursor_position.column >= len(self.current_line)

    def is_at_beginning_of_line(self) -> bool:
        return self.cursor_position.column == 0

    def line_end_column(self) -> int:
        return len(self.current_line)

    def jump_to_line_start(self) -> None:
        self.cursor_position.column = 0

    def jump_to_line_end(self) -> None:
        self.cursor_position.column = len(self.current_line)

    def _set_row(self, row: int) -> None:
        """Move the caret to row, keeping its column where the line allows."""
        self.cursor_position.row = min(max(0, row), len(self.lines) - 1)
        self.move_caret_to_column(self.cursor_position.column)

    # --- Vertical ---
    def _last_top_row(self) -> int:
        return max(0, len(self.lines) - 1)

    def center_view_on_cursor(self) -> None:
        self.top_row = max(0, self.cursor_position.row - self.num_rows // 2)

    def _ensure_cursor_visible(self) -> None:
        row = self.cursor_position.row
        if row < self.top_row or row >= self.top_row + self.num_rows:
            self.center_view_on_cursor()

    def scroll_lines(self, lines: int) -> None:
        self.top_row = min(max(0, self.top_row + lines), self._last_top_row())
        bottom = self.top_row + self.num_rows - 1
        if self.cursor_position.row < self.top_row:
            self._set_row(self.top_row)
        elif self.cursor_position.row > bottom:
            self._set_row(bottom)

    def page_lines(self) -> int:
        return max(1, self.num_rows - ScrollConstants.CONTEXT_LINES)

    def jump_to_document_start(self) -> None:
        self.cursor_position = CursorPosition(0, 0)
        self.top_row = 0

    def jump_to_document_end(self) -> None:
        last = len(self.lines) - 1
        self.cursor_position = CursorPosition(last, len(self.lines[last]))
        self.top_row = max(0, last - self.num_rows + 1)

    def next_line(self, count: int = 1) -> None:
        self._line_motion(count)

    def previous_line(self, count: int = 1) -> None:
        self._line_motion(-count)

    def _line_motion(self, delta: int) -> None:
        column = self.cursor_position.column
        self.cursor_position.row = min(max(0, self.cursor_position.row + delta), len(self.lines) - 1)
        target = resolve(self.goal_column, len(self.current_line))
        self.move_caret_to_column(column if target is None else target)
        self._ensure_cursor_visible()

    # --- Editing ---
    def insert_text(self, text: str) -> None:
        row = self.cursor_position.row
        column = self.cursor_position.column
        line = self.lines[row]
        parts = text.split("\n")
        parts[0] = line[:column] + parts[0]
        end_column = len(parts[-1])
        parts[-1] += line[column:]
        self.lines[row:row + 1] = parts
        self.cursor_position = CursorPosition(row + len(parts) - 1, end_column)
        self._ensure_cursor_visible()

    # --- Rendering ---
    def _truncated_row(self, line: str) -> str:
        offset = self.horizontal_offset
        width = self.num_columns
        segment = line[offset:offset + width]
        if offset > 0 and segment and width > 1:
            segment = "$" + segment[1:]
        if len(line) > offset + width:
            segment = segment[:width - 1] + "$"
        return segment

    def render(self) -> list[str]:
        """Return the screen rows currently in view."""
        rows: list[str] = []
        for line in self.lines[self.top_row:]:
            if len(rows) >= self.num_rows:
                break
            if self._truncate:
                rows.append(self._truncated_row(line))
            else:
                wrapped, _ = wrap_line(line, self.num_columns)
                rows.extend(wrapped[:self.num_rows - len(rows)])
        return rows

    def visual_cursor(self) -> tuple[int, int]:
        """Screen (y, x) of the caret, clamped to the window."""
        row = self.cursor_position.row
        column = self.cursor_position.column
        if self._truncate:
            y = row - self.top_row
            x = column - self.horizontal_offset
        else:
            y = 0
            for line in self.lines[self.top_row:row]:
                y += len(wrap_line(line, self.num_columns)[0])
            _, counts = wrap_line(self.current_line, self.num_columns)
            index = 0
            while index < len(counts) - 1 and column >= counts[index]:
                index += 1
            y += index
            x = column - (counts[index - 1] if index > 0 else 0)
        y = min(max(0, y), self.num_rows - 1)
        x = min(max(0, x), self.num_columns - 1)
        return y, x
