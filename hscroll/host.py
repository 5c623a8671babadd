"""Capabilities the scroll engine needs from the viewport that hosts it."""

from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .goal_column import GoalColumn


class ViewportHost(ABC):
    """One viewport onto a text buffer, with its caret.

    The engine never holds buffer content; it reads geometry and caret
    state through these methods and requests offset changes and caret
    moves. Columns are 0-based and independent of the horizontal offset.
    Exceptions raised by a host are not caught by the engine.
    """

    # Goal column honoured by the host's own next_line/previous_line
    goal_column: "Optional[GoalColumn]" = None

    @property
    @abstractmethod
    def display_width(self) -> int:
        """Number of visible columns (at least 1)."""

    @property
    @abstractmethod
    def truncate_lines(self) -> bool:
        """True when long lines are clipped rather than wrapped."""

    @truncate_lines.setter
    @abstractmethod
    def truncate_lines(self, value: bool) -> None:
        ...

    @abstractmethod
    def get_horizontal_offset(self) -> int:
        """Leftmost visible column."""

    @abstractmethod
    def set_horizontal_offset(self, offset: int) -> None:
        ...

    @abstractmethod
    def caret_column(self) -> int:
        ...

    @abstractmethod
    def move_caret_to_column(self, column: int) -> None:
        """Move the caret on its row, stopping at the end of a short line."""

    @abstractmethod
    def is_at_end_of_line(self) -> bool:
        ...

    @abstractmethod
    def is_at_beginning_of_line(self) -> bool:
        ...

    @abstractmethod
    def line_end_column(self) -> int:
        """Column of the end of the caret's line."""

    @abstractmethod
    def scroll_columns(self, columns: int) -> None:
        """Shift the horizontal offset by a signed number of columns."""

    @abstractmethod
    def scroll_lines(self, lines: int) -> None:
        """Scroll the view by a signed number of lines.

        Positive values reveal later lines. The caret row follows when it
        would otherwise leave the view.
        """

    @abstractmethod
    def page_lines(self) -> int:
        """Lines moved by a full-page scroll (one screen minus context)."""

    @abstractmethod
    def jump_to_document_start(self) -> None:
        ...

    @abstractmethod
    def jump_to_document_end(self) -> None:
        ...

    @abstractmethod
    def jump_to_line_start(self) -> None:
        ...

    @abstractmethod
    def jump_to_line_end(self) -> None:
        ...

    @abstractmethod
    def next_line(self, count: int = 1) -> None:
        """Generic line motion; honours goal_column when it is set."""

    @abstractmethod
    def previous_line(self, count: int = 1) -> None:
        ...

    def insert_text(self, text: str) -> None:
        """Insert text at the caret. Read-only hosts leave this alone."""
        raise NotImplementedError(f"{type(self).__name__} does not support editing")

    def is_partial_width(self) -> bool:
        """True when the viewport is narrower than the screen it sits on."""
        return False

    def invalidate(self) -> None:
        """Force the host to redraw the viewport.

        The default performs a redundant intermediate offset write before
        restoring the current value, which is enough for hosts that only
        repaint on offset changes. Hosts with an explicit invalidation
        call should override this.
        """
        offset = self.get_horizontal_offset()
        self.set_horizontal_offset(offset + 1)
        self.set_horizontal_offset(offset)
