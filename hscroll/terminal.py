"""Terminal interface using Blessed for display and Curtsies for input."""

import select
import sys
from typing import Optional

import blessed


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        # Last painted frame, for minimal updates
        self._last_lines: Optional[list[str]] = None
        self._last_status: Optional[str] = None

    def setup(self):
        """Enter fullscreen mode and start reading keys through curtsies."""
        print(self.term.enter_fullscreen + self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            from curtsies import Input
            self._curtsies_input = Input(keynames='curtsies')
            self._curtsies_input.__enter__()

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            print(self.term.exit_fullscreen + self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    def invalidate_frame(self) -> None:
        """Forget the last frame so the next update repaints everything."""
        self._last_lines = None
        self._last_status = None

    def update_frame(self, lines: list[str], cursor_y: int, cursor_x: int,
                     view_width: int, status: str = "") -> None:
        """Diff against the last frame and write only changed rows."""
        num_rows = self.height
        lines = (lines + [""] * num_rows)[:num_rows]
        if self._last_lines is None or len(self._last_lines) != len(lines):
            print(self.term.home + self.term.clear, end='')
            self._last_lines = [None] * len(lines)
            self._last_status = None

        for y, line in enumerate(lines):
            shown = line[:view_width].ljust(view_width)
            if self._last_lines[y] != shown:
                print(self.term.move(y, 0) + shown, end='')
                self._last_lines[y] = shown

        status_text = status[:self.term.width].ljust(self.term.width)
        if status_text != self._last_status:
            print(self.term.move(self.term.height - 1, 0) + self.term.reverse + status_text
                  + self.term.normal, end='')
            self._last_status = status_text

        print(self.term.move(cursor_y, cursor_x) + self.term.normal_cursor, end='', flush=True)

    def draw_error_message(self, message1: str, message2: str = ""):
        """Draw a boxed error message in the center of the screen."""
        print(self.term.home + self.term.clear, end='')
        center_y = self.term.height // 2
        box_width = max(len(message1), len(message2)) + 4
        left = max(0, (self.term.width - box_width) // 2)

        rows = ["╔" + "═" * (box_width - 2) + "╗",
                "║ " + message1.center(box_width - 4) + " ║"]
        if message2:
            rows.append("║ " + message2.center(box_width - 4) + " ║")
        rows.append("╚" + "═" * (box_width - 2) + "╝")
        for i, row in enumerate(rows):
            print(self.term.move(center_y - 2 + i, left) + row, end='')
        self.invalidate_frame()
        sys.stdout.flush()

    def get_key(self, timeout=None):
        """Get a single key token, or None if timeout expires first.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)
        """
        if self._curtsies_input is None:
            return None
        if timeout is not None:
            ready, _, _ = select.select([sys.stdin], [], [], float(timeout))
            if not ready:
                return None
        return str(next(self._curtsies_input))

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - 1
