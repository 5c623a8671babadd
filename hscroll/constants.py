"""Constants and defaults for the hscroll engine and viewer."""

import sys


class ScrollConstants:
    """Central configuration constants for scrolling."""

    # Horizontal scrolling
    DEFAULT_AUTO_SCROLL_STEP = 8  # Columns nudged when the caret leaves the band
    UNBOUNDED_OFFSET = sys.maxsize  # max_scroll_offset when empty columns are unbounded

    # Vertical scrolling
    CONTEXT_LINES = 2  # Overlap kept when paging by a screenful

    # Viewer
    MIN_TERMINAL_WIDTH = 20  # Narrower terminals show an error box instead
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize
    CONFIG_APP_NAME = "hscroll"
    CONFIG_FILE_NAME = "config.json"

    # Status messages
    TERMINAL_TOO_NARROW_MESSAGE = "Terminal too narrow! Need at least {} columns."
    CURRENT_WIDTH_MESSAGE = "Current width: {} columns."
