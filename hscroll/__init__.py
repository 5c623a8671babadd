"""hscroll - horizontal scrolling and goal-column tracking for text viewports."""

from .buffer import TextBufferView, CursorPosition
from .config import ScrollConfig
from .controller import ScrollController
from .goal_column import FixedColumn, TrackEndOfLine
from .host import ViewportHost
from .offsets import max_scroll_offset, recenter_offset

__all__ = [
    'ScrollController',
    'ScrollConfig',
    'ViewportHost',
    'TextBufferView',
    'CursorPosition',
    'FixedColumn',
    'TrackEndOfLine',
    'max_scroll_offset',
    'recenter_offset',
]
