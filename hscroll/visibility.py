"""Post-command pass that keeps the caret inside the horizontal view."""

import logging
from typing import TYPE_CHECKING

from .config import ScrollConfig
from .geometry import current_column
from .goal_column import GoalColumnAware, resolve
from .offsets import recenter_offset, visible_band

if TYPE_CHECKING:
    from .session import ScrollSession

logger = logging.getLogger(__name__)


class VisibilityMaintainer:
    """Adjusts the horizontal offset after every command.

    Small excursions past an edge nudge the offset by the configured step;
    anything further than one step beyond the band recentres instead, so
    long jumps land in the middle of the view and single-column moves
    don't jitter.
    """

    def __init__(self, config: ScrollConfig):
        self.config = config

    def __call__(self, session: 'ScrollSession') -> None:
        self.maintain(session)

    def reference_column(self, session: 'ScrollSession') -> int:
        """Column that has to stay visible after the command that just ran."""
        host = session.host
        if self.config.track_goal_column and isinstance(session.this_command, GoalColumnAware):
            column = resolve(session.tracker.effective(), host.line_end_column())
            if column is not None:
                return column
        return current_column(host)

    def maintain(self, session: 'ScrollSession') -> None:
        host = session.host
        step = self.config.auto_scroll_step
        if step is None or not session.is_truncated():
            return

        reference = self.reference_column(session)
        offset = host.get_horizontal_offset()
        width = host.display_width
        left, right = visible_band(offset, width, host.is_at_end_of_line())

        if reference < left - step or reference > right + step:
            new_offset = recenter_offset(reference, width, host.line_end_column(),
                                         self.config.max_empty_visible)
            logger.debug(f"Recentring on column {reference}: offset {offset} -> {new_offset}")
            host.set_horizontal_offset(new_offset)
        elif reference > right:
            # The first column is always visible at offset 0, so leaving it costs one more
            host.set_horizontal_offset(offset + (step + 1 if offset == 0 else step))
        elif reference < left:
            amount = step + 1 if offset == step + 1 else step
            host.set_horizontal_offset(max(0, offset - amount))
