"""Goal column tracking across vertical motions.

Moving vertically through short lines clamps the caret column, but the
column the user was aiming for should survive the trip. The tracker
records that column whenever a command outside the vertical-motion chain
ran last, and leaves it untouched while goal-column-aware commands follow
one another.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from .host import ViewportHost
    from .session import ScrollSession


@dataclass(frozen=True)
class FixedColumn:
    column: int


@dataclass(frozen=True)
class TrackEndOfLine:
    """Follow the end of whatever line the caret lands on."""


GoalColumn = Union[FixedColumn, TrackEndOfLine]


class GoalColumnAware:
    """Mixin for commands that keep the goal column of the command before them."""


class EndOfLineMotion:
    """Mixin for the explicit move-to-end-of-line command."""


def resolve(goal: Optional[GoalColumn], line_end_column: int) -> Optional[int]:
    """Turn a goal column into a concrete column on a line."""
    if goal is None:
        return None
    if isinstance(goal, TrackEndOfLine):
        return line_end_column
    return goal.column


class GoalColumnTracker:
    """Per-viewport goal column state."""

    def __init__(self, persistent: Optional[int] = None):
        self.temporary: Optional[GoalColumn] = None
        self.persistent = persistent

    def update(self, last_command, host: 'ViewportHost', track_eol: bool) -> None:
        """Recompute the temporary goal column unless an aware command ran last."""
        if isinstance(last_command, GoalColumnAware):
            return
        if (track_eol and host.is_at_end_of_line()
                and (not host.is_at_beginning_of_line()
                     or isinstance(last_command, EndOfLineMotion))):
            self.temporary = TrackEndOfLine()
        else:
            self.temporary = FixedColumn(max(0, host.caret_column()))

    def effective(self) -> Optional[GoalColumn]:
        if self.persistent is not None:
            return FixedColumn(self.persistent)
        return self.temporary

    def move_caret(self, host: 'ViewportHost') -> None:
        """Put the caret on the effective goal column of its current row."""
        goal = self.effective()
        if goal is None:
            return
        if isinstance(goal, TrackEndOfLine):
            host.jump_to_line_end()
        else:
            host.move_caret_to_column(goal.column)

    @contextmanager
    def lend(self, host: 'ViewportHost') -> Iterator[None]:
        """Install the effective goal column on the host for one native motion."""
        saved = host.goal_column
        host.goal_column = self.effective()
        try:
            yield
        finally:
            host.goal_column = saved


@contextmanager
def goal_column_advice(session: 'ScrollSession') -> Iterator[None]:
    """Around-hook for the host's generic line-motion commands."""
    session.update_goal_column()
    with session.tracker.lend(session.host):
        yield
