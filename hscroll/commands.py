"""Command pattern implementation for scroll and motion commands."""

from abc import ABC, abstractmethod
from contextlib import ExitStack
from typing import Any, Callable, ContextManager, Dict, List, Optional, TYPE_CHECKING

from .geometry import current_column
from .goal_column import EndOfLineMotion, GoalColumnAware
from .offsets import max_scroll_offset, recenter_offset, visible_band

if TYPE_CHECKING:
    from .host import ViewportHost
    from .session import ScrollSession

AroundHook = Callable[['ScrollSession'], ContextManager[None]]


class ScrollCommand(ABC):
    """Base class for commands run by the controller."""

    @abstractmethod
    def execute(self, session: 'ScrollSession', arg: Any = None) -> None:
        """Execute the command.

        Args:
            session: Scroll session of the viewport the command runs in
            arg: Optional numeric argument (command specific)
        """
        pass


def _recenter_on(host: 'ViewportHost', column: int, session: 'ScrollSession') -> int:
    return recenter_offset(column, host.display_width, host.line_end_column(),
                           session.config.max_empty_visible)


def _caret_in_band(host: 'ViewportHost') -> bool:
    left, right = visible_band(host.get_horizontal_offset(), host.display_width,
                               host.is_at_end_of_line())
    return left <= current_column(host) <= right


class VerticalScrollCommand(GoalColumnAware, ScrollCommand):
    """Scroll by lines or pages, then restore the goal column.

    An argument of 0 jumps to the document boundary instead.
    """

    backward: bool = False

    def execute(self, session, arg=None):
        host = session.host
        session.update_goal_column()
        if arg == 0:
            self._jump(host)
        else:
            lines = host.page_lines() if arg is None else arg
            host.scroll_lines(-lines if self.backward else lines)
        session.tracker.move_caret(host)

    @abstractmethod
    def _jump(self, host: 'ViewportHost'):
        pass


class ScrollVerticalDownCommand(VerticalScrollCommand):
    """Text moves down: earlier lines come into view."""

    backward = True

    def _jump(self, host):
        host.jump_to_document_start()


class ScrollVerticalUpCommand(VerticalScrollCommand):
    """Text moves up: later lines come into view."""

    def _jump(self, host):
        host.jump_to_document_end()


class HorizontalScrollCommand(ScrollCommand):
    """Scroll columns in a truncated viewport, dragging the caret along."""

    toward_origin: bool = False

    def execute(self, session, arg=None):
        host = session.host
        if not session.is_truncated():
            return
        if arg == 0:
            self._snap(host, session)
            return

        offset = host.get_horizontal_offset()
        width = host.display_width
        if arg is None:
            # One band's worth: the band is a column narrower away from the origin
            left, right = visible_band(offset, width)
            amount = right - left + 1
            target = offset - amount if self.toward_origin else offset + amount
            target = min(target, max_scroll_offset(width, host.line_end_column(),
                                                   session.config.max_empty_visible))
            target = max(0, target)
            if target == 1:
                target = 0
            host.set_horizontal_offset(target)
        else:
            target = max(0, offset - arg if self.toward_origin else offset + arg)
            host.scroll_columns(target - offset)
        self._drag_caret(host)

    def _drag_caret(self, host: 'ViewportHost') -> None:
        if _caret_in_band(host):
            return
        left, right = visible_band(host.get_horizontal_offset(), host.display_width)
        column = current_column(host)
        host.move_caret_to_column(left if column < left else right)

    @abstractmethod
    def _snap(self, host: 'ViewportHost', session: 'ScrollSession'):
        pass


class ScrollHorizontalRightCommand(HorizontalScrollCommand):
    """Text moves right: columns nearer the line start come into view."""

    toward_origin = True

    def _snap(self, host, session):
        host.set_horizontal_offset(0)
        host.jump_to_line_start()


class ScrollHorizontalLeftCommand(HorizontalScrollCommand):
    """Text moves left: columns further along the line come into view."""

    def _snap(self, host, session):
        host.set_horizontal_offset(_recenter_on(host, host.line_end_column(), session))
        host.jump_to_line_end()


class RecentreOnCaretCommand(ScrollCommand):
    def execute(self, session, arg=None):
        host = session.host
        host.set_horizontal_offset(_recenter_on(host, current_column(host), session))


class ToggleTruncationCommand(ScrollCommand):
    """Switch between truncated and wrapped lines.

    A positive argument (or True) turns truncation on, zero or less (or
    False) turns it off. Without an argument, a wrapped viewport with no
    horizontal offset counts as "off" and everything else as "on".
    Turning truncation off also wins over the partial-width rule for this
    viewport until it is turned back on.
    """

    def execute(self, session, arg=None):
        host = session.host
        if arg is None:
            enable = not (session.is_truncated() or host.get_horizontal_offset() != 0)
        else:
            enable = arg > 0

        host.truncate_lines = enable
        session.wrap_requested = not enable
        if enable:
            offset = host.get_horizontal_offset()
            if not _caret_in_band(host):
                offset = _recenter_on(host, current_column(host), session)
        else:
            offset = 0
        host.set_horizontal_offset(offset)
        host.invalidate()


class SetGoalColumnCommand(ScrollCommand):
    """Pin the goal column at the caret; any argument unpins it."""

    def execute(self, session, arg=None):
        if arg is None:
            session.tracker.persistent = current_column(session.host)
        else:
            session.tracker.persistent = None


class LineMotionCommand(GoalColumnAware, ScrollCommand):
    """The host's own next/previous line motion."""

    backward: bool = False

    def execute(self, session, arg=None):
        count = 1 if arg is None else arg
        if self.backward:
            session.host.previous_line(count)
        else:
            session.host.next_line(count)


class NextLineCommand(LineMotionCommand):
    pass


class PreviousLineCommand(LineMotionCommand):
    backward = True


class ForwardCharCommand(ScrollCommand):
    def execute(self, session, arg=None):
        host = session.host
        host.move_caret_to_column(host.caret_column() + (1 if arg is None else arg))


class BackwardCharCommand(ScrollCommand):
    def execute(self, session, arg=None):
        host = session.host
        host.move_caret_to_column(max(0, host.caret_column() - (1 if arg is None else arg)))


class BeginningOfLineCommand(ScrollCommand):
    def execute(self, session, arg=None):
        session.host.jump_to_line_start()


class EndOfLineCommand(EndOfLineMotion, ScrollCommand):
    def execute(self, session, arg=None):
        session.host.jump_to_line_end()


class InsertTextCommand(ScrollCommand):
    """Insert arg (a string) at the caret. Needs a host with insert_text."""

    def execute(self, session, arg=None):
        if arg:
            session.host.insert_text(str(arg))


# Command names
SCROLL_VERTICAL_DOWN = 'scroll-vertical-down'
SCROLL_VERTICAL_UP = 'scroll-vertical-up'
SCROLL_HORIZONTAL_RIGHT = 'scroll-horizontal-right'
SCROLL_HORIZONTAL_LEFT = 'scroll-horizontal-left'
RECENTRE_ON_CARET = 'recentre-on-caret'
TOGGLE_TRUNCATION = 'toggle-truncation'
SET_GOAL_COLUMN = 'set-goal-column'
NEXT_LINE = 'next-line'
PREVIOUS_LINE = 'previous-line'
FORWARD_CHAR = 'forward-char'
BACKWARD_CHAR = 'backward-char'
BEGINNING_OF_LINE = 'beginning-of-line'
END_OF_LINE = 'end-of-line'
INSERT_CHAR = 'insert-char'


class CommandRegistry:
    """Registry mapping command names to commands and their around-hooks."""

    def __init__(self):
        self._commands: Dict[str, ScrollCommand] = {}
        self._around_hooks: Dict[str, List[AroundHook]] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command names."""
        # Scrolling
        self.register(SCROLL_VERTICAL_DOWN, ScrollVerticalDownCommand())
        self.register(SCROLL_VERTICAL_UP, ScrollVerticalUpCommand())
        self.register(SCROLL_HORIZONTAL_RIGHT, ScrollHorizontalRightCommand())
        self.register(SCROLL_HORIZONTAL_LEFT, ScrollHorizontalLeftCommand())
        self.register(RECENTRE_ON_CARET, RecentreOnCaretCommand())
        self.register(TOGGLE_TRUNCATION, ToggleTruncationCommand())
        self.register(SET_GOAL_COLUMN, SetGoalColumnCommand())

        # Host motions and editing
        self.register(NEXT_LINE, NextLineCommand())
        self.register(PREVIOUS_LINE, PreviousLineCommand())
        self.register(FORWARD_CHAR, ForwardCharCommand())
        self.register(BACKWARD_CHAR, BackwardCharCommand())
        self.register(BEGINNING_OF_LINE, BeginningOfLineCommand())
        self.register(END_OF_LINE, EndOfLineCommand())
        self.register(INSERT_CHAR, InsertTextCommand())

    def register(self, name: str, command: ScrollCommand):
        """Register a command under a name, replacing any previous one."""
        self._commands[name] = command

    def get_command(self, name: str) -> Optional[ScrollCommand]:
        return self._commands.get(name)

    def add_around_hook(self, name: str, hook: AroundHook):
        """Wrap every run of the named command in hook(session).

        The hook is a context manager factory; its exit runs on every path
        out of the command, including exceptions.
        """
        self._around_hooks.setdefault(name, []).append(hook)

    def invoke(self, session: 'ScrollSession', name: str, command: ScrollCommand, arg: Any = None) -> None:
        with ExitStack() as stack:
            for hook in self._around_hooks.get(name, []):
                stack.enter_context(hook(session))
            command.execute(session, arg)
