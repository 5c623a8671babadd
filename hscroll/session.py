"""Per-viewport session state.

Each viewport gets its own ScrollSession holding the goal column tracker
and the identity of the commands that ran last. Nothing here is global:
the SessionManager belongs to the controller that created it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TYPE_CHECKING

from .config import ScrollConfig
from .geometry import is_truncated
from .goal_column import GoalColumnTracker

if TYPE_CHECKING:
    from .host import ViewportHost


@dataclass
class ScrollSession:
    """Scroll state for one viewport."""

    host: 'ViewportHost'
    config: ScrollConfig
    tracker: GoalColumnTracker = field(default_factory=GoalColumnTracker)
    last_command: Optional[Any] = None  # Command that completed before this one
    this_command: Optional[Any] = None  # Command currently running
    wrap_requested: bool = False  # Set by turning truncation off explicitly

    def update_goal_column(self) -> None:
        self.tracker.update(self.last_command, self.host, self.config.track_eol)

    def is_truncated(self) -> bool:
        return is_truncated(self.host, self.config, self.wrap_requested)


class SessionManager:
    """Maps viewport hosts to their sessions, creating them on first use."""

    def __init__(self, config: ScrollConfig):
        self._config = config
        self._sessions: Dict[int, ScrollSession] = {}

    def session_for(self, host: 'ViewportHost') -> ScrollSession:
        """Get the session for a host.

        Args:
            host: The viewport host

        Returns:
            The host's session, created with a fresh tracker if needed
        """
        session = self._sessions.get(id(host))
        if session is None or session.host is not host:
            session = ScrollSession(
                host=host,
                config=self._config,
                tracker=GoalColumnTracker(persistent=self._config.goal_column),
            )
            self._sessions[id(host)] = session
        return session

    def forget(self, host: 'ViewportHost') -> None:
        """Drop the session of a closed viewport."""
        self._sessions.pop(id(host), None)

    def __len__(self) -> int:
        return len(self._sessions)
