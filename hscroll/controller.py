"""Command loop glue: sessions, interception hooks and post-command events."""

import logging
from typing import Any, Callable, List, Optional

from .commands import NEXT_LINE, PREVIOUS_LINE, CommandRegistry
from .config import ScrollConfig
from .goal_column import goal_column_advice
from .host import ViewportHost
from .session import ScrollSession, SessionManager
from .visibility import VisibilityMaintainer

logger = logging.getLogger(__name__)

PostCommandHook = Callable[[ScrollSession], None]


class ScrollController:
    """Runs commands against viewports and keeps them scrolled.

    Each command run goes: around-hooks enter, command executes, hooks
    exit, then every post-command subscriber is called with the session of
    the viewport the command ran in. The visibility maintainer subscribes
    itself at construction.
    """

    def __init__(self, config: Optional[ScrollConfig] = None,
                 registry: Optional[CommandRegistry] = None):
        self.config = config or ScrollConfig()
        self.registry = registry or CommandRegistry()
        self.sessions = SessionManager(self.config)
        self._post_command_hooks: List[PostCommandHook] = []

        for name in (NEXT_LINE, PREVIOUS_LINE):
            self.registry.add_around_hook(name, goal_column_advice)

        self.visibility = VisibilityMaintainer(self.config)
        self.subscribe(self.visibility)

    def subscribe(self, hook: PostCommandHook) -> None:
        """Call hook(session) after every command completes."""
        self._post_command_hooks.append(hook)

    def attach(self, host: ViewportHost) -> ScrollSession:
        """Start managing a viewport, applying the default truncation mode."""
        host.truncate_lines = self.config.truncate_always
        return self.sessions.session_for(host)

    def detach(self, host: ViewportHost) -> None:
        self.sessions.forget(host)

    def execute(self, host: ViewportHost, name: str, arg: Any = None) -> bool:
        """Run the named command in host's viewport.

        Returns:
            True if a command with that name exists and ran
        """
        command = self.registry.get_command(name)
        if command is None:
            logger.debug(f"No command named {name!r}")
            return False

        session = self.sessions.session_for(host)
        session.this_command = command
        try:
            self.registry.invoke(session, name, command, arg)
        finally:
            # Post-command hooks run after failed commands too
            try:
                for hook in self._post_command_hooks:
                    hook(session)
            finally:
                session.last_command = command
                session.this_command = None
        return True
