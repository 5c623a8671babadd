"""Read-only geometry queries over a viewport host."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import ScrollConfig
    from .host import ViewportHost


def current_column(host: 'ViewportHost') -> int:
    return max(0, host.caret_column())


def is_truncated(host: 'ViewportHost', config: 'ScrollConfig', wrap_requested: bool = False) -> bool:
    """Return True when lines in this viewport are clipped, not wrapped.

    A viewport narrower than its screen truncates when the configuration
    asks for it, even if the host itself is set to wrap, unless wrapping
    was explicitly requested for the viewport.
    """
    if host.truncate_lines:
        return True
    if wrap_requested:
        return False
    return bool(config.truncate_partial_width and host.is_partial_width())
