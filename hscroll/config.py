"""Scroll configuration and its on-disk store.

Options are read from a JSON file in the user's config directory. The
file holds a "defaults" object and, optionally, per-document objects
keyed by absolute path:

    {
      "defaults": {"auto_scroll_step": 4},
      "documents": {"/home/me/wide.csv": {"max_empty_visible": 0}}
    }

A missing or damaged file falls back to built-in defaults.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import ScrollConstants

logger = logging.getLogger(__name__)


@dataclass
class ScrollConfig:
    """Recognised scrolling options.

    auto_scroll_step: columns nudged when the caret leaves the visible band;
        None disables automatic horizontal scrolling.
    track_goal_column: keep the goal column, not the caret, visible during
        vertical motion chains.
    track_eol: a caret at end of line keeps tracking end of line vertically.
    max_empty_visible: empty columns allowed past end of line; None is unbounded.
    truncate_always: truncation mode given to newly attached viewports.
    truncate_partial_width: truncate viewports narrower than their screen.
    goal_column: persistent goal column, overriding the tracked one.
    """

    auto_scroll_step: Optional[int] = ScrollConstants.DEFAULT_AUTO_SCROLL_STEP
    track_goal_column: bool = True
    track_eol: bool = False
    max_empty_visible: Optional[int] = None
    truncate_always: bool = True
    truncate_partial_width: bool = True
    goal_column: Optional[int] = None


def validate_setting(key: str, value: Any) -> bool:
    """Return True if value is acceptable for the option named key."""
    if key in ('auto_scroll_step', 'max_empty_visible', 'goal_column'):
        if value is None:
            return True
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return value >= 0
    if key in ('track_goal_column', 'track_eol', 'truncate_always', 'truncate_partial_width'):
        return isinstance(value, bool)
    return False


def config_from_dict(data: Dict[str, Any], base: Optional[ScrollConfig] = None) -> ScrollConfig:
    """Build a config from a mapping, skipping unknown or invalid entries."""
    base = base or ScrollConfig()
    known = {f.name for f in fields(ScrollConfig)}
    accepted: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Ignoring unknown scroll option {key!r}")
            continue
        if not validate_setting(key, value):
            logger.warning(f"Ignoring invalid value {value!r} for scroll option {key!r}")
            continue
        accepted[key] = value
    return replace(base, **accepted)


class ConfigStore:
    """Reads scroll options from the platform config directory."""

    def __init__(self, config_file: Optional[Path] = None):
        if config_file is None:
            config_dir = Path(platformdirs.user_config_dir(ScrollConstants.CONFIG_APP_NAME))
            config_file = config_dir / ScrollConstants.CONFIG_FILE_NAME
        self._config_file = config_file
        self._cache: Optional[Dict[str, Any]] = None

    @property
    def path(self) -> Path:
        return self._config_file

    def _load_raw(self) -> Dict[str, Any]:
        """Load the whole file, or an empty dict if it is absent or unreadable."""
        if self._cache is not None:
            return self._cache

        if not self._config_file.exists():
            self._cache = {}
            return self._cache

        try:
            with open(self._config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load scroll config from {self._config_file}: {e}")
            self._cache = {}
            return self._cache

        if not isinstance(data, dict):
            logger.warning("Scroll config has invalid format (not a dict), ignoring")
            data = {}
        self._cache = data
        return self._cache

    def load(self, document_path: Optional[str] = None) -> ScrollConfig:
        """Return the effective config, with per-document overrides applied.

        Args:
            document_path: Path of the document being viewed, if any.

        Returns:
            The defaults from the file merged over built-in defaults, then
            the document's own entries merged over those.
        """
        raw = self._load_raw()
        defaults = raw.get('defaults', {})
        if not isinstance(defaults, dict):
            logger.warning("Scroll config 'defaults' is not a dict, ignoring")
            defaults = {}
        config = config_from_dict(defaults)

        if document_path is None:
            return config

        documents = raw.get('documents', {})
        if not isinstance(documents, dict):
            logger.warning("Scroll config 'documents' is not a dict, ignoring")
            return config
        overrides = documents.get(os.path.abspath(document_path), {})
        if not isinstance(overrides, dict):
            logger.warning(f"Scroll config for {document_path} is not a dict, ignoring")
            return config
        return config_from_dict(overrides, base=config)

    def clear_cache(self) -> None:
        self._cache = None
