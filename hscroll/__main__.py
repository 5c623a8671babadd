"""hscroll CLI entry point.

Allows running via `python -m hscroll` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys

from .version import get_version_string


def main() -> None:
    args = sys.argv[1:]
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return

    # Lazy import to avoid importing terminal deps for --version
    from .config import ConfigStore
    from .viewer import Viewer

    filename = args[0] if args else None
    viewer = Viewer(config=ConfigStore().load(filename))
    if filename:
        viewer.load_file(filename)
    viewer.run()


if __name__ == "__main__":  # pragma: no cover
    main()
