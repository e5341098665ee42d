"""red CLI entry point.

Allows running via `python -m red` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .version import get_version_string

USAGE = """\
Usage: red [FILE]

View FILE in the terminal. Without FILE an empty document is shown.

Keys:
    Arrow keys          Move cursor
    Home / End          Start / end of line
    PageUp / PageDown   Move one screen up / down
    Ctrl-Q              Quit
"""


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Very small arg parsing: version, help, and an optional filename
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] in ("--help", "-h"):
        print(USAGE, end='')
        return 0

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .settings import load_settings
    from .terminal import FatalTerminalError

    editor = Editor(settings=load_settings())
    if args:
        editor.load_file(args[0])
    try:
        editor.run()
    except FatalTerminalError as e:
        print(f"red: terminal error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
