#!/usr/bin/env python3
"""Entry point: logging setup and subcommand dispatch."""

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from interface import cli_commands
from interface.cli_parser import build_parser
from interface.tui_themes import DEFAULT_THEME, THEMES

LOG_PATH = Path.home() / ".cache" / "todoist" / "todoist.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool, path: Path = LOG_PATH) -> None:
    """Attach handlers to the ``todoist`` logger tree.

    Nothing is written to the terminal: the TUI owns the screen.
    """
    root = logging.getLogger("todoist")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    if not debug:
        root.addHandler(logging.NullHandler())
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser(cli_commands, THEMES, DEFAULT_THEME)
    args = parser.parse_args(argv)
    configure_logging(args.debug)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
