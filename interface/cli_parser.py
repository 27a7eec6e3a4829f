"""CLI parser construction for the todoist CLI/TUI."""

import argparse
from typing import Any, Mapping


def build_parser(commands: Any, themes: Mapping[str, Any], default_theme: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todoist",
        description="todoist: terminal client for Todoist",
    )
    parser.add_argument("--debug", action="store_true", help="write DEBUG logs to ~/.cache/todoist/todoist.log")

    def add_filter_arg(sp):
        sp.add_argument("--filter", "-f", dest="filter", help="filter query or #project (default: saved filter)")
        return sp

    sub = parser.add_subparsers(dest="command", help="Commands")

    # tui
    tui_p = sub.add_parser("tui", help="Run the TUI (default)")
    tui_p.add_argument("--theme", choices=list(themes.keys()), default=default_theme, help="colour palette")
    add_filter_arg(tui_p)
    tui_p.set_defaults(func=commands.cmd_tui)

    # list
    lp = sub.add_parser("list", help="Print the tasks matching a filter")
    add_filter_arg(lp)
    lp.set_defaults(func=commands.cmd_list)

    # add
    ap = sub.add_parser("add", help="Quick-add a task")
    ap.add_argument("text", nargs="+", help="quick-add text, e.g. 'Buy milk tomorrow #Shopping'")
    ap.set_defaults(func=commands.cmd_add)

    # auth
    au = sub.add_parser("auth", help="Store the API token (no argument clears it)")
    au.add_argument("token", nargs="?", default="")
    au.set_defaults(func=commands.cmd_auth)

    parser.set_defaults(func=commands.cmd_tui, theme=default_theme, filter=None)
    return parser


__all__ = ["build_parser"]
