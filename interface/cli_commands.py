"""Command handlers behind the argparse subcommands."""

from typing import List, Sequence

from prompt_toolkit import prompt

import config
from application.ports import Cell
from application.rows import HEADERS
from application.session import open_session
from core import TodoistError
from infrastructure.todoist_api import TodoistClient, Transport
from interface.tui_themes import DEFAULT_THEME
from util.columns import column_widths, pad_display

TERMINAL_WIDTH = 120


class PrintedTable:
    """Row sink that collects rows and prints them as a plain table."""

    def __init__(self) -> None:
        self.filter_label = ""
        self.rows: List[List[str]] = []

    def reset(self, filter_label: str) -> None:
        self.filter_label = filter_label
        self.rows = []

    def render_row(self, row: int, cells: Sequence[Cell]) -> None:
        texts = [cell.text for cell in cells]
        if row < len(self.rows):
            self.rows[row] = texts
        else:
            self.rows.append(texts)

    def remove_row(self, row: int) -> None:
        if 0 <= row < len(self.rows):
            del self.rows[row]

    def lines(self, width: int = TERMINAL_WIDTH) -> List[str]:
        widths = column_widths(HEADERS, self.rows, width)
        out = []
        for texts in [list(HEADERS)] + self.rows:
            cols = [pad_display(text, w) for text, w in zip(texts, widths)]
            out.append(" ".join(cols).rstrip())
        return out


class ListConfigStore(config.UserConfigStore):
    """One-off listings do not replace the filter the TUI restores."""

    def save_filter(self, text: str) -> None:
        return None


def ensure_token() -> str:
    token = config.get_user_token()
    if token:
        return token
    token = prompt("Todoist API token: ", is_password=True).strip()
    if token:
        config.set_user_token(token)
    return token


def _fail(message: str) -> int:
    print(f"ERROR - {message}")
    return 1


def cmd_tui(args) -> int:
    from interface.tui_app import TodoistTUI

    if not ensure_token():
        return _fail("API token required (run `todoist auth TOKEN`)")
    initial_filter = getattr(args, "filter", None) or config.get_filter()
    try:
        tui = TodoistTUI(
            lambda sink: open_session(config.get_user_token, sink, config.UserConfigStore()),
            initial_filter=initial_filter,
            theme=getattr(args, "theme", None) or DEFAULT_THEME,
        )
    except TodoistError as exc:
        return _fail(str(exc))
    tui.run()
    return 0


def cmd_list(args) -> int:
    if not ensure_token():
        return _fail("API token required (run `todoist auth TOKEN`)")
    table = PrintedTable()
    try:
        session = open_session(config.get_user_token, table, ListConfigStore())
        session.store.reload(getattr(args, "filter", None) or config.get_filter())
    except TodoistError as exc:
        return _fail(str(exc))
    print(f"[{table.filter_label}] {len(table.rows)} tasks")
    for line in table.lines():
        print(line)
    return 0


def cmd_add(args) -> int:
    if not ensure_token():
        return _fail("API token required (run `todoist auth TOKEN`)")
    text = " ".join(args.text).strip()
    if not text:
        return _fail("nothing to add")
    try:
        TodoistClient(Transport(config.get_user_token)).quick_add_task(text)
    except TodoistError as exc:
        return _fail(str(exc))
    print("Task added")
    return 0


def cmd_auth(args) -> int:
    token = (getattr(args, "token", "") or "").strip()
    config.set_user_token(token)
    if token:
        print(f"Token saved to {config.USER_CONFIG_PATH}")
    else:
        print("Token cleared")
    return 0


__all__ = [
    "PrintedTable",
    "ListConfigStore",
    "ensure_token",
    "cmd_tui",
    "cmd_list",
    "cmd_add",
    "cmd_auth",
]
