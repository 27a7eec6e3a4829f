"""User intents the UI can dispatch, independent of the input event type."""

from dataclasses import dataclass
from enum import Enum


class CommandKind(Enum):
    HELP = "help"
    DETAIL = "detail"
    QUICK_ADD = "quick_add"
    FILTER = "filter"
    EDIT_CONTENT = "edit_content"
    EDIT_DUE = "edit_due"
    MOVE_PROJECT = "move_project"
    REFRESH = "refresh"
    CLOSE = "close"
    DELETE = "delete"
    REOPEN_LAST = "reopen_last"
    SET_PRIORITY = "set_priority"
    CURSOR_UP = "cursor_up"
    CURSOR_DOWN = "cursor_down"
    QUIT = "quit"


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    value: int = 0  # displayed priority level for SET_PRIORITY


__all__ = ["Command", "CommandKind"]
