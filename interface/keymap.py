from typing import Dict

from application.commands import Command, CommandKind

KEYMAP: Dict[str, Command] = {
    "?": Command(CommandKind.HELP),
    "v": Command(CommandKind.DETAIL),
    "enter": Command(CommandKind.DETAIL),
    "a": Command(CommandKind.QUICK_ADD),
    "f": Command(CommandKind.FILTER),
    "e": Command(CommandKind.EDIT_CONTENT),
    "d": Command(CommandKind.EDIT_DUE),
    "p": Command(CommandKind.MOVE_PROJECT),
    "r": Command(CommandKind.REFRESH),
    "C": Command(CommandKind.CLOSE),
    "D": Command(CommandKind.DELETE),
    "u": Command(CommandKind.REOPEN_LAST),
    "1": Command(CommandKind.SET_PRIORITY, 1),
    "2": Command(CommandKind.SET_PRIORITY, 2),
    "3": Command(CommandKind.SET_PRIORITY, 3),
    "4": Command(CommandKind.SET_PRIORITY, 4),
    "up": Command(CommandKind.CURSOR_UP),
    "k": Command(CommandKind.CURSOR_UP),
    "down": Command(CommandKind.CURSOR_DOWN),
    "j": Command(CommandKind.CURSOR_DOWN),
    "q": Command(CommandKind.QUIT),
}

__all__ = ["KEYMAP"]
