"""Submit handlers for the TUI input field, keyed by edit context."""

from typing import Callable, Dict, Optional

from core import ValidationError


def current_row(tui, row: Optional[int], generation: int) -> int:
    if row is None or generation != tui.store.generation:
        raise ValidationError("Task list changed, select the task again")
    return row


def handle_quick_add(tui, value: str, row: Optional[int], generation: int) -> None:
    if not value:
        return
    tui.store.quick_add(value)
    tui.status.show("Task added", ttl=2)


def handle_filter(tui, value: str, row: Optional[int], generation: int) -> None:
    tui.store.reload(value)


def handle_content(tui, value: str, row: Optional[int], generation: int) -> None:
    if not value:
        return
    tui.store.set_content(current_row(tui, row, generation), value)


def handle_due(tui, value: str, row: Optional[int], generation: int) -> None:
    tui.store.set_due_string(current_row(tui, row, generation), value)


def handle_project(tui, value: str, row: Optional[int], generation: int) -> None:
    tui.store.set_project_by_name(current_row(tui, row, generation), value)


EDIT_HANDLERS: Dict[str, Callable[..., None]] = {
    "quick_add": handle_quick_add,
    "filter": handle_filter,
    "content": handle_content,
    "due": handle_due,
    "project": handle_project,
}

__all__ = [
    "EDIT_HANDLERS",
    "current_row",
    "handle_quick_add",
    "handle_filter",
    "handle_content",
    "handle_due",
    "handle_project",
]
