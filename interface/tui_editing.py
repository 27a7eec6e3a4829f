"""Editing mode mixin for TUI."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from prompt_toolkit.application import Application
    from prompt_toolkit.buffer import Buffer
    from prompt_toolkit.layout import Container

    from application.task_store import TaskStore


class EditingMixin:
    """Mixin providing the single-line input field used by every prompt."""

    editing_mode: bool
    edit_context: Optional[str]
    edit_title: str
    edit_row: Optional[int]
    edit_generation: int
    edit_buffer: "Buffer"
    edit_field: "Container"
    table_window: "Container"
    app: Optional["Application"]
    store: "TaskStore"

    def start_editing(self, context: str, title: str, current_value: str, row: Optional[int] = None) -> None:
        """Open the input field.

        Args:
            context: What is being edited ('quick_add', 'filter', 'content', 'due', 'project')
            title: Frame title shown above the field
            current_value: Initial text
            row: Task row the edit applies to, if any
        """
        self.editing_mode = True
        self.edit_context = context
        self.edit_title = title
        self.edit_row = row
        self.edit_generation = self.store.generation
        self.edit_buffer.text = current_value
        self.edit_buffer.cursor_position = len(current_value)
        if getattr(self, "app", None):
            self.app.layout.focus(self.edit_field)

    def save_edit(self) -> None:
        from interface.edit_handlers import EDIT_HANDLERS

        if not self.editing_mode:
            return
        context = self.edit_context or ""
        row = self.edit_row
        generation = self.edit_generation
        new_value = self.edit_buffer.text.strip()
        self.cancel_edit()
        handler = EDIT_HANDLERS.get(context)
        if handler is None:
            return
        self.run_guarded(lambda: handler(self, new_value, row, generation))

    def cancel_edit(self) -> None:
        self.editing_mode = False
        self.edit_context = None
        self.edit_row = None
        self.edit_buffer.text = ""
        if getattr(self, "app", None):
            self.app.layout.focus(self.table_window)


__all__ = ["EditingMixin"]
