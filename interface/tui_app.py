#!/usr/bin/env python3
"""TUI application - TodoistTUI class."""

import asyncio
import logging
import os
from typing import Any, Callable, List, Optional, Sequence, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import ConditionalContainer, DynamicContainer, HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.widgets import Frame, TextArea

from application.commands import Command, CommandKind
from application.detail import HELP_TEXT, detail_text
from application.ports import Cell
from application.session import Session
from core import Task, TodoistError

from interface.edit_handlers import current_row
from interface.keymap import KEYMAP
from interface.status_line import StatusLine
from interface.tui_editing import EditingMixin
from interface.tui_status import build_status_text
from interface.tui_table import build_table_text
from interface.tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("todoist.ui")

SessionFactory = Callable[["TodoistTUI"], Session]


class TodoistTUI(EditingMixin):
    """Full-screen task table; also the row sink of the task store."""

    def __init__(self, session_factory: SessionFactory, initial_filter: str = "", theme: str = DEFAULT_THEME):
        self.app: Optional[Application] = None
        self.rows: List[List[Cell]] = []
        self.selected_index = 0
        self.list_view_offset = 0

        # Detail/help popup
        self.popup_mode = False
        self.popup_title = ""
        self.popup_text = ""
        # Modal y/n confirmation (delete)
        self.confirm_mode = False
        self.confirm_message = ""
        self._confirm_on_yes: Optional[Callable[[], Any]] = None
        # Input field
        self.editing_mode = False
        self.edit_context: Optional[str] = None
        self.edit_title = ""
        self.edit_row: Optional[int] = None
        self.edit_generation = 0
        self.edit_field = TextArea(multiline=False, accept_handler=self._accept_edit, style="class:input")
        self.edit_buffer = self.edit_field.buffer

        self._pending_timers: List[Tuple[float, Callable[[], None]]] = []
        self.status = StatusLine(self._schedule, self.force_render)
        self.style = build_style(theme)
        self._build_layout()

        self.session = session_factory(self)
        self.store = self.session.store
        self.run_guarded(lambda: self.store.reload(initial_filter))

        self.app = Application(
            layout=Layout(self.root, focused_element=self.table_window),
            key_bindings=self._build_key_bindings(),
            style=self.style,
            full_screen=True,
        )
        # Escape must not wait for a possible ANSI sequence.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("TODOIST_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _build_layout(self) -> None:
        self.table_window = Window(
            content=FormattedTextControl(self.get_table_text, focusable=True, show_cursor=False),
            always_hide_cursor=True,
            wrap_lines=False,
        )
        self.popup_window = Window(
            content=FormattedTextControl(self.get_popup_text),
            always_hide_cursor=True,
            wrap_lines=True,
        )
        body = DynamicContainer(lambda: self.popup_window if self.popup_mode else self.table_window)
        input_box = ConditionalContainer(
            Frame(self.edit_field, title=lambda: f" {self.edit_title} "),
            filter=Condition(lambda: self.editing_mode),
        )
        confirm_bar = ConditionalContainer(
            Window(content=FormattedTextControl(self.get_confirm_text), height=1),
            filter=Condition(lambda: self.confirm_mode),
        )
        status_bar = Window(content=FormattedTextControl(self.get_status_text), height=1, always_hide_cursor=True)
        self.root = HSplit([body, input_box, confirm_bar, status_bar])

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        browsing = Condition(lambda: not (self.editing_mode or self.confirm_mode or self.popup_mode))
        editing = Condition(lambda: self.editing_mode)
        confirming = Condition(lambda: self.confirm_mode and not self.editing_mode)
        popup_active = Condition(lambda: self.popup_mode and not self.editing_mode)

        for key, command in KEYMAP.items():
            kb.add(key, filter=browsing)(self._command_handler(command))

        @kb.add("escape", eager=True, filter=editing)
        def _(event):
            self.cancel_edit()

        @kb.add("y", filter=confirming)
        def _(event):
            self.answer_confirm(True)

        @kb.add("n", filter=confirming)
        @kb.add("escape", filter=confirming)
        def _(event):
            self.answer_confirm(False)

        @kb.add("escape", filter=popup_active)
        @kb.add("enter", filter=popup_active)
        @kb.add("q", filter=popup_active)
        @kb.add("v", filter=popup_active)
        def _(event):
            self.close_popup()

        @kb.add("c-c")
        def _(event):
            event.app.exit()

        return kb

    def _command_handler(self, command: Command):
        def handler(event):
            self.run_guarded(lambda: self.dispatch(command))

        return handler

    # ------------------------------------------------------------------
    # Row sink
    # ------------------------------------------------------------------

    def reset(self, filter_label: str) -> None:
        self.rows = []
        self.selected_index = 0
        self.list_view_offset = 0
        self.status.set_persistent(filter_label)

    def render_row(self, row: int, cells: Sequence[Cell]) -> None:
        if row < len(self.rows):
            self.rows[row] = list(cells)
        else:
            self.rows.append(list(cells))
        self.force_render()

    def remove_row(self, row: int) -> None:
        if 0 <= row < len(self.rows):
            del self.rows[row]
        if self.selected_index >= len(self.rows):
            self.selected_index = max(0, len(self.rows) - 1)
        self.force_render()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def dispatch(self, command: Command) -> None:
        kind = command.kind
        if kind is CommandKind.HELP:
            self.show_popup("Help", HELP_TEXT)
        elif kind is CommandKind.DETAIL:
            self.show_detail()
        elif kind is CommandKind.QUICK_ADD:
            self.start_editing("quick_add", "Quick add", "")
        elif kind is CommandKind.FILTER:
            self.start_editing("filter", "Quick filter", self.store.filter_text)
        elif kind is CommandKind.EDIT_CONTENT:
            row, task = self.selection()
            self.start_editing("content", "Edit text", task.content, row)
        elif kind is CommandKind.EDIT_DUE:
            row, task = self.selection()
            self.start_editing("due", "Edit due date", task.due.string, row)
        elif kind is CommandKind.MOVE_PROJECT:
            row, task = self.selection()
            self.start_editing("project", "Move project", self.session.catalog.project_name(task.project_id), row)
        elif kind is CommandKind.REFRESH:
            self.session.reload_catalog()
            self.store.refresh()
        elif kind is CommandKind.CLOSE:
            row, _ = self.selection()
            self.store.close(row)
            self.status.show("Task closed, u to reopen", ttl=3)
        elif kind is CommandKind.DELETE:
            self.confirm_delete()
        elif kind is CommandKind.REOPEN_LAST:
            task_id = self.store.reopen_last_closed()
            self.status.show(f"Reopened {task_id}", ttl=3)
        elif kind is CommandKind.SET_PRIORITY:
            row, _ = self.selection()
            self.store.set_priority(row, command.value)
        elif kind is CommandKind.CURSOR_UP:
            self.move_selection(-1)
        elif kind is CommandKind.CURSOR_DOWN:
            self.move_selection(1)
        elif kind is CommandKind.QUIT:
            self.exit()
        else:
            raise ValueError(f"Unhandled command: {kind}")

    def run_guarded(self, action: Callable[[], Any]) -> None:
        """Run a store call; API and validation errors go to the status line."""
        try:
            action()
        except TodoistError as exc:
            logger.warning("%s", exc)
            self.status.error(exc)
        self.force_render()

    def selection(self) -> Tuple[int, Task]:
        row = self.selected_index
        return row, self.store.task_at(row)

    def move_selection(self, delta: int) -> None:
        if not self.rows:
            self.selected_index = 0
            return
        self.selected_index = max(0, min(len(self.rows) - 1, self.selected_index + delta))

    def show_detail(self) -> None:
        _, task = self.selection()
        comments = []
        try:
            comments = self.session.client.list_comments(task.id)
        except TodoistError as exc:
            logger.warning("comments unavailable for %s: %s", task.id, exc)
            self.status.error(exc)
        self.show_popup("Detail", detail_text(task, self.session.catalog, comments, tz=self.store.tz))

    def show_popup(self, title: str, text: str) -> None:
        self.popup_title = title
        self.popup_text = text
        self.popup_mode = True

    def close_popup(self) -> None:
        self.popup_mode = False
        self.popup_title = ""
        self.popup_text = ""

    def confirm_delete(self) -> None:
        row, task = self.selection()
        generation = self.store.generation
        self.confirm_message = f"Are you sure you want to delete `{task.content}`? [y/n]"
        self._confirm_on_yes = lambda: self.store.delete(current_row(self, row, generation))
        self.confirm_mode = True

    def answer_confirm(self, accepted: bool) -> None:
        action = self._confirm_on_yes
        self.confirm_mode = False
        self.confirm_message = ""
        self._confirm_on_yes = None
        if accepted and action:
            self.run_guarded(action)

    def _accept_edit(self, buffer: Buffer) -> bool:
        self.save_edit()
        return False

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def get_table_text(self) -> FormattedText:
        return build_table_text(self)

    def get_status_text(self) -> FormattedText:
        return build_status_text(self)

    def get_popup_text(self) -> FormattedText:
        return FormattedText(
            [
                ("class:popup.title", f" {self.popup_title} \n\n"),
                ("class:text", self.popup_text),
            ]
        )

    def get_confirm_text(self) -> FormattedText:
        return FormattedText([("class:status.error", f" {self.confirm_message} ")])

    def force_render(self) -> None:
        if self.app:
            self.app.invalidate()

    @staticmethod
    def get_terminal_width() -> int:
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    @staticmethod
    def get_terminal_height() -> int:
        try:
            return os.get_terminal_size().lines
        except (AttributeError, ValueError, OSError):
            return 40

    # ------------------------------------------------------------------
    # Status line timers
    # ------------------------------------------------------------------

    def _schedule(self, delay: float, callback: Callable[[], None]):
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Not running yet; started from pre_run.
            self._pending_timers.append((delay, callback))
            return None
        return loop.call_later(delay, callback)

    def _start_pending_timers(self) -> None:
        pending, self._pending_timers = self._pending_timers, []
        for delay, callback in pending:
            self._schedule(delay, callback)

    def run(self) -> None:
        self.app.run(pre_run=self._start_pending_timers)

    def exit(self) -> None:
        if self.app:
            self.app.exit()


__all__ = ["TodoistTUI"]
