"""In-memory mirror of the filtered task list.

Every mutation follows the same discipline: call the writer, then read the
canonical task back with a REST GET and replace the row. The mirror is never
patched from caller-supplied values. Close/delete remove the row instead.
"""

import logging
from datetime import tzinfo
from typing import Callable, List, Optional

from core import NOT_FOUND, Priority, Task, ValidationError
from .catalog import Catalog
from .filter_resolver import DEFAULT_FILTER, resolve_filter
from .ports import ConfigPort, RowSink
from .rows import task_cells
from .tier import TierCache

logger = logging.getLogger("todoist.store")

Writer = Callable[[Task], None]


class TaskStore:
    def __init__(
        self,
        client,
        catalog: Catalog,
        tier: TierCache,
        sink: RowSink,
        config: ConfigPort,
        tz: Optional[tzinfo] = None,
    ) -> None:
        self.client = client
        self.catalog = catalog
        self.tier = tier
        self.sink = sink
        self.config = config
        self.tz = tz
        self.tasks: List[Task] = []
        self.filter_text: str = ""
        # Bumped on every successful reload; row indices from an older
        # generation must not be reused.
        self.generation: int = 0

    def __len__(self) -> int:
        return len(self.tasks)

    def cells(self, task: Task):
        return task_cells(task, self.catalog, tz=self.tz)

    # ------------------------------------------------------------------
    # Reload
    # ------------------------------------------------------------------

    def reload(self, filter_text: str) -> None:
        """Replace the mirror with the tasks matching ``filter_text``.

        Any failure leaves the previous mirror (and what the sink shows)
        untouched.
        """
        text = filter_text or DEFAULT_FILTER
        params = resolve_filter(text, self.tier.is_premium(), self.catalog.projects)
        tasks = list(self.client.list_tasks(params))
        rows = [self.cells(task) for task in tasks]

        self.tasks = tasks
        self.filter_text = text
        self.generation += 1
        logger.info("loaded %d tasks for %r", len(tasks), text)
        self.sink.reset(text)
        for row, cells in enumerate(rows):
            self.sink.render_row(row, cells)

        self._persist(self.config.save_filter, text)

    def _persist(self, save: Callable[..., None], *args) -> None:
        """Write to the user config; a failed write never undoes a remote change."""
        try:
            save(*args)
        except OSError as exc:
            logger.warning("unable to save user config: %s", exc)

    def refresh(self) -> None:
        self.reload(self.filter_text)

    # ------------------------------------------------------------------
    # Row mutations
    # ------------------------------------------------------------------

    def task_at(self, row: int) -> Task:
        if not 0 <= row < len(self.tasks):
            raise ValidationError(f"No task at row {row}")
        return self.tasks[row]

    def apply_mutation(self, row: int, write: Writer, remove: bool = False) -> Task:
        task = self.task_at(row)
        write(task)
        if remove:
            del self.tasks[row]
            self.sink.remove_row(row)
            return task
        fresh = self.client.get_task(task.id)
        self.tasks[row] = fresh
        self.sink.render_row(row, self.cells(fresh))
        return fresh

    def set_content(self, row: int, text: str) -> Task:
        return self.apply_mutation(row, lambda t: self.client.update_task(t.id, {"content": text}))

    def set_due_string(self, row: int, text: str) -> Task:
        return self.apply_mutation(row, lambda t: self.client.update_task(t.id, {"due_string": text}))

    def set_priority(self, row: int, level: int) -> Task:
        try:
            priority = Priority.from_display(level)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc
        return self.apply_mutation(row, lambda t: self.client.update_task(t.id, {"priority": priority.stored}))

    def set_project_by_name(self, row: int, name: str) -> Task:
        project_id = self.catalog.project_id_by_name(name)
        if project_id == NOT_FOUND:
            raise ValidationError(f"Invalid project name: {name}")
        return self.apply_mutation(row, lambda t: self.client.move_task(t.id, {"project_id": project_id}))

    def close(self, row: int) -> Task:
        task = self.apply_mutation(row, lambda t: self.client.close_task(t.id), remove=True)
        self._persist(self.config.save_closed, task.id)
        return task

    def delete(self, row: int) -> Task:
        return self.apply_mutation(row, lambda t: self.client.delete_task(t.id), remove=True)

    def reopen(self, row: int) -> Task:
        return self.apply_mutation(row, lambda t: self.client.reopen_task(t.id))

    # ------------------------------------------------------------------
    # Mutations without a row: the new position is unknown, so reload.
    # ------------------------------------------------------------------

    def quick_add(self, text: str) -> None:
        if not text.strip():
            raise ValidationError("Nothing to add")
        self.client.quick_add_task(text)
        self.refresh()

    def reopen_last_closed(self) -> int:
        task_id = self.config.last_closed()
        if not task_id:
            raise ValidationError("No closed task to reopen")
        self.client.reopen_task(task_id)
        logger.info("reopened task %s", task_id)
        self.refresh()
        return task_id


__all__ = ["TaskStore"]
