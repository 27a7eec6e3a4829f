"""Table cells for one task row."""

from datetime import datetime, tzinfo
from typing import List, Optional

from core import Task, due_display, is_due_today, is_overdue, sanitize
from .catalog import Catalog
from .ports import Cell

HEADERS = ("ID", "DueDate", "Pri", "Project", "Content")
PROJECT_WIDTH = 16


def due_style(task: Task, now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> str:
    if is_overdue(task.due, now=now, tz=tz):
        return "due.overdue"
    if is_due_today(task.due, now=now, tz=tz):
        return "due.today"
    return ""


def task_cells(task: Task, catalog: Catalog, now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> List[Cell]:
    priority = task.priority_level
    return [
        Cell(str(task.id)),
        Cell(due_display(task.due, tz=tz), due_style(task, now=now, tz=tz)),
        Cell(priority.label, priority.style),
        Cell(catalog.project_name(task.project_id)[:PROJECT_WIDTH]),
        Cell(sanitize(task.content)),
    ]


__all__ = ["HEADERS", "PROJECT_WIDTH", "Cell", "due_style", "task_cells"]
