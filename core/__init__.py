from .errors import DecodeError, ResolutionError, TodoistError, TransportError, ValidationError
from .priority import Priority
from .task import Due, Task
from .label import Label
from .project import NOT_FOUND, Project
from .comment import Comment
from .due import due_display, due_instant, is_due_today, is_overdue
from .links import annotate, sanitize

__all__ = [
    "Task",
    "Due",
    "Label",
    "Project",
    "Comment",
    "Priority",
    "NOT_FOUND",
    # Errors
    "TodoistError",
    "TransportError",
    "DecodeError",
    "ResolutionError",
    "ValidationError",
    # Due dates
    "due_instant",
    "due_display",
    "is_overdue",
    "is_due_today",
    # Links
    "sanitize",
    "annotate",
]
