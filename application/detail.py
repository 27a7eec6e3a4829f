from datetime import tzinfo
from typing import Iterable, Optional

from core import Comment, Task, annotate, due_display
from .catalog import Catalog

HELP_TEXT = """\
       q  quit
       ?  help

       f  filter list
       r  refresh list

       a  quick add
       v  task detail
   enter  task detail

 shift+c  close task
 shift+d  delete task
       u  reopen last closed task

       e  edit text
       p  move project
       d  set due date
     1-4  set priority P1 to P4"""


def detail_text(task: Task, catalog: Catalog, comments: Iterable[Comment] = (), tz: Optional[tzinfo] = None) -> str:
    lines = [
        f"Project:  {catalog.project_name(task.project_id)}",
        f"DueDate:  {due_display(task.due, tz=tz)}",
        f"Labels:   {','.join(catalog.label_names(task.label_ids))}",
        f"Priority: {task.priority_level.label}",
        f"URL:      {task.url}",
        "",
        "",
        annotate(task.content),
    ]
    comments = list(comments)
    if comments:
        lines.extend(["", "", "--"])
        for comment in comments:
            lines.append(comment.posted)
            lines.append(annotate(comment.content))
    return "\n".join(lines)


__all__ = ["HELP_TEXT", "detail_text"]
