from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .priority import Priority


@dataclass(frozen=True)
class Due:
    """Due sub-record of a task.

    At most one of ``date``/``datetime`` is populated; both empty means the
    task has no due date.
    """

    date: str = ""
    datetime: str = ""
    recurring: bool = False
    string: str = ""
    timezone: str = ""

    @property
    def is_set(self) -> bool:
        return bool(self.datetime or self.date)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Due":
        if not data:
            return cls()
        return cls(
            date=data.get("date") or "",
            datetime=data.get("datetime") or "",
            recurring=bool(data.get("recurring", False)),
            string=data.get("string") or "",
            timezone=data.get("timezone") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.date:
            data["date"] = self.date
        if self.datetime:
            data["datetime"] = self.datetime
        if self.recurring:
            data["recurring"] = True
        if self.string:
            data["string"] = self.string
        if self.timezone:
            data["timezone"] = self.timezone
        return data


@dataclass(frozen=True)
class Task:
    id: int
    content: str = ""
    project_id: int = 0
    label_ids: List[int] = field(default_factory=list)
    priority: int = 1
    completed: bool = False
    comment_count: int = 0
    order: int = 0
    indent: int = 0
    url: str = ""
    due: Due = field(default_factory=Due)

    @property
    def priority_level(self) -> Priority:
        return Priority.from_stored(self.priority)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """Build a task from a REST payload.

        Raises KeyError/TypeError on a payload without an ``id``; the API
        client turns those into DecodeError.
        """
        return cls(
            id=data["id"],
            content=data.get("content") or "",
            project_id=data.get("project_id") or 0,
            label_ids=list(data.get("label_ids") or []),
            priority=data.get("priority") or 1,
            completed=bool(data.get("completed", False)),
            comment_count=data.get("comment_count") or 0,
            order=data.get("order") or 0,
            indent=data.get("indent") or 0,
            url=data.get("url") or "",
            due=Due.from_dict(data.get("due")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "project_id": self.project_id,
            "label_ids": list(self.label_ids),
            "priority": self.priority,
            "completed": self.completed,
            "comment_count": self.comment_count,
            "order": self.order,
            "indent": self.indent,
            "url": self.url,
            "due": self.due.to_dict(),
        }
