from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Comment:
    id: int
    content: str = ""
    posted: str = ""  # kept as sent by the service, never parsed
    task_id: int = 0
    project_id: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Comment":
        return cls(
            id=data["id"],
            content=data.get("content") or "",
            posted=data.get("posted") or "",
            task_id=data.get("task_id") or 0,
            project_id=data.get("project_id") or 0,
        )
