from dataclasses import dataclass
from typing import Any, Dict

NOT_FOUND = 0


@dataclass(frozen=True)
class Project:
    id: int
    name: str
    order: int = 0
    indent: int = 0
    comment_count: int = 0

    @property
    def display_name(self) -> str:
        return f"#{self.name}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            order=data.get("order") or 0,
            indent=data.get("indent") or 0,
            comment_count=data.get("comment_count") or 0,
        )
