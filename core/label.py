from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Label:
    id: int
    name: str
    order: int = 0

    @property
    def display_name(self) -> str:
        return f"@{self.name}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Label":
        return cls(id=data["id"], name=data.get("name") or "", order=data.get("order") or 0)
