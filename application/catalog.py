from types import MappingProxyType
from typing import Iterable, List, Mapping

from core import NOT_FOUND, Label, Project


class Catalog:
    """Immutable per-session snapshot of project and label names."""

    def __init__(self, projects: Iterable[Project] = (), labels: Iterable[Label] = ()) -> None:
        self.projects: Mapping[int, str] = MappingProxyType({p.id: p.display_name for p in projects})
        self.labels: Mapping[int, str] = MappingProxyType({l.id: l.display_name for l in labels})

    @classmethod
    def load(cls, client) -> "Catalog":
        labels = client.list_labels()
        projects = client.list_projects()
        return cls(projects=projects, labels=labels)

    def project_name(self, project_id: int) -> str:
        return self.projects.get(project_id, "")

    def label_names(self, label_ids: Iterable[int]) -> List[str]:
        return [self.labels[label_id] for label_id in label_ids if label_id in self.labels]

    def project_id_by_name(self, name: str) -> int:
        wanted = name.strip().lstrip("#").casefold()
        if not wanted:
            return NOT_FOUND
        for project_id, display in self.projects.items():
            if display.lstrip("#").casefold() == wanted:
                return project_id
        return NOT_FOUND


__all__ = ["Catalog"]
