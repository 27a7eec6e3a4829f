from typing import NamedTuple, Optional, Protocol, Sequence


class Cell(NamedTuple):
    text: str
    style: str = ""


class RowSink(Protocol):
    """UI side of the task mirror: receives row-indexed render events."""

    def reset(self, filter_label: str) -> None:
        ...

    def render_row(self, row: int, cells: Sequence[Cell]) -> None:
        ...

    def remove_row(self, row: int) -> None:
        ...


class ConfigPort(Protocol):
    def save_filter(self, text: str) -> None:
        ...

    def save_closed(self, task_id: int) -> None:
        ...

    def last_closed(self) -> Optional[int]:
        ...
