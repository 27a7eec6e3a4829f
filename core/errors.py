"""Error taxonomy shared by the API client, the task store and the UI."""

from typing import Optional


class TodoistError(RuntimeError):
    pass


class TransportError(TodoistError):
    """Non-2xx response or connection failure."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class DecodeError(TodoistError):
    """Response body is not the JSON shape the client expects."""


class ResolutionError(TodoistError):
    """Filter text matches no known project."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid filter: {text}")
        self.text = text


class ValidationError(TodoistError):
    pass


__all__ = ["TodoistError", "TransportError", "DecodeError", "ResolutionError", "ValidationError"]
