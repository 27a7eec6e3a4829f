"""Typed readers/writers for the Todoist REST and sync APIs."""

import json
import uuid
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar
from urllib.parse import urlencode

import requests

from core import Comment, DecodeError, Label, Project, Task, ValidationError
from .commands import make_command
from .transport import (
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    Transport,
    rest_endpoint,
    sync_endpoint,
)

T = TypeVar("T")


def decode_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise DecodeError(f"Malformed response from {response.url}: {exc}") from exc


def _decode_one(response: requests.Response, factory: Callable[[Dict[str, Any]], T]) -> T:
    payload = decode_json(response)
    try:
        return factory(payload)
    except (KeyError, TypeError, AttributeError) as exc:
        raise DecodeError(f"Unexpected payload from {response.url}: {exc!r}") from exc


def _decode_list(response: requests.Response, factory: Callable[[Dict[str, Any]], T]) -> List[T]:
    payload = decode_json(response)
    if not isinstance(payload, list):
        raise DecodeError(f"Expected a list from {response.url}, got {type(payload).__name__}")
    try:
        return [factory(item) for item in payload]
    except (KeyError, TypeError, AttributeError) as exc:
        raise DecodeError(f"Unexpected payload from {response.url}: {exc!r}") from exc


def _json_headers() -> Dict[str, str]:
    return {"Content-Type": JSON_CONTENT_TYPE, "X-Request-Id": str(uuid.uuid4())}


def _form_headers() -> Dict[str, str]:
    return {"Content-Type": FORM_CONTENT_TYPE}


class TodoistClient:
    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    def list_tasks(self, params: Optional[Mapping[str, Any]] = None) -> List[Task]:
        response = self.transport.request("GET", rest_endpoint("tasks"), params=params)
        return _decode_list(response, Task.from_dict)

    def get_task(self, task_id: int) -> Task:
        response = self.transport.request("GET", rest_endpoint("tasks", task_id))
        return _decode_one(response, Task.from_dict)

    def add_task(self, args: Mapping[str, Any]) -> Task:
        response = self.transport.request(
            "POST", rest_endpoint("tasks"), headers=_json_headers(), body=json.dumps(dict(args))
        )
        return _decode_one(response, Task.from_dict)

    def update_task(self, task_id: int, args: Mapping[str, Any]) -> None:
        self.transport.request(
            "POST", rest_endpoint("tasks", task_id), headers=_json_headers(), body=json.dumps(dict(args))
        )

    def delete_task(self, task_id: int) -> None:
        self.transport.request("DELETE", rest_endpoint("tasks", task_id))

    def close_task(self, task_id: int) -> None:
        self.transport.request("POST", rest_endpoint("tasks", task_id, "close"))

    def reopen_task(self, task_id: int) -> None:
        self.transport.request("POST", rest_endpoint("tasks", task_id, "reopen"))

    def move_task(self, task_id: int, args: Optional[Mapping[str, Any]] = None) -> None:
        command_args: Dict[str, Any] = {"id": task_id}
        command_args.update(args or {})
        commands = make_command("item_move", command_args)
        if not commands:
            raise ValidationError(f"Unable to encode move command for task {task_id}")
        self.transport.request(
            "POST", sync_endpoint("sync"), headers=_form_headers(), body=urlencode({"commands": commands})
        )

    def quick_add_task(self, text: str, args: Optional[Mapping[str, Any]] = None) -> None:
        form: Dict[str, str] = {"text": text}
        for key, value in (args or {}).items():
            form[key] = str(value)
        self.transport.request("POST", sync_endpoint("quick", "add"), headers=_form_headers(), body=urlencode(form))

    # ------------------------------------------------------------------
    # Reference data
    # ------------------------------------------------------------------

    def list_labels(self) -> List[Label]:
        response = self.transport.request("GET", rest_endpoint("labels"))
        return _decode_list(response, Label.from_dict)

    def list_projects(self) -> List[Project]:
        response = self.transport.request("GET", rest_endpoint("projects"))
        return _decode_list(response, Project.from_dict)

    def list_comments(self, task_id: int) -> List[Comment]:
        response = self.transport.request("GET", rest_endpoint("comments"), params={"task_id": task_id})
        return _decode_list(response, Comment.from_dict)

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------

    def is_premium(self) -> bool:
        body = urlencode({"sync_token": "*", "resource_types": json.dumps(["user"])})
        response = self.transport.request("POST", sync_endpoint("sync"), headers=_form_headers(), body=body)
        payload = decode_json(response)
        user = payload.get("user") if isinstance(payload, dict) else None
        if not isinstance(user, dict):
            raise DecodeError(f"Sync response from {response.url} has no user resource")
        return bool(user.get("is_premium", False))


__all__ = ["TodoistClient", "decode_json"]
