from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

USER_CONFIG_PATH = Path(os.environ.get("TODOIST_CONFIG") or Path.home() / ".todoist_config.yaml")


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text())
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def _set(key: str, value: Any) -> None:
    data = _load_config()
    if value in (None, ""):
        data.pop(key, None)
    else:
        data[key] = value
    _save_config(data)


def get_user_token() -> str:
    """Environment token wins over the saved one."""
    return (os.environ.get("TODOIST_TOKEN") or str(_load_config().get("token", ""))).strip()


def set_user_token(value: str) -> None:
    _set("token", (value or "").strip())


def get_filter() -> str:
    return str(_load_config().get("filter", "") or "").strip()


def set_filter(value: str) -> None:
    _set("filter", (value or "").strip())


def get_last_closed() -> Optional[int]:
    value = _load_config().get("closed")
    try:
        return int(value) if value else None
    except (TypeError, ValueError):
        return None


def set_last_closed(task_id: Optional[int]) -> None:
    _set("closed", int(task_id) if task_id else None)


class UserConfigStore:
    """ConfigPort backed by the YAML user config."""

    def save_filter(self, text: str) -> None:
        set_filter(text)

    def save_closed(self, task_id: int) -> None:
        set_last_closed(task_id)

    def last_closed(self) -> Optional[int]:
        return get_last_closed()
