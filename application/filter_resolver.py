from typing import Any, Dict, Mapping

from core import ResolutionError

DEFAULT_FILTER = "#inbox"


def _bare(name: str) -> str:
    return name.strip().lstrip("#").casefold()


def resolve_filter(raw_text: str, is_premium: bool, projects: Mapping[int, str]) -> Dict[str, Any]:
    """Translate the user's filter text into ``tasks`` query parameters.

    Premium accounts get the text as a native query filter. Free accounts can
    only list by project, so the text must name one of ``projects``
    (display names such as ``#Work``; the ``#`` and letter case are optional).
    """
    text = raw_text or DEFAULT_FILTER
    if is_premium:
        return {"filter": text}
    wanted = _bare(text)
    for project_id, name in projects.items():
        if _bare(name) == wanted:
            return {"project_id": project_id}
    raise ResolutionError(text)


__all__ = ["DEFAULT_FILTER", "resolve_filter"]
