"""Inline link markup helpers.

Two conventions appear in task and comment text:

* ``[label](https://url)`` (markdown style)
* ``https://url (label)`` (what the service's clients produce on paste)
"""

import re

MARKDOWN_LINK = re.compile(r"\[((?:[^\[\]]|\[[^\]]*\])*)\]\((https?://\S+)\)")
TRAILING_LABEL_LINK = re.compile(r"(https?://\S+)\s+\(([^\)]+)\)")


def _strip_once(text: str) -> str:
    text = MARKDOWN_LINK.sub(r"\1", text)
    return TRAILING_LABEL_LINK.sub(r"\2", text)


def sanitize(text: str) -> str:
    """Reduce every link to its human label, for table cells."""
    current = text
    while True:
        stripped = _strip_once(current)
        if stripped == current:
            return current
        current = stripped


def annotate(text: str) -> str:
    """Keep markdown links but pad the URL so it stays selectable in the detail view."""
    return MARKDOWN_LINK.sub(r"[\1]( \2 )", text)


__all__ = ["MARKDOWN_LINK", "TRAILING_LABEL_LINK", "sanitize", "annotate"]
