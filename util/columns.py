"""Display-width aware helpers for the task table."""

from typing import List, Sequence

from wcwidth import wcwidth


def display_width(text: str) -> int:
    text = (text or "").expandtabs(4)
    width = 0
    for ch in text:
        w = wcwidth(ch)
        if w is None:
            w = 0
        width += max(0, w)
    return width


def trim_display(text: str, width: int) -> str:
    """Cut ``text`` so its printed width does not exceed ``width``."""
    text = (text or "").replace("\n", " ").expandtabs(4)
    acc = []
    used = 0
    for ch in text:
        w = wcwidth(ch) or 0
        if w < 0:
            w = 0
        if used + w > width:
            break
        acc.append(ch)
        used += w
    return "".join(acc)


def pad_display(text: str, width: int) -> str:
    trimmed = trim_display(text, width)
    trimmed_width = display_width(trimmed)
    if trimmed_width < width:
        trimmed += " " * (width - trimmed_width)
    return trimmed


def column_widths(headers: Sequence[str], rows: Sequence[Sequence[str]], term_width: int, gap: int = 1) -> List[int]:
    """Natural widths for every column but the last, which takes the rest."""
    count = len(headers)
    widths = [display_width(h) for h in headers]
    for row in rows:
        for idx, text in enumerate(row[:count]):
            widths[idx] = max(widths[idx], display_width(text))
    fixed = sum(widths[:-1]) + gap * (count - 1)
    widths[-1] = max(display_width(headers[-1]), term_width - fixed)
    return widths


__all__ = ["display_width", "trim_display", "pad_display", "column_widths"]
