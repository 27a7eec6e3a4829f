"""Status bar builder for TodoistTUI."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from util.columns import display_width

HELP_HINT = " [q]Quit [?]Help [Enter]Detail "


def build_status_text(tui) -> FormattedText:
    status = tui.status
    parts: List[Tuple[str, str]] = []
    if status.text:
        parts.append((f"class:{status.style}", f" {status.text} "))
    term_width = tui.get_terminal_width()
    used = sum(display_width(text) for _, text in parts)
    filler = max(0, term_width - used - display_width(HELP_HINT))
    parts.append(("class:footer", " " * filler + HELP_HINT))
    return FormattedText(parts)


__all__ = ["HELP_HINT", "build_status_text"]
