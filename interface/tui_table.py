"""Task table renderer for TodoistTUI."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from application.rows import HEADERS
from util.columns import column_widths, pad_display

GAP = " "


def visible_range(selected: int, total: int, height: int, offset: int) -> Tuple[int, int]:
    """Scroll ``offset`` just enough to keep ``selected`` on screen."""
    height = max(1, height)
    if selected < offset:
        offset = selected
    elif selected >= offset + height:
        offset = selected - height + 1
    offset = max(0, min(offset, max(0, total - height)))
    return offset, min(total, offset + height)


def build_table_text(tui) -> FormattedText:
    rows = tui.rows
    width = tui.get_terminal_width()
    widths = column_widths(HEADERS, [[cell.text for cell in row] for row in rows], width)
    parts: List[Tuple[str, str]] = []
    header = GAP.join(pad_display(title, widths[idx]) for idx, title in enumerate(HEADERS))
    parts.append(("class:header", header + "\n"))

    height = tui.get_terminal_height() - 2
    start, end = visible_range(tui.selected_index, len(rows), height, tui.list_view_offset)
    tui.list_view_offset = start
    for row_idx in range(start, end):
        selected = row_idx == tui.selected_index
        for col_idx, cell in enumerate(rows[row_idx]):
            style = f"class:{cell.style}" if cell.style else "class:text"
            if selected:
                style = f"{style} class:selected"
            text = pad_display(cell.text, widths[col_idx])
            if col_idx < len(widths) - 1:
                parts.append((style, text))
                parts.append(("class:selected" if selected else "", GAP))
            else:
                parts.append((style, text))
        parts.append(("", "\n"))
    return FormattedText(parts)


__all__ = ["build_table_text", "visible_range"]
