"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "header": "bg:#e8eaec #000000 bold",
        "selected": "bg:#3b3b3b underline bold",
        "due.overdue": "#ff5156",
        "due.today": "#ff5fd7",
        "priority.urgent": "#ff5156",
        "priority.high": "#cd5c5c",
        "priority.low": "#8b0000",
        "status.filter": "bg:#ffffff #000000 bold",
        "status.error": "bg:#d70000 #ffffff bold",
        "status.info": "#ffb347 bold",
        "footer": "bg:#3a3a3a #d7dfe6",
        "input": "bg:#000000 #e8eaec",
        "popup.title": "#ffb347 bold",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "header": "bg:#ffffff #000000 bold",
        "selected": "bg:#3d4047 underline bold",
        "due.overdue": "#ff6b6b bold",
        "due.today": "#ff87ff bold",
        "priority.urgent": "#ff6b6b bold",
        "priority.high": "#f0c674 bold",
        "priority.low": "#d75f5f",
        "status.filter": "bg:#ffffff #000000 bold",
        "status.error": "bg:#ff0000 #ffffff bold",
        "status.info": "#f9ac60 bold",
        "footer": "bg:#444444 #e8eaec",
        "input": "bg:#000000 #ffffff",
        "popup.title": "#f9ac60 bold",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    return Style.from_dict(get_theme_palette(theme))


__all__ = ["THEMES", "DEFAULT_THEME", "get_theme_palette", "build_style"]
