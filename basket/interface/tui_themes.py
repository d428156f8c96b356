#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style

from basket.core import PRIORITY_COLORS, Priority


def _priority_classes() -> Dict[str, str]:
    classes: Dict[str, str] = {}
    for priority in Priority:
        name = priority.label.lower()
        classes[f"priority.{name}"] = f"{PRIORITY_COLORS[priority]} bold"
        classes[f"border.{name}"] = PRIORITY_COLORS[priority]
    return classes


THEMES: Dict[str, Dict[str, str]] = {
    "amber": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#9ca3af",
        "text.dimmer": "#4b5563 italic",
        "header": "#fbbf24 bg:#1f2937 bold",
        "title": "#fbbf24 bold",
        "marker": "#fbbf24 bold",
        "border": "#4b525a",
        "card": "#d7dfe6",
        "card.selected": "bg:#3b3b3b #fbbf24 bold",
        "card.done": "#6b7280 strike",
        "notice": "#ef4444 bold",
        "help": "#9ca3af",
        **_priority_classes(),
    },
    "contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "text.dimmer": "#6f757d italic",
        "header": "#ffb347 bg:#000000 bold",
        "title": "#ffb347 bold",
        "marker": "#ffb347 bold",
        "border": "#5a6169",
        "card": "#e8eaec",
        "card.selected": "bg:#3d4047 #ffffff bold",
        "card.done": "#8a9097 strike",
        "notice": "#ff6b6b bold",
        "help": "#a7b0ba",
        **_priority_classes(),
    },
}

DEFAULT_THEME = "amber"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
