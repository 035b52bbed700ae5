"""Color and style values handed to the renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    title: str = "DIAMONDS"
    header_color: str = "#F6FFFE"
    comment_color: str = "#757575"
    selection_color: str = "#BAF3EB"
    item_desc_color: str = "#E9F8F5"
    message_color: str = "#F1F1F1"
    message_bg_color: str = "#FF5F87"
    inline_code_color: str = "#FF5F87"
    inline_code_bg_color: str = "#3A3A3A"
    input_border_color: str = "#FF59C8"
    text_color: str = "#E5E5E5"
    input_width: int = 40


DARK_THEME = Theme()

LIGHT_THEME = Theme(
    header_color="#1E90FF",
    selection_color="#0000CD",
    item_desc_color="#5151D8",
    inline_code_bg_color="#ADD8E6",
    input_border_color="#1E90FF",
    text_color="#1F2026",
)

THEMES = {"dark": DARK_THEME, "light": LIGHT_THEME}


def theme_named(name: str) -> Theme:
    """Look up a theme by name, falling back to the dark theme."""
    return THEMES.get(name.lower(), DARK_THEME)
