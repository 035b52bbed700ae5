"""Navigation state for the Diamonds terminal view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class View(Enum):
    """Screen currently shown to the user."""

    PROJECT_LIST = "project_list"
    PROJECT_MENU = "project_menu"
    COLOR_LIST = "color_list"
    URL_LIST = "url_list"
    ADD_PROJECT = "add_project"
    ADD_COLOR = "add_color"
    ADD_URL = "add_url"


# Views that act on state.selected_project
PROJECT_VIEWS = frozenset(
    {View.PROJECT_MENU, View.COLOR_LIST, View.URL_LIST, View.ADD_COLOR, View.ADD_URL}
)

# Views where "q" quits rather than being typed
LIST_VIEWS = frozenset(
    {View.PROJECT_LIST, View.PROJECT_MENU, View.COLOR_LIST, View.URL_LIST}
)

MENU_OPTIONS = ["Colors", "URLs"]
MENU_COLORS = 0
MENU_URLS = 1

FIELD_NAME = 0
FIELD_URL = 1

MAX_HEX_INPUT = 7


@dataclass
class NavState:
    view: View = View.PROJECT_LIST
    cursor: int = 0
    selected_project: int = 0
    input_buffer: str = ""
    url_name_buffer: str = ""  # AddUrl name field; input_buffer holds the URL
    focused_field: int = FIELD_NAME
    status_message: str = ""

    def reset_buffers(self) -> None:
        self.input_buffer = ""
        self.url_name_buffer = ""
        self.focused_field = FIELD_NAME

    def clear_status(self) -> None:
        self.status_message = ""


def clamp_cursor(cursor: int, count: int) -> int:
    """Clamp a cursor to [0, count - 1], or 0 for an empty list."""
    if count <= 0:
        return 0
    return max(0, min(cursor, count - 1))
