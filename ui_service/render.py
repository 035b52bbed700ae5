"""Rendering of the Diamonds views with rich.

Rendering is a pure function of the navigation state and the project list;
the caller clears the status message once a frame has been drawn.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict, Optional, Sequence, Tuple

from rich import box
from rich.color import Color, ColorParseError
from rich.console import Console, ConsoleOptions, Group, RenderableType, RenderResult
from rich.padding import Padding
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from store.models import Project
from ui_service.state import FIELD_NAME, MENU_OPTIONS, NavState, View
from ui_service.theme import DARK_THEME, Theme

HELP_SEPARATOR = " • "

# Lines a list view spends outside its items: padding, header, help line,
# page line, trailing blank and status message
LIST_FRAME_LINES = 11
PROJECT_ITEM_LINES = 3


def expand_hex(color: str) -> str:
    """Expand '#RGB' to '#RRGGBB'; other strings are returned unchanged."""
    if len(color) == 4 and color.startswith("#"):
        return "#" + "".join(ch * 2 for ch in color[1:])
    return color


def parse_swatch_color(color: str) -> Optional[Color]:
    """Return a rich Color for a stored hex string, or None if it is not one."""
    try:
        return Color.parse(expand_hex(color))
    except ColorParseError:
        return None


def visible_window(cursor: int, total: int, per_page: int) -> Tuple[int, int]:
    """
    Return the [start, end) slice of a list page that contains the cursor.

    Pages are fixed blocks of per_page items, so the view only shifts when the
    cursor crosses a page boundary.
    """
    per_page = max(1, per_page)
    if total <= per_page:
        return 0, total
    start = (max(0, min(cursor, total - 1)) // per_page) * per_page
    return start, min(start + per_page, total)


class ViewFrame:
    """A rendered view that fits its lists to the height rich gives it."""

    def __init__(self, renderer: "Renderer", ui_state: NavState, projects: Sequence[Project]) -> None:
        self.renderer = renderer
        self.ui_state = replace(ui_state)
        self.projects = projects

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        height = options.height or options.max_height
        yield self.renderer.build(self.ui_state, self.projects, height)


class Renderer:
    """Turns a NavState into a rich renderable using an injected Theme."""

    def __init__(self, theme: Theme = DARK_THEME) -> None:
        self.theme = theme
        self._header = Style(color=theme.header_color, bold=True)
        self._help = Style(color=theme.comment_color)
        self._subtle = Style(color=theme.comment_color)
        self._selected = Style(color=theme.selection_color)
        self._selected_desc = Style(color=theme.item_desc_color)
        self._message = Style(
            color=theme.message_color, bgcolor=theme.message_bg_color, bold=True
        )
        self._inline_code = Style(
            color=theme.inline_code_color, bgcolor=theme.inline_code_bg_color, bold=True
        )
        self._input_border = Style(color=theme.input_border_color)
        self._doc = Style(color=theme.text_color)

    def render(self, ui_state: NavState, projects: Sequence[Project]) -> RenderableType:
        return ViewFrame(self, ui_state, projects)

    def build(self, ui_state: NavState, projects: Sequence[Project], height: int) -> RenderableType:
        rows = max(1, height - LIST_FRAME_LINES)
        body = VIEW_RENDERERS[ui_state.view](self, ui_state, projects, rows)
        parts = list(body)
        if ui_state.status_message:
            parts.append(Text(""))
            parts.append(Text(f" {ui_state.status_message} ", style=self._message))
        return Padding(Group(*parts), (2, 1), style=self._doc)

    def _header_text(self, title: str) -> Text:
        return Text(f"{title}\n", style=self._header)

    def _help_text(self, *keys: str) -> Text:
        return Text(HELP_SEPARATOR.join(keys), style=self._help)

    def _page_line(self, start: int, total: int, per_page: int) -> Text:
        if total <= per_page:
            return Text("")
        pages = (total + per_page - 1) // per_page
        return Text(f"page {start // per_page + 1}/{pages}", style=self._subtle)

    def _input_box(self, prompt: str) -> Panel:
        return Panel(
            Text(prompt),
            box=box.ROUNDED,
            border_style=self._input_border,
            padding=(1, 2),
            width=self.theme.input_width,
        )

    def _render_project_list(self, ui_state: NavState, projects: Sequence[Project], rows: int) -> list:
        text = Text()
        if not projects:
            text.append("No projects yet. Press 'n' to add one.\n", style=self._subtle)
        per_page = max(1, rows // PROJECT_ITEM_LINES)
        start, end = visible_window(ui_state.cursor, len(projects), per_page)
        for index in range(start, end):
            project = projects[index]
            if index == ui_state.cursor:
                text.append(f"│ {project.name}\n", style=self._selected)
                text.append(f"│ {project.describe()}\n\n", style=self._selected_desc)
            else:
                text.append(f"  {project.name}\n")
                text.append(f"  {project.describe()}\n\n", style=self._subtle)
        return [
            self._header_text(f"🪩 {self.theme.title}"),
            text,
            self._page_line(start, len(projects), per_page),
            self._help_text("↑/↓ navigate", "enter open", "n new item", "q quit"),
        ]

    def _render_project_menu(self, ui_state: NavState, projects: Sequence[Project], rows: int) -> list:
        project = projects[ui_state.selected_project]
        text = Text()
        for index, option in enumerate(MENU_OPTIONS):
            if index == ui_state.cursor:
                text.append(f"> {option}\n", style=self._selected)
            else:
                text.append(f"  {option}\n")
        return [
            self._header_text(f"✨ {project.name}"),
            text,
            self._help_text("↑/↓ navigate", "enter select", "esc back", "q quit"),
        ]

    def _render_color_list(self, ui_state: NavState, projects: Sequence[Project], rows: int) -> list:
        project = projects[ui_state.selected_project]
        text = Text()
        if not project.colors:
            text.append("No colors yet. Press 'n' to add one.\n", style=self._subtle)
        start, end = visible_window(ui_state.cursor, len(project.colors), rows)
        for index in range(start, end):
            color = project.colors[index]
            swatch = parse_swatch_color(color)
            if index == ui_state.cursor:
                text.append("> ", style=self._selected)
            else:
                text.append("  ")
            text.append("  ", style=Style(bgcolor=swatch) if swatch else None)
            text.append(" ")
            text.append(f" {color} ", style=self._inline_code)
            text.append("\n")
        return [
            self._header_text(project.name),
            text,
            self._page_line(start, len(project.colors), rows),
            self._help_text("↑/↓ navigate", "enter copy", "n new color", "esc back", "q quit"),
        ]

    def _render_url_list(self, ui_state: NavState, projects: Sequence[Project], rows: int) -> list:
        project = projects[ui_state.selected_project]
        text = Text()
        if not project.urls:
            text.append("No URLs yet. Press 'n' to add one.\n", style=self._subtle)
        start, end = visible_window(ui_state.cursor, len(project.urls), rows)
        for index in range(start, end):
            named_url = project.urls[index]
            if index == ui_state.cursor:
                text.append(f"> {named_url.name}\n", style=self._selected)
            else:
                text.append(f"  {named_url.name}\n")
        return [
            self._header_text(project.name),
            text,
            self._page_line(start, len(project.urls), rows),
            self._help_text("↑/↓ navigate", "enter copy", "n new URL", "esc back", "q quit"),
        ]

    def _render_add_project(self, ui_state: NavState, projects: Sequence[Project], rows: int) -> list:
        return [
            self._header_text("Add New Project"),
            self._input_box(f"Project name: {ui_state.input_buffer}"),
            Text(""),
            self._help_text("enter save", "esc cancel"),
        ]

    def _render_add_color(self, ui_state: NavState, projects: Sequence[Project], rows: int) -> list:
        return [
            self._header_text("Add New Color"),
            self._input_box(f"HEX color: {ui_state.input_buffer}"),
            Text(""),
            Text("Enter HEX (e.g., #FF5F87)", style=self._help),
            self._help_text("enter save", "esc cancel"),
        ]

    def _render_add_url(self, ui_state: NavState, projects: Sequence[Project], rows: int) -> list:
        name_prompt = f"Name: {ui_state.url_name_buffer}"
        url_prompt = f"URL: {ui_state.input_buffer}"
        if ui_state.focused_field == FIELD_NAME:
            fields = [self._input_box(name_prompt), Text(url_prompt, style=self._subtle)]
        else:
            fields = [Text(name_prompt, style=self._subtle), self._input_box(url_prompt)]
        return [
            self._header_text("Add New URL"),
            *fields,
            Text(""),
            self._help_text("enter next/save", "tab switch fields", "esc cancel"),
        ]


VIEW_RENDERERS: Dict[View, Callable[[Renderer, NavState, Sequence[Project], int], list]] = {
    View.PROJECT_LIST: Renderer._render_project_list,
    View.PROJECT_MENU: Renderer._render_project_menu,
    View.COLOR_LIST: Renderer._render_color_list,
    View.URL_LIST: Renderer._render_url_list,
    View.ADD_PROJECT: Renderer._render_add_project,
    View.ADD_COLOR: Renderer._render_add_color,
    View.ADD_URL: Renderer._render_add_url,
}
