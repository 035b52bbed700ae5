"""Key handling for each Diamonds view.

Every View maps to exactly one handler in KEY_HANDLERS. A handler receives a
normalized key name (see ui_service.keys) and mutates the NavState and, for
the add views, the project collection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from common.errors import ClipboardError, StoreWriteError
from common.logging_setup import get_logger
from store.collection import ProjectCollection
from store.models import is_valid_hex_color
from ui_service.clipboard import ClipboardSink
from ui_service.state import (
    FIELD_NAME,
    FIELD_URL,
    LIST_VIEWS,
    MAX_HEX_INPUT,
    MENU_COLORS,
    MENU_OPTIONS,
    MENU_URLS,
    NavState,
    View,
    clamp_cursor,
)

logger = get_logger(__name__)

UP_KEYS = {"up", "k"}
DOWN_KEYS = {"down", "j"}


@dataclass
class Session:
    projects: ProjectCollection
    clipboard: ClipboardSink


def handle_key(key: str, ui_state: NavState, session: Session) -> bool:
    """
    Dispatch one key to the handler for the current view.

    Returns:
        False when the key asks the application to quit, True otherwise
    """
    if key == "ctrl+c":
        return False
    if key == "q" and ui_state.view in LIST_VIEWS:
        return False
    previous = ui_state.view
    KEY_HANDLERS[previous](key, ui_state, session)
    if ui_state.view is not previous:
        logger.debug(f"View {previous.value} -> {ui_state.view.value}")
    return True


def _move_cursor(key: str, ui_state: NavState, count: int) -> None:
    if key in UP_KEYS:
        ui_state.cursor = clamp_cursor(ui_state.cursor - 1, count)
    elif key in DOWN_KEYS:
        ui_state.cursor = clamp_cursor(ui_state.cursor + 1, count)


def _is_text(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def _report_write_error(ui_state: NavState, exc: StoreWriteError) -> None:
    ui_state.status_message = f"Error writing data: {exc}"


def _copy(value: str, ui_state: NavState, session: Session) -> None:
    try:
        session.clipboard.write_text(value)
    except ClipboardError as exc:
        ui_state.status_message = f"Copy failed: {exc}"
        return
    ui_state.status_message = f"Copied {value} to clipboard!"


def _handle_project_list_key(key: str, ui_state: NavState, session: Session) -> None:
    count = len(session.projects)
    if key in UP_KEYS or key in DOWN_KEYS:
        _move_cursor(key, ui_state, count)
    elif key == "enter":
        if count == 0:
            return
        ui_state.selected_project = clamp_cursor(ui_state.cursor, count)
        ui_state.view = View.PROJECT_MENU
        ui_state.cursor = MENU_COLORS
    elif key == "n":
        ui_state.view = View.ADD_PROJECT
        ui_state.input_buffer = ""


def _handle_project_menu_key(key: str, ui_state: NavState, session: Session) -> None:
    if key == "esc":
        ui_state.view = View.PROJECT_LIST
        ui_state.cursor = ui_state.selected_project
    elif key in UP_KEYS or key in DOWN_KEYS:
        _move_cursor(key, ui_state, len(MENU_OPTIONS))
    elif key == "enter":
        if ui_state.cursor == MENU_COLORS:
            ui_state.view = View.COLOR_LIST
        else:
            ui_state.view = View.URL_LIST
        ui_state.cursor = 0


def _handle_color_list_key(key: str, ui_state: NavState, session: Session) -> None:
    colors = session.projects[ui_state.selected_project].colors
    if key == "esc":
        ui_state.view = View.PROJECT_MENU
        ui_state.cursor = MENU_COLORS
    elif key in UP_KEYS or key in DOWN_KEYS:
        _move_cursor(key, ui_state, len(colors))
    elif key == "enter":
        if colors:
            _copy(colors[ui_state.cursor], ui_state, session)
    elif key == "n":
        ui_state.view = View.ADD_COLOR
        ui_state.input_buffer = ""


def _handle_url_list_key(key: str, ui_state: NavState, session: Session) -> None:
    urls = session.projects[ui_state.selected_project].urls
    if key == "esc":
        ui_state.view = View.PROJECT_MENU
        ui_state.cursor = MENU_URLS
    elif key in UP_KEYS or key in DOWN_KEYS:
        _move_cursor(key, ui_state, len(urls))
    elif key == "enter":
        if urls:
            _copy(urls[ui_state.cursor].url, ui_state, session)
    elif key == "n":
        ui_state.view = View.ADD_URL
        ui_state.reset_buffers()


def _handle_add_project_key(key: str, ui_state: NavState, session: Session) -> None:
    if key == "esc":
        ui_state.view = View.PROJECT_LIST
        ui_state.input_buffer = ""
        return
    if key == "enter":
        if not ui_state.input_buffer:
            return
        try:
            session.projects.add_project(ui_state.input_buffer)
        except StoreWriteError as exc:
            _report_write_error(ui_state, exc)
        ui_state.view = View.PROJECT_LIST
        ui_state.cursor = len(session.projects) - 1
        ui_state.input_buffer = ""
        return
    if key == "backspace":
        ui_state.input_buffer = ui_state.input_buffer[:-1]
        return
    if _is_text(key):
        ui_state.input_buffer += key


def _handle_add_color_key(key: str, ui_state: NavState, session: Session) -> None:
    if key == "esc":
        ui_state.view = View.COLOR_LIST
        ui_state.input_buffer = ""
        return
    if key == "enter":
        if not is_valid_hex_color(ui_state.input_buffer):
            return
        project = session.projects[ui_state.selected_project]
        try:
            session.projects.add_color(ui_state.selected_project, ui_state.input_buffer)
        except StoreWriteError as exc:
            _report_write_error(ui_state, exc)
        ui_state.view = View.COLOR_LIST
        ui_state.cursor = len(project.colors) - 1
        ui_state.input_buffer = ""
        return
    if key == "backspace":
        ui_state.input_buffer = ui_state.input_buffer[:-1]
        return
    if _is_text(key) and len(ui_state.input_buffer) < MAX_HEX_INPUT:
        ui_state.input_buffer += key


def _handle_add_url_key(key: str, ui_state: NavState, session: Session) -> None:
    if key == "esc":
        ui_state.view = View.URL_LIST
        ui_state.reset_buffers()
        return
    if key == "tab":
        ui_state.focused_field = 1 - ui_state.focused_field
        return
    if key == "enter":
        if ui_state.focused_field == FIELD_NAME:
            ui_state.focused_field = FIELD_URL
            return
        if not ui_state.url_name_buffer or not ui_state.input_buffer:
            return
        project = session.projects[ui_state.selected_project]
        try:
            session.projects.add_url(
                ui_state.selected_project,
                ui_state.url_name_buffer,
                ui_state.input_buffer,
            )
        except StoreWriteError as exc:
            _report_write_error(ui_state, exc)
        ui_state.view = View.URL_LIST
        ui_state.cursor = len(project.urls) - 1
        ui_state.reset_buffers()
        return
    if key == "backspace":
        if ui_state.focused_field == FIELD_NAME:
            ui_state.url_name_buffer = ui_state.url_name_buffer[:-1]
        else:
            ui_state.input_buffer = ui_state.input_buffer[:-1]
        return
    if _is_text(key):
        if ui_state.focused_field == FIELD_NAME:
            ui_state.url_name_buffer += key
        else:
            ui_state.input_buffer += key


KEY_HANDLERS: Dict[View, Callable[[str, NavState, Session], None]] = {
    View.PROJECT_LIST: _handle_project_list_key,
    View.PROJECT_MENU: _handle_project_menu_key,
    View.COLOR_LIST: _handle_color_list_key,
    View.URL_LIST: _handle_url_list_key,
    View.ADD_PROJECT: _handle_add_project_key,
    View.ADD_COLOR: _handle_add_color_key,
    View.ADD_URL: _handle_add_url_key,
}
