"""Interactive loop for the Diamonds terminal view."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.live import Live

from common.logging_setup import get_logger
from ui_service.handlers import Session, handle_key
from ui_service.keys import KeyReader
from ui_service.render import Renderer
from ui_service.state import NavState

logger = get_logger(__name__)


def draw(live: Live, renderer: Renderer, ui_state: NavState, session: Session) -> None:
    """Render one frame; the status message is shown once and then cleared."""
    live.update(renderer.render(ui_state, session.projects.projects), refresh=True)
    ui_state.clear_status()


def run(
    session: Session,
    renderer: Renderer,
    key_reader: Optional[KeyReader] = None,
    console: Optional[Console] = None,
) -> int:
    """
    Run the full-screen view until the user quits.

    Each key is handled and rendered before the next one is read.

    Returns:
        Process exit status
    """
    console = console or Console()
    key_reader = key_reader or KeyReader()
    ui_state = NavState()
    logger.info(f"Starting with {len(session.projects)} project(s)")

    try:
        with key_reader, Live(
            console=console, screen=True, auto_refresh=False, transient=True
        ) as live:
            draw(live, renderer, ui_state, session)
            while True:
                key = key_reader.read_key()
                if key is None:
                    continue
                if not handle_key(key, ui_state, session):
                    break
                draw(live, renderer, ui_state, session)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except EOFError:
        logger.info("Input closed")

    logger.info("Exiting")
    return 0
