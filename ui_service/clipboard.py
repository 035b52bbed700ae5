"""System clipboard access."""

from __future__ import annotations

import pyperclip

from common.errors import ClipboardError
from common.logging_setup import get_logger

logger = get_logger(__name__)


class ClipboardSink:
    """Writes text to the system clipboard through pyperclip."""

    def write_text(self, value: str) -> None:
        try:
            pyperclip.copy(value)
        except pyperclip.PyperclipException as exc:
            logger.warning(f"Clipboard copy failed: {exc}")
            raise ClipboardError(str(exc)) from exc
        logger.debug(f"Copied {value!r} to clipboard")
