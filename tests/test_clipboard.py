"""Tests for the pyperclip-backed clipboard sink."""

import pyperclip
import pytest

from common.errors import ClipboardError
from ui_service.clipboard import ClipboardSink


def test_write_text_copies(monkeypatch) -> None:
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)

    ClipboardSink().write_text("#1ABC9C")

    assert copied == ["#1ABC9C"]


def test_write_text_wraps_pyperclip_errors(monkeypatch) -> None:
    def fail(_value):
        raise pyperclip.PyperclipException("could not find a copy/paste mechanism")

    monkeypatch.setattr(pyperclip, "copy", fail)

    with pytest.raises(ClipboardError, match="copy/paste mechanism"):
        ClipboardSink().write_text("https://example.com")
