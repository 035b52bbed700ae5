"""Tests for logging setup."""

import logging

from common.logging_setup import get_logger, setup_logging


def test_setup_logging_writes_to_file(tmp_path) -> None:
    log_file = tmp_path / "diamonds.log"
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("DEBUG", str(log_file))
        get_logger("diamonds.test").debug("hello from test")
        for handler in root.handlers:
            handler.flush()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)

    contents = log_file.read_text(encoding="utf-8")
    assert "DEBUG" in contents
    assert "diamonds.test" in contents
    assert "hello from test" in contents


def test_get_logger_returns_named_logger() -> None:
    assert get_logger("store.storage").name == "store.storage"
