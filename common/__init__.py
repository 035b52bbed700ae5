"""Common utilities for Diamonds."""

from common.config import Config
from common.errors import (
    ClipboardError,
    ConfigPathError,
    DiamondsError,
    StoreParseError,
    StoreReadError,
    StoreWriteError,
    ValidationError,
)
from common.logging_setup import setup_logging, get_logger

__all__ = [
    "Config",
    "ClipboardError",
    "ConfigPathError",
    "DiamondsError",
    "StoreParseError",
    "StoreReadError",
    "StoreWriteError",
    "ValidationError",
    "setup_logging",
    "get_logger",
]
