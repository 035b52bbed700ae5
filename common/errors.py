"""Exception types shared across Diamonds."""


class DiamondsError(Exception):
    """Base class for all Diamonds errors."""
    pass


class ConfigPathError(DiamondsError):
    """Raised when the config directory cannot be resolved or created."""
    pass


class StoreReadError(DiamondsError):
    """Raised when the data file exists but cannot be read."""
    pass


class StoreParseError(DiamondsError):
    """Raised when the data file is not a valid project list."""
    pass


class StoreWriteError(DiamondsError):
    """Raised when the project list cannot be written to disk."""
    pass


class ValidationError(DiamondsError):
    """Raised when a name, URL or color is rejected."""
    pass


class ClipboardError(DiamondsError):
    """Raised when a value cannot be copied to the system clipboard."""
    pass
