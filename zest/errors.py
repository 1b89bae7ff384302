"""Exception types raised by zest."""


class ZestError(Exception):
    """Base class for zest errors."""


class SkipTest(Exception):
    """Raised by a test body to mark it as intentionally not evaluated."""


class ArenaError(ZestError):
    """Invalid use of a test arena (double free, use after close)."""


class CollectionError(ZestError):
    """A test file could not be imported."""

    def __init__(self, path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to import {path}: {type(cause).__name__}: {cause}")


class ConfigError(ZestError, ValueError):
    """Configuration file is malformed or invalid."""


class BookkeepingError(ZestError):
    """Lifecycle state could not be recorded; the run cannot continue."""
