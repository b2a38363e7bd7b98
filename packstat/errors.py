"""Exceptions raised at the file boundaries of a packstat run."""


class PackStatError(Exception):
    """Base class for packstat errors."""


class InputReadError(PackStatError):
    """The packed input could not be opened or read."""

    def __init__(self, path, cause=None):
        self.path = str(path)
        self.cause = cause
        detail = f": {getattr(cause, 'strerror', None) or cause}" if cause is not None else ""
        super().__init__(f"Cannot open file to read: {self.path}{detail}")


class OutputWriteError(PackStatError):
    """The report destination could not be opened or written."""

    def __init__(self, path, cause=None):
        self.path = str(path)
        self.cause = cause
        detail = f": {getattr(cause, 'strerror', None) or cause}" if cause is not None else ""
        super().__init__(f"Cannot open file to write: {self.path}{detail}")
