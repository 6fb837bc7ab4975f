from typing import Optional


class TiviewError(Exception):
    """Base class for every fatal error reported before the UI starts."""


class TerminfoIOError(TiviewError):
    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause.strerror or cause}" if isinstance(cause, OSError) else ""
        if cause is not None and not detail:
            detail = f": {cause}"
        super().__init__(f"cannot read {path}{detail}")


class FormatError(TiviewError):
    """The byte layout of a compiled entry is structurally invalid."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        super().__init__(message)

    def with_path(self, path: str) -> "FormatError":
        self.path = path
        return self

    def __str__(self):
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class BadMagic(FormatError):
    pass


class CapacityExceeded(FormatError):
    pass


class Truncated(FormatError):
    pass


class ResourceError(TiviewError):
    def __init__(self, message: str = "out of memory"):
        super().__init__(message)


class InternalError(RuntimeError):
    """A logical line index fell outside the decoded record."""
