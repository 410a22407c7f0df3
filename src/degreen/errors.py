from __future__ import annotations

from pathlib import Path


class DegreenError(Exception):
    """Base class for every error that aborts or interrupts a run."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class IoError(DegreenError):
    """A filesystem call failed. Wraps the underlying `OSError`."""

    def __init__(self, action: str, path: Path, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(path, f"cannot {action} '{path}': {reason}")
        self.action = action
        self.cause = cause


class NotFoundError(DegreenError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"'{path}' is not a valid file or directory")


class SymlinkDeniedError(DegreenError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"cannot degreen symlink '{path}'")


class RecursionNotRequestedError(DegreenError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"cannot degreen directory '{path}'")


class InvariantViolationError(DegreenError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"unsupported file type at '{path}'")
