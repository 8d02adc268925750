"""Exception types shared across paramstyle."""

from __future__ import annotations


class ParamStyleError(Exception):
    """Base class for every error raised by paramstyle."""


class SelectorError(ParamStyleError, ValueError):
    """Raised when a selector pattern cannot be parsed."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid selector {pattern!r}: {reason}")


class PathError(ParamStyleError):
    """Raised when a parameter path cannot be resolved or assigned on a target."""

    def __init__(self, path: str, message: str, target: str = "") -> None:
        self.path = path
        self.target = target
        self.message = message
        prefix = f"{target}: " if target else ""
        super().__init__(f"{prefix}{path}: {message}")


class ApplyError(ParamStyleError):
    """Raised when one or more paths failed during an apply pass."""

    def __init__(self, errors: list[PathError]) -> None:
        self.errors = list(errors)
        super().__init__(
            f"Failed to set {len(self.errors)} param(s): "
            + "; ".join(str(e) for e in self.errors)
        )


class CodecError(ParamStyleError):
    """Raised when a persisted params document is malformed."""

    def __init__(self, message: str, location: str | None = None) -> None:
        self.location = location
        if location:
            message = f"{message} (at {location})"
        super().__init__(message)


class CodecIOError(CodecError):
    """Raised when a params file cannot be read or written."""

    def __init__(self, filename: str, cause: OSError) -> None:
        self.filename = filename
        self.cause = cause
        super().__init__(f"Cannot access {filename}: {cause.strerror or cause}")
