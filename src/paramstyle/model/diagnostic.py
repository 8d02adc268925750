"""Lint findings reported by ``paramstyle validate``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    ERROR = "ERROR"  # the document is broken; validate exits 1
    WARNING = "WARNING"  # legal, but probably not what the author meant
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """One finding, e.g. an unparseable selector in ``Base/Network[2]``.

    ``rule`` names the check that produced it, ``location`` is a
    ``set/sheet[index]`` or set name, and ``fix`` is an optional hint.
    """

    rule: str
    severity: Severity
    message: str
    location: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        where = f" [{self.location}]" if self.location else ""
        return f"{self.severity.value}{where}: {self.message}"
