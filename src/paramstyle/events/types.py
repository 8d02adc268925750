"""Event types emitted while applying sheets to targets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParamApplied:
    target: str
    path: str
    old_value: str
    new_value: str
    sel: str

    def __str__(self) -> str:
        return f"{self.target}: {self.path} = {self.new_value} (was {self.old_value}) [{self.sel}]"


@dataclass(frozen=True)
class ParamFailed:
    target: str
    path: str
    error: str
    sel: str


@dataclass(frozen=True)
class SheetApplied:
    target: str
    changed: bool
    applied: int
    failed: int
