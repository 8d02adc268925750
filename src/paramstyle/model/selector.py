"""Selector patterns: parsing and matching against styleable targets."""

from __future__ import annotations

import re
from dataclasses import dataclass

from paramstyle.errors import SelectorError

__all__ = ["Selector", "parse_selector", "TYPE", "CLASS", "NAME"]

TYPE = "type"
CLASS = "class"
NAME = "name"

_SPECIFICITY = {TYPE: 0, CLASS: 1, NAME: 2}

# Identifiers may carry dots or dashes (e.g. "Prjn-Back", "Hidden.1").
_IDENT_RE = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.\-]*$")


@dataclass(frozen=True)
class Selector:
    """A parsed selector pattern.

    Specificity values:
        0 = type (``Layer``)
        1 = class (``.Hidden``)
        2 = name (``#Output``)
    """

    kind: str  # "type", "class", "name"
    value: str
    specificity: int

    def matches(self, type_name: str, name: str, classes: list[str]) -> bool:
        """Return True if the identity facts of a target satisfy this selector."""
        if self.kind == TYPE:
            return type_name == self.value
        if self.kind == CLASS:
            return self.value in classes
        if self.kind == NAME:
            return name == self.value
        return False

    def __str__(self) -> str:
        if self.kind == CLASS:
            return f".{self.value}"
        if self.kind == NAME:
            return f"#{self.value}"
        return self.value


def parse_selector(raw: str) -> Selector:
    """Parse a raw selector pattern into a Selector."""
    pattern = raw.strip()
    if not pattern:
        raise SelectorError(raw, "empty pattern")
    if pattern.startswith("."):
        kind, value = CLASS, pattern[1:]
    elif pattern.startswith("#"):
        kind, value = NAME, pattern[1:]
    else:
        kind, value = TYPE, pattern
    if not value:
        raise SelectorError(raw, f"missing identifier after {pattern[0]!r}")
    if not _IDENT_RE.match(value):
        raise SelectorError(raw, "identifier contains invalid characters")
    return Selector(kind=kind, value=value, specificity=_SPECIFICITY[kind])
