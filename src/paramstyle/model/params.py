"""Container model: Params, Sel, Sheet, Sheets, Set and Sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from paramstyle.model.selector import Selector, parse_selector

# Dotted field path -> serialized value ("Learn.Lrate" -> "0.05").
Params = dict[str, str]


@dataclass(frozen=True)
class Sel:
    """One styling rule: a selector pattern, a description and its Params."""

    sel: str
    desc: str = ""
    params: Params = field(default_factory=dict)

    @property
    def selector(self) -> Selector:
        """Parse the pattern; raises SelectorError if it is malformed."""
        return parse_selector(self.sel)


@dataclass
class Sheet:
    """An ordered list of Sel rules applied together to a target."""

    sels: list[Sel] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.sels)

    def __iter__(self) -> Iterator[Sel]:
        return iter(self.sels)

    def sel_by_name(self, pattern: str) -> Sel:
        """Return the first Sel whose pattern equals *pattern*."""
        for sel in self.sels:
            if sel.sel == pattern:
                return sel
        raise KeyError(f"Sel {pattern!r} not found in sheet")


@dataclass
class Sheets:
    """Named sheets, one per target subsystem (e.g. "Network", "Env")."""

    sheets: dict[str, Sheet] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.sheets)

    def __contains__(self, name: object) -> bool:
        return name in self.sheets

    def __getitem__(self, name: str) -> Sheet:
        return self.sheet_by_name(name)

    def items(self):
        return self.sheets.items()

    def names(self) -> list[str]:
        return list(self.sheets)

    def sheet_by_name(self, name: str) -> Sheet:
        try:
            return self.sheets[name]
        except KeyError:
            raise KeyError(f"Sheet {name!r} not found") from None


@dataclass
class Set:
    """A named, described collection of sheets: one complete configuration."""

    name: str
    desc: str = ""
    sheets: Sheets = field(default_factory=Sheets)

    def sheet_by_name(self, name: str) -> Sheet:
        try:
            return self.sheets.sheet_by_name(name)
        except KeyError:
            raise KeyError(f"Sheet {name!r} not found in set {self.name!r}") from None


@dataclass
class Sets:
    """Ordered list of Sets; the first one is the baseline for diffing."""

    sets: list[Set] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.sets)

    def __iter__(self) -> Iterator[Set]:
        return iter(self.sets)

    def __getitem__(self, index: int) -> Set:
        return self.sets[index]

    def names(self) -> list[str]:
        return [s.name for s in self.sets]

    def set_by_name(self, name: str) -> Set:
        for st in self.sets:
            if st.name == name:
                return st
        raise KeyError(f"Set {name!r} not found")

    def param_value(self, set_name: str, sheet_name: str, sel: str, path: str) -> str:
        """Return the value stored for *path* at set / sheet / sel."""
        sheet = self.set_by_name(set_name).sheet_by_name(sheet_name)
        rule = sheet.sel_by_name(sel)
        try:
            return rule.params[path]
        except KeyError:
            raise KeyError(
                f"Param {path!r} not found in {set_name}/{sheet_name}/{sel}"
            ) from None
