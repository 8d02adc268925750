"""Conflict detection: find params set to different values for the same path.

Three scopes are checked:

- within a Sheet: two Sels set the same path differently.  One of them
  may legitimately override the other for a given target, but the
  overlap is still worth a look.
- within a Set: the same path is set differently in different Sheets.
- across Sets: Sels with the same (sheet name, pattern) identity set a
  path differently in two Sets, e.g. a variant vs. the baseline.

Reports are sorted by path; ties keep Set, Sheet and Sel listing order.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Any

from paramstyle.model.params import Set, Sets, Sheet

logger = logging.getLogger(__name__)

SHEET = "sheet"
SET = "set"
SETS = "sets"


@dataclass(frozen=True)
class ConflictEntry:
    """One (selector, value) occurrence, located by set and sheet name."""

    sel: str
    value: str
    sheet_name: str = ""
    set_name: str = ""

    @property
    def location(self) -> str:
        return "/".join(p for p in (self.set_name, self.sheet_name, self.sel) if p)

    def to_dict(self) -> dict[str, str]:
        return {
            "set": self.set_name,
            "sheet": self.sheet_name,
            "sel": self.sel,
            "value": self.value,
        }


@dataclass(frozen=True)
class Conflict:
    """A path that is set to more than one value within *scope*."""

    path: str
    scope: str  # "sheet", "set", "sets"
    entries: tuple[ConflictEntry, ...]

    @property
    def values(self) -> list[str]:
        return [e.value for e in self.entries]

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "scope": self.scope,
            "entries": [e.to_dict() for e in self.entries],
        }

    def __str__(self) -> str:
        pairs = ", ".join(f"{e.location}={e.value}" for e in self.entries)
        return f"{self.path} ({self.scope}): {pairs}"


def _occurrences(sheet: Sheet, sheet_name: str, set_name: str) -> dict[str, list[ConflictEntry]]:
    occurrences: dict[str, list[ConflictEntry]] = {}
    for sel in sheet:
        for path, value in sel.params.items():
            occurrences.setdefault(path, []).append(
                ConflictEntry(sel=sel.sel, value=value, sheet_name=sheet_name, set_name=set_name)
            )
    return occurrences


def _by_path(conflicts: list[Conflict]) -> list[Conflict]:
    return sorted(conflicts, key=lambda c: c.path)


def diffs_within_sheet(sheet: Sheet, sheet_name: str = "", set_name: str = "") -> list[Conflict]:
    """Paths set by two or more Sels of *sheet* with differing values."""
    conflicts = []
    for path, entries in _occurrences(sheet, sheet_name, set_name).items():
        if len({e.value for e in entries}) > 1:
            conflicts.append(Conflict(path=path, scope=SHEET, entries=tuple(entries)))
    return _by_path(conflicts)


def diffs_within_set(pset: Set) -> list[Conflict]:
    """Within-sheet conflicts of every sheet, plus conflicts between sheets."""
    conflicts: list[Conflict] = []
    per_sheet: dict[str, dict[str, list[ConflictEntry]]] = {}
    for sheet_name, sheet in pset.sheets.items():
        conflicts.extend(diffs_within_sheet(sheet, sheet_name, pset.name))
        per_sheet[sheet_name] = _occurrences(sheet, sheet_name, pset.name)

    paths = sorted({p for occ in per_sheet.values() for p in occ})
    for path in paths:
        entries = [e for occ in per_sheet.values() for e in occ.get(path, ())]
        if any(
            a.sheet_name != b.sheet_name and a.value != b.value
            for a, b in itertools.combinations(entries, 2)
        ):
            conflicts.append(Conflict(path=path, scope=SET, entries=tuple(entries)))
    return _by_path(conflicts)


def _diff_set_pair(base: Set, other: Set) -> list[Conflict]:
    conflicts = []
    for sheet_name, base_sheet in base.sheets.items():
        if sheet_name not in other.sheets:
            continue
        other_sheet = other.sheets[sheet_name]
        for base_sel in base_sheet:
            for other_sel in other_sheet:
                if other_sel.sel != base_sel.sel:
                    continue
                for path in sorted(base_sel.params):
                    if path not in other_sel.params:
                        continue
                    base_value = base_sel.params[path]
                    other_value = other_sel.params[path]
                    if base_value == other_value:
                        continue
                    conflicts.append(
                        Conflict(
                            path=path,
                            scope=SETS,
                            entries=(
                                ConflictEntry(base_sel.sel, base_value, sheet_name, base.name),
                                ConflictEntry(other_sel.sel, other_value, sheet_name, other.name),
                            ),
                        )
                    )
    return conflicts


def diffs_across_sets(sets: Sets) -> list[Conflict]:
    """Compare every pair of Sets for Sels sharing sheet name and pattern."""
    conflicts: list[Conflict] = []
    for a, b in itertools.combinations(sets.sets, 2):
        conflicts.extend(_diff_set_pair(a, b))
    logger.debug("Compared %d set(s): %d conflict(s)", len(sets), len(conflicts))
    return _by_path(conflicts)


def diffs_first_vs_rest(sets: Sets) -> list[Conflict]:
    """Compare every Set after the first against the first (the baseline)."""
    if len(sets) < 2:
        return []
    base = sets[0]
    conflicts: list[Conflict] = []
    for other in sets.sets[1:]:
        conflicts.extend(_diff_set_pair(base, other))
    logger.debug("Compared %d set(s) to %s: %d conflict(s)", len(sets) - 1, base.name, len(conflicts))
    return _by_path(conflicts)


def diffs_within_named_set(sets: Sets, name: str) -> list[Conflict]:
    """:func:`diffs_within_set` for the Set called *name*."""
    return diffs_within_set(sets.set_by_name(name))


def format_conflicts(conflicts: list[Conflict]) -> str:
    """Render conflicts as one line per conflict."""
    return "\n".join(str(c) for c in conflicts)
