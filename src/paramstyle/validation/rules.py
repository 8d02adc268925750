"""Validation rules for params documents.

Each rule is a function taking a Sets and returning a list of Diagnostic
objects describing any issues found.
"""

from __future__ import annotations

import re
from typing import Iterator

from paramstyle.diff.differ import diffs_within_set
from paramstyle.errors import SelectorError
from paramstyle.model.diagnostic import Diagnostic, Severity
from paramstyle.model.params import Sel, Sets
from paramstyle.model.selector import parse_selector

_SEGMENT_RE = re.compile(r"^[A-Za-z0-9_\-]+$")


def _iter_sels(sets: Sets) -> Iterator[tuple[str, Sel]]:
    """Yield (``set/sheet[index]`` location, Sel) for every Sel in *sets*."""
    for pset in sets:
        for sheet_name, sheet in pset.sheets.items():
            for i, sel in enumerate(sheet):
                yield f"{pset.name}/{sheet_name}[{i}]", sel


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_set_names(sets: Sets) -> list[Diagnostic]:
    """Every Set needs a non-empty name, unique within the document."""
    diagnostics: list[Diagnostic] = []
    seen: dict[str, int] = {}
    for i, pset in enumerate(sets):
        if not pset.name:
            diagnostics.append(
                Diagnostic(
                    rule="check_set_names",
                    severity=Severity.ERROR,
                    message=f"Set at index {i} has no name.",
                    location=f"[{i}]",
                    fix="Give every set a name such as 'Base'.",
                )
            )
            continue
        if pset.name in seen:
            diagnostics.append(
                Diagnostic(
                    rule="check_set_names",
                    severity=Severity.ERROR,
                    message=(
                        f"Duplicate set name '{pset.name}' (indexes {seen[pset.name]} and {i}); "
                        "lookup by name only finds the first."
                    ),
                    location=pset.name,
                    fix="Rename one of the sets.",
                )
            )
        else:
            seen[pset.name] = i
    return diagnostics


def check_selector_syntax(sets: Sets) -> list[Diagnostic]:
    """Selector patterns must be ``Type``, ``.class`` or ``#name``."""
    diagnostics: list[Diagnostic] = []
    for location, sel in _iter_sels(sets):
        try:
            parse_selector(sel.sel)
        except SelectorError as exc:
            diagnostics.append(
                Diagnostic(
                    rule="check_selector_syntax",
                    severity=Severity.ERROR,
                    message=f"{exc.reason}: {sel.sel!r}. This selector never matches.",
                    location=location,
                    fix="Use a bare type name, .class or #name.",
                )
            )
    return diagnostics


def check_param_paths(sets: Sets) -> list[Diagnostic]:
    """Param paths are dot-separated, non-empty identifier segments."""
    diagnostics: list[Diagnostic] = []
    for location, sel in _iter_sels(sets):
        for path in sel.params:
            if not all(_SEGMENT_RE.match(seg) for seg in path.split(".")):
                diagnostics.append(
                    Diagnostic(
                        rule="check_param_paths",
                        severity=Severity.ERROR,
                        message=f"Malformed param path {path!r} in selector '{sel.sel}'.",
                        location=location,
                        fix="Write paths like 'Learn.Lrate' with no empty segments or spaces.",
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# Authoring rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_empty_params(sets: Sets) -> list[Diagnostic]:
    """A Sel without params does nothing."""
    return [
        Diagnostic(
            rule="check_empty_params",
            severity=Severity.WARNING,
            message=f"Selector '{sel.sel}' sets no params.",
            location=location,
        )
        for location, sel in _iter_sels(sets)
        if not sel.params
    ]


def check_duplicate_selectors(sets: Sets) -> list[Diagnostic]:
    """The same pattern listed twice in one sheet is usually a merge mistake."""
    diagnostics: list[Diagnostic] = []
    for pset in sets:
        for sheet_name, sheet in pset.sheets.items():
            seen: set[str] = set()
            for i, sel in enumerate(sheet):
                if sel.sel in seen:
                    diagnostics.append(
                        Diagnostic(
                            rule="check_duplicate_selectors",
                            severity=Severity.WARNING,
                            message=f"Selector '{sel.sel}' appears more than once in sheet '{sheet_name}'.",
                            location=f"{pset.name}/{sheet_name}[{i}]",
                            fix="Merge the params into a single selector.",
                        )
                    )
                seen.add(sel.sel)
    return diagnostics


def check_conflicts_within_sets(sets: Sets) -> list[Diagnostic]:
    """Same path set to different values inside one Set."""
    diagnostics: list[Diagnostic] = []
    for pset in sets:
        for conflict in diffs_within_set(pset):
            diagnostics.append(
                Diagnostic(
                    rule="check_conflicts_within_sets",
                    severity=Severity.WARNING,
                    message=f"Conflicting values: {conflict}",
                    location=pset.name,
                )
            )
    return diagnostics


ALL_RULES = [
    check_set_names,
    check_selector_syntax,
    check_param_paths,
    check_empty_params,
    check_duplicate_selectors,
    check_conflicts_within_sets,
]
