"""Sheet application: match selectors against a target and assign its params.

Matching:
    - ``Type`` matches targets whose ``type_name`` equals *Type*.
    - ``.cls`` matches targets whose ``style_class`` contains *cls*.
    - ``#name`` matches the target whose ``name`` equals *name*.

Params of all matching selectors are merged per path.  A later selector
overrides an earlier one when its specificity is equal or higher
(type < class < name), so listed order only breaks ties.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from paramstyle.errors import ApplyError, PathError, SelectorError
from paramstyle.events.bus import EventBus
from paramstyle.events.types import ParamApplied, ParamFailed, SheetApplied
from paramstyle.model.params import Sel, Set, Sheet, Sheets
from paramstyle.target.fields import resolve
from paramstyle.target.styler import Styler, class_tags, target_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedParam:
    """The winning value for one path, and the selector that supplied it."""

    value: str
    specificity: int
    sel: str


@dataclass
class ApplyResult:
    """Outcome of one or more apply passes.

    ``changed`` is True if at least one path was set.  ``errors`` holds one
    PathError per failed path; ``messages`` holds confirmation lines when
    reporting was requested.
    """

    changed: bool = False
    applied: list[str] = field(default_factory=list)
    errors: list[PathError] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def merge(self, other: ApplyResult) -> None:
        self.changed = self.changed or other.changed
        self.applied.extend(other.applied)
        self.errors.extend(other.errors)
        self.messages.extend(other.messages)

    def raise_for_errors(self) -> None:
        """Raise :class:`ApplyError` listing every failed path, if any."""
        if self.errors:
            raise ApplyError(self.errors)


def matching_sels(sheet: Sheet, target: Styler) -> list[Sel]:
    """Return the Sels of *sheet* that match *target*, in listed order."""
    classes = class_tags(target)
    matched = []
    for sel in sheet:
        try:
            selector = sel.selector
        except SelectorError as exc:
            logger.warning("Skipping selector: %s", exc)
            continue
        if selector.matches(target.type_name, target.name, classes):
            matched.append(sel)
    return matched


def resolve_params(sheet: Sheet, target: Styler) -> dict[str, ResolvedParam]:
    """Merge the params of every matching Sel into one path -> value map."""
    resolved: dict[str, ResolvedParam] = {}
    for sel in matching_sels(sheet, target):
        specificity = sel.selector.specificity
        for path, value in sel.params.items():
            prev = resolved.get(path)
            if prev is None or specificity >= prev.specificity:
                resolved[path] = ResolvedParam(value=value, specificity=specificity, sel=sel.sel)
    return resolved


def apply_sheet(
    sheet: Sheet,
    target: Styler,
    report: bool = False,
    bus: EventBus | None = None,
) -> ApplyResult:
    """Apply *sheet* to *target*.

    Every resolved path is attempted; failures are collected rather than
    raised.  With *report* set, each assignment adds a confirmation line to
    ``ApplyResult.messages``.
    """
    label = target_label(target)
    result = ApplyResult()
    resolved = resolve_params(sheet, target)

    for path in sorted(resolved):
        entry = resolved[path]
        try:
            ref = resolve(target, path)
            old = ref.get_string()
            ref.set(entry.value)
        except PathError as exc:
            error = PathError(path, exc.message, target=label)
            result.errors.append(error)
            logger.warning("Param not set: %s [%s]", error, entry.sel)
            if bus is not None:
                bus.emit(ParamFailed(target=label, path=path, error=exc.message, sel=entry.sel))
            continue

        result.changed = True
        result.applied.append(path)
        event = ParamApplied(
            target=label,
            path=path,
            old_value=old,
            new_value=ref.get_string(),
            sel=entry.sel,
        )
        if report:
            result.messages.append(str(event))
            logger.info("Param set: %s", event)
        if bus is not None:
            bus.emit(event)

    if result.changed:
        update = getattr(target, "update_params", None)
        if callable(update):
            update()
    if bus is not None:
        bus.emit(
            SheetApplied(
                target=label,
                changed=result.changed,
                applied=len(result.applied),
                failed=len(result.errors),
            )
        )
    return result


def apply_sheet_or_raise(
    sheet: Sheet,
    target: Styler,
    report: bool = False,
    bus: EventBus | None = None,
) -> ApplyResult:
    """Apply *sheet*; raises :class:`ApplyError` if any path failed."""
    result = apply_sheet(sheet, target, report=report, bus=bus)
    result.raise_for_errors()
    return result


def apply_sheets(
    sheets: Sheets,
    targets: Iterable[Any],
    order: list[str] | None = None,
    report: bool = False,
    bus: EventBus | None = None,
) -> ApplyResult:
    """Apply several named sheets to every target.

    Sheets are applied in *order* (default: the mapping order), so a later
    sheet overwrites what an earlier one set on the same path.
    """
    names = order if order is not None else sheets.names()
    # look every sheet up front so a bad name fails before anything is set
    selected = [(name, sheets.sheet_by_name(name)) for name in names]
    targets = list(targets)
    total = ApplyResult()
    for name, sheet in selected:
        logger.debug("Applying sheet %s to %d target(s)", name, len(targets))
        for target in targets:
            total.merge(apply_sheet(sheet, target, report=report, bus=bus))
    return total


def apply_set(
    pset: Set,
    targets: Iterable[Any],
    order: list[str] | None = None,
    report: bool = False,
    bus: EventBus | None = None,
) -> ApplyResult:
    """Apply the sheets of a Set to every target; see :func:`apply_sheets`."""
    logger.debug("Applying set %s", pset.name)
    return apply_sheets(pset.sheets, targets, order=order, report=report, bus=bus)
