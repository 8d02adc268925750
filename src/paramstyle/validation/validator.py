"""Lint a Sets document: run every rule and gather the findings."""

from __future__ import annotations

from typing import Callable

from paramstyle.errors import ParamStyleError
from paramstyle.model.diagnostic import Diagnostic
from paramstyle.model.params import Sets
from paramstyle.validation.rules import ALL_RULES

RuleFunc = Callable[[Sets], list[Diagnostic]]


class ValidationError(ParamStyleError):
    """A params document has ERROR findings; ``diagnostics`` lists them."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        errors = [d for d in diagnostics if d.is_error]
        summary = "; ".join(str(d) for d in errors)
        super().__init__(f"{len(errors)} error(s) in params document: {summary}")


def validate(sets: Sets, extra_rules: list[RuleFunc] | None = None) -> list[Diagnostic]:
    """Findings of the built-in rules, then of *extra_rules*, in rule order."""
    diagnostics: list[Diagnostic] = []
    for rule in [*ALL_RULES, *(extra_rules or [])]:
        diagnostics.extend(rule(sets))
    return diagnostics


def validate_or_raise(sets: Sets, extra_rules: list[RuleFunc] | None = None) -> list[Diagnostic]:
    """Like :func:`validate`, but ERROR findings raise :class:`ValidationError`.

    The warnings and notes are returned when the document has no errors.
    """
    diagnostics = validate(sets, extra_rules=extra_rules)
    if any(d.is_error for d in diagnostics):
        raise ValidationError([d for d in diagnostics if d.is_error])
    return diagnostics
