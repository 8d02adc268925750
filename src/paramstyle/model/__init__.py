"""paramstyle model layer -- public type re-exports."""

from paramstyle.model.diagnostic import Diagnostic, Severity
from paramstyle.model.params import Params, Sel, Set, Sets, Sheet, Sheets
from paramstyle.model.selector import Selector, parse_selector

__all__ = [
    # selector
    "Selector",
    "parse_selector",
    # containers
    "Params",
    "Sel",
    "Sheet",
    "Sheets",
    "Set",
    "Sets",
    # diagnostic
    "Severity",
    "Diagnostic",
]
