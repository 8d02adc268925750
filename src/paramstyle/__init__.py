"""paramstyle: selector-based parameter styling and conflict detection."""

from paramstyle.apply import ApplyResult, apply_set, apply_sheet, apply_sheet_or_raise, apply_sheets
from paramstyle.codec import ParamStore, dumps, go_code, load, loads, save
from paramstyle.config import ParamStyleConfig
from paramstyle.diff import (
    Conflict,
    diffs_across_sets,
    diffs_first_vs_rest,
    diffs_within_set,
    diffs_within_sheet,
)
from paramstyle.errors import (
    ApplyError,
    CodecError,
    CodecIOError,
    ParamStyleError,
    PathError,
    SelectorError,
)
from paramstyle.model import Params, Sel, Selector, Set, Sets, Sheet, Sheets, parse_selector
from paramstyle.target import Record, Styler

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # model
    "Params",
    "Sel",
    "Selector",
    "Set",
    "Sets",
    "Sheet",
    "Sheets",
    "parse_selector",
    # targets
    "Styler",
    "Record",
    # apply
    "ApplyResult",
    "apply_sheet",
    "apply_sheet_or_raise",
    "apply_sheets",
    "apply_set",
    # diff
    "Conflict",
    "diffs_within_sheet",
    "diffs_within_set",
    "diffs_across_sets",
    "diffs_first_vs_rest",
    # codec
    "dumps",
    "loads",
    "load",
    "save",
    "go_code",
    "ParamStore",
    # config / errors
    "ParamStyleConfig",
    "ParamStyleError",
    "SelectorError",
    "PathError",
    "ApplyError",
    "CodecError",
    "CodecIOError",
]
