from paramstyle.apply.applier import (
    ApplyResult,
    ResolvedParam,
    apply_set,
    apply_sheet,
    apply_sheet_or_raise,
    apply_sheets,
    matching_sels,
    resolve_params,
)

__all__ = [
    "ApplyResult",
    "ResolvedParam",
    "apply_sheet",
    "apply_sheet_or_raise",
    "apply_sheets",
    "apply_set",
    "matching_sels",
    "resolve_params",
]
