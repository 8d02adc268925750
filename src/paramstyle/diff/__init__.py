from paramstyle.diff.differ import (
    Conflict,
    ConflictEntry,
    diffs_across_sets,
    diffs_first_vs_rest,
    diffs_within_named_set,
    diffs_within_set,
    diffs_within_sheet,
    format_conflicts,
)

__all__ = [
    "Conflict",
    "ConflictEntry",
    "diffs_within_sheet",
    "diffs_within_set",
    "diffs_within_named_set",
    "diffs_across_sets",
    "diffs_first_vs_rest",
    "format_conflicts",
]
