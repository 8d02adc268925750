from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParamStyleConfig:
    json_indent: int = 2
    go_package: str = "main"
    go_import: str = "github.com/emer/emergent/params"
    go_var: str = ""  # empty = derived from the exported type, e.g. SavedParamsSets
    report: bool = False  # print a confirmation line for every param set
    log_level: str = "WARNING"
