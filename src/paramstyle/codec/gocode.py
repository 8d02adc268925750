"""Go initializer export: render a params document as literal Go source.

The output is meant to be pasted into (or generated alongside) a Go
program using the emergent ``params`` package; it is never read back.
Map-like containers are emitted with sorted keys.
"""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path
from typing import TextIO

from paramstyle.codec.json_codec import Document
from paramstyle.config import ParamStyleConfig
from paramstyle.errors import CodecIOError
from paramstyle.model.params import Params, Sel, Set, Sets, Sheet, Sheets

logger = logging.getLogger(__name__)

_DEFAULT_VARS: dict[type, str] = {
    Sets: "SavedParamsSets",
    Set: "SavedParamsSet",
    Sheets: "SavedParamsSheets",
    Sheet: "SavedParamsSheet",
    Sel: "SavedParamsSel",
    dict: "SavedParams",
}


def _q(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _tabs(depth: int) -> str:
    return "\t" * depth


def _write_params(w: TextIO, params: Params, depth: int) -> None:
    w.write("params.Params{\n")
    for path in sorted(params):
        w.write(f"{_tabs(depth + 1)}{_q(path)}: {_q(params[path])},\n")
    w.write(f"{_tabs(depth)}}}")


def _write_sel(w: TextIO, sel: Sel, depth: int) -> None:
    w.write(f"Sel: {_q(sel.sel)}, Desc: {_q(sel.desc)},\n")
    w.write(f"{_tabs(depth + 1)}Params: ")
    _write_params(w, sel.params, depth + 1)


def _write_sheet(w: TextIO, sheet: Sheet, depth: int) -> None:
    w.write("params.Sheet{\n")
    for sel in sheet:
        w.write(f"{_tabs(depth + 1)}{{")
        _write_sel(w, sel, depth + 1)
        w.write("},\n")
    w.write(f"{_tabs(depth)}}}")


def _write_sheets(w: TextIO, sheets: Sheets, depth: int) -> None:
    w.write("params.Sheets{\n")
    for name in sorted(sheets.names()):
        w.write(f"{_tabs(depth + 1)}{_q(name)}: &")
        _write_sheet(w, sheets[name], depth + 1)
        w.write(",\n")
    w.write(f"{_tabs(depth)}}}")


def _write_set(w: TextIO, pset: Set, depth: int) -> None:
    w.write(f"Name: {_q(pset.name)}, Desc: {_q(pset.desc)}, Sheets: ")
    _write_sheets(w, pset.sheets, depth)


def _write_sets(w: TextIO, sets: Sets, depth: int) -> None:
    w.write("params.Sets{\n")
    for pset in sets:
        w.write(f"{_tabs(depth + 1)}{{")
        _write_set(w, pset, depth + 1)
        w.write("},\n")
    w.write(f"{_tabs(depth)}}}\n")


def write_go_code(w: TextIO, obj: Document, depth: int = 0) -> None:
    """Write the Go initializer expression for *obj* to *w*."""
    if isinstance(obj, Sets):
        _write_sets(w, obj, depth)
    elif isinstance(obj, Set):
        _write_set(w, obj, depth)
    elif isinstance(obj, Sheets):
        _write_sheets(w, obj, depth)
    elif isinstance(obj, Sheet):
        _write_sheet(w, obj, depth)
    elif isinstance(obj, Sel):
        _write_sel(w, obj, depth)
    elif isinstance(obj, dict):
        _write_params(w, obj, depth)
    else:
        raise TypeError(f"Cannot export {type(obj).__name__} as Go code")


def go_code(obj: Document) -> str:
    """Return the Go initializer expression for *obj*."""
    buf = io.StringIO()
    write_go_code(buf, obj)
    return buf.getvalue()


def go_prelude(var_name: str, config: ParamStyleConfig | None = None) -> str:
    """File header up to and including ``var <name> = ``."""
    config = config or ParamStyleConfig()
    return (
        "// File generated by paramstyle export\n\n"
        f"package {config.go_package}\n\n"
        f"import {_q(config.go_import)}\n\n"
        f"var {var_name} = "
    )


def go_source(obj: Document, config: ParamStyleConfig | None = None) -> str:
    """A complete Go source file declaring *obj* as a package variable.

    :func:`go_code` renders a Set or Sel as its bare field list; here it is
    wrapped in a ``params.Set{...}`` / ``params.Sel{...}`` literal.
    """
    config = config or ParamStyleConfig()
    var_name = config.go_var or _DEFAULT_VARS.get(type(obj), "SavedParams")
    code = go_code(obj)
    if isinstance(obj, Set):
        code = f"params.Set{{{code}}}"
    elif isinstance(obj, Sel):
        code = f"params.Sel{{{code}}}"
    source = go_prelude(var_name, config) + code
    return source if source.endswith("\n") else source + "\n"


def save_go_code(obj: Document, filename: str | Path, config: ParamStyleConfig | None = None) -> None:
    """Write a complete Go source file for *obj* to *filename*."""
    source = go_source(obj, config)
    try:
        Path(filename).write_text(source, encoding="utf-8")
    except OSError as exc:
        logger.error("Could not save Go code to %s: %s", filename, exc)
        raise CodecIOError(str(filename), exc) from exc
    logger.info("Saved Go code to %s", filename)
