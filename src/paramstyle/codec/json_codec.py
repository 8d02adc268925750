"""JSON persistence for params documents (the ``.params`` file format).

Layout, from the inside out::

    Params  {"Learn.Lrate": "0.05", ...}
    Sel     {"Sel": ".Hidden", "Desc": "...", "Params": {...}}
    Sheet   [Sel, ...]
    Sheets  {"Network": Sheet, ...}
    Set     {"Name": "Base", "Desc": "...", "Sheets": Sheets}
    Sets    [Set, ...]

Output sorts object keys so files are byte-stable and diff cleanly.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, TypeVar, Union

from paramstyle.errors import CodecError, CodecIOError
from paramstyle.model.params import Params, Sel, Set, Sets, Sheet, Sheets
from paramstyle.target.fields import format_value

logger = logging.getLogger(__name__)

Document = Union[Sets, Set, Sheets, Sheet, Sel, dict]
T = TypeVar("T")


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def to_data(obj: Document) -> Any:
    """Convert a model object into JSON-compatible data."""
    if isinstance(obj, Sets):
        return [to_data(s) for s in obj]
    if isinstance(obj, Set):
        return {"Name": obj.name, "Desc": obj.desc, "Sheets": to_data(obj.sheets)}
    if isinstance(obj, Sheets):
        return {name: to_data(sheet) for name, sheet in obj.items()}
    if isinstance(obj, Sheet):
        return [to_data(sel) for sel in obj]
    if isinstance(obj, Sel):
        return {"Sel": obj.sel, "Desc": obj.desc, "Params": dict(obj.params)}
    if isinstance(obj, dict):
        return dict(obj)
    raise TypeError(f"Cannot encode {type(obj).__name__} as params JSON")


def dumps(obj: Document, indent: int = 2) -> str:
    return json.dumps(to_data(obj), indent=indent, sort_keys=True, ensure_ascii=False) + "\n"


def save(obj: Document, filename: str | Path, indent: int = 2) -> None:
    """Write *obj* to *filename* as JSON."""
    text = dumps(obj, indent=indent)
    try:
        Path(filename).write_text(text, encoding="utf-8")
    except OSError as exc:
        logger.error("Could not save params to %s: %s", filename, exc)
        raise CodecIOError(str(filename), exc) from exc
    logger.info("Saved %s to %s", type(obj).__name__, filename)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _expect(data: Any, kind: type, what: str, loc: str) -> Any:
    if not isinstance(data, kind):
        raise CodecError(f"{what} must be a JSON {'object' if kind is dict else 'array'}", loc)
    return data


def _string(data: dict, key: str, loc: str, required: bool = True) -> str:
    if key not in data:
        if required:
            raise CodecError(f"missing {key!r}", loc)
        return ""
    value = data[key]
    if not isinstance(value, str):
        raise CodecError(f"{key!r} must be a string", loc)
    return value


def params_from_data(data: Any, loc: str = "$") -> Params:
    _expect(data, dict, "Params", loc)
    params: Params = {}
    for path, value in data.items():
        if isinstance(value, str):
            params[path] = value
        elif isinstance(value, (bool, int, float)):
            params[path] = format_value(value)
        else:
            raise CodecError(f"value for {path!r} must be a string", loc)
    return params


def sel_from_data(data: Any, loc: str = "$") -> Sel:
    _expect(data, dict, "Sel", loc)
    return Sel(
        sel=_string(data, "Sel", loc),
        desc=_string(data, "Desc", loc, required=False),
        params=params_from_data(data.get("Params", {}), f"{loc}.Params"),
    )


def sheet_from_data(data: Any, loc: str = "$") -> Sheet:
    _expect(data, list, "Sheet", loc)
    return Sheet(sels=[sel_from_data(item, f"{loc}[{i}]") for i, item in enumerate(data)])


def sheets_from_data(data: Any, loc: str = "$") -> Sheets:
    _expect(data, dict, "Sheets", loc)
    return Sheets(
        sheets={name: sheet_from_data(item, f"{loc}.{name}") for name, item in data.items()}
    )


def set_from_data(data: Any, loc: str = "$") -> Set:
    _expect(data, dict, "Set", loc)
    return Set(
        name=_string(data, "Name", loc),
        desc=_string(data, "Desc", loc, required=False),
        sheets=sheets_from_data(data.get("Sheets", {}), f"{loc}.Sheets"),
    )


def sets_from_data(data: Any, loc: str = "$") -> Sets:
    _expect(data, list, "Sets", loc)
    return Sets(sets=[set_from_data(item, f"{loc}[{i}]") for i, item in enumerate(data)])


_DECODERS: dict[type, Callable[[Any, str], Any]] = {
    Sets: sets_from_data,
    Set: set_from_data,
    Sheets: sheets_from_data,
    Sheet: sheet_from_data,
    Sel: sel_from_data,
    dict: params_from_data,
}


def loads(text: str, kind: type[T] = Sets) -> T:  # type: ignore[assignment]
    """Parse *text* as a params document of the given model type.

    Pass ``dict`` as *kind* to read a bare Params mapping.
    """
    try:
        decoder = _DECODERS[kind]
    except KeyError:
        raise TypeError(f"Cannot decode params JSON as {kind.__name__}") from None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CodecError(f"malformed JSON: {exc.msg}", f"line {exc.lineno} column {exc.colno}") from exc
    return decoder(data, "$")


def load(filename: str | Path, kind: type[T] = Sets) -> T:  # type: ignore[assignment]
    """Read a params document of the given model type from *filename*."""
    try:
        text = Path(filename).read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Could not open params file %s: %s", filename, exc)
        raise CodecIOError(str(filename), exc) from exc
    except UnicodeDecodeError as exc:
        logger.error("Params file %s is not UTF-8: %s", filename, exc)
        raise CodecError("file is not valid UTF-8", str(filename)) from exc
    obj = loads(text, kind)
    logger.info("Loaded %s from %s", kind.__name__, filename)
    return obj
