"""Field-path resolution and string conversion for styleable targets.

Paths are dot separated.  Each segment addresses a dataclass field, a key
of a mapping, or an integer index of a list::

    Learn.Lrate          -> target.Learn.Lrate
    Prjns.0.WtScale.Abs  -> target.Prjns[0].WtScale.Abs
    fields.Act.Gain      -> target.fields["Act"]["Gain"]

Leaves must be scalars: ``float``, ``int``, ``bool``, ``str`` or an ``Enum``.
"""

from __future__ import annotations

import dataclasses
import functools
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from paramstyle.errors import PathError

FLOAT = "float"
INT = "int"
BOOL = "bool"
ENUM = "enum"
STR = "str"

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})

_MISSING = object()


@dataclass(frozen=True)
class FieldSpec:
    """Scalar kind of a leaf field (plus its Enum type for ENUM leaves)."""

    kind: str
    enum_type: type[Enum] | None = None
    # INT only: accept non-integer text as float
    widen: bool = False


@dataclass
class FieldRef:
    """A resolved leaf: the container holding it and the key within it."""

    owner: Any
    key: str | int
    spec: FieldSpec
    path: str = ""

    @property
    def kind(self) -> str:
        return self.spec.kind

    def get(self) -> Any:
        if dataclasses.is_dataclass(self.owner):
            return getattr(self.owner, self.key)  # type: ignore[arg-type]
        return self.owner[self.key]

    def get_string(self) -> str:
        return format_value(self.get())

    def set(self, raw: str) -> None:
        """Convert *raw* to the field's kind and assign it."""
        try:
            value = convert(raw, self.spec)
        except ValueError as exc:
            raise PathError(self.path, str(exc)) from exc
        try:
            if dataclasses.is_dataclass(self.owner):
                setattr(self.owner, self.key, value)  # type: ignore[arg-type]
            else:
                self.owner[self.key] = value
        # frozen dataclasses raise FrozenInstanceError, an AttributeError
        except (AttributeError, TypeError) as exc:
            raise PathError(self.path, f"cannot assign: {exc}") from exc


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


def convert(raw: str, spec: FieldSpec) -> Any:
    """Convert a serialized value to the Python type described by *spec*."""
    text = raw.strip()
    if spec.kind == BOOL:
        lowered = text.lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"invalid bool value {raw!r}")
    if spec.kind == INT:
        try:
            return int(text)
        except ValueError:
            if spec.widen:
                try:
                    return float(text)
                except ValueError:
                    pass
            raise ValueError(f"invalid int value {raw!r}") from None
    if spec.kind == FLOAT:
        try:
            return float(text)
        except ValueError:
            raise ValueError(f"invalid float value {raw!r}") from None
    if spec.kind == ENUM:
        if spec.enum_type is None:
            raise ValueError("enum field has no Enum type")
        try:
            return spec.enum_type[text]
        except KeyError:
            pass
        for member in spec.enum_type:
            if str(member.value) == text:
                return member
        names = ", ".join(m.name for m in spec.enum_type)
        raise ValueError(f"{raw!r} is not one of {spec.enum_type.__name__}: {names}")
    return raw


def format_value(value: Any) -> str:
    """Serialize a scalar value the way params files write it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.name
    return str(value)


# ---------------------------------------------------------------------------
# Kind lookup
# ---------------------------------------------------------------------------


def spec_for(annotation: Any) -> FieldSpec | None:
    """Return the FieldSpec for a type annotation, or None if not a scalar."""
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) != 1:
            return None
        annotation = args[0]
    if typing.get_origin(annotation) is not None or not isinstance(annotation, type):
        return None
    # bool before int: bool is an int subclass
    if issubclass(annotation, bool):
        return FieldSpec(BOOL)
    if issubclass(annotation, Enum):
        return FieldSpec(ENUM, annotation)
    if issubclass(annotation, int):
        return FieldSpec(INT)
    if issubclass(annotation, float):
        return FieldSpec(FLOAT)
    if issubclass(annotation, str):
        return FieldSpec(STR)
    return None


def _value_spec(value: Any) -> FieldSpec | None:
    """FieldSpec for an untyped leaf, inferred from its current value.

    JSON writes whole floats as ints, so an int-valued leaf also takes floats.
    """
    spec = spec_for(type(value))
    if spec is not None and spec.kind == INT:
        return FieldSpec(INT, widen=True)
    return spec


@functools.lru_cache(maxsize=None)
def _type_hints(cls: type) -> dict[str, Any]:
    return typing.get_type_hints(cls)


@functools.lru_cache(maxsize=None)
def _field_names(cls: type) -> frozenset[str]:
    return frozenset(f.name for f in dataclasses.fields(cls))


def _params_root(target: Any) -> Any:
    root = getattr(target, "params_root", None)
    return root() if callable(root) else target


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def resolve(target: Any, path: str) -> FieldRef:
    """Resolve a dotted *path* on *target* to a scalar leaf.

    Raises PathError if a segment does not exist or the leaf is not a scalar.
    """
    segments = path.split(".")
    if any(not s for s in segments):
        raise PathError(path, "empty path segment")

    obj = _params_root(target)
    for i, seg in enumerate(segments):
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            if seg not in _field_names(type(obj)):
                raise PathError(path, f"{type(obj).__name__} has no field {seg!r}")
            key: str | int = seg
            value = getattr(obj, seg)
            spec = spec_for(_type_hints(type(obj)).get(seg)) or spec_for(type(value))
        elif isinstance(obj, Mapping):
            if seg not in obj:
                raise PathError(path, f"no entry {seg!r}")
            key = seg
            value = obj[seg]
            spec = _value_spec(value)
        elif isinstance(obj, list):
            try:
                key = int(seg)
            except ValueError:
                raise PathError(path, f"expected list index, got {seg!r}") from None
            if not 0 <= key < len(obj):
                raise PathError(path, f"index {key} out of range")
            value = obj[key]
            spec = _value_spec(value)
        else:
            raise PathError(path, f"cannot resolve {seg!r} on {type(obj).__name__}")

        if i == len(segments) - 1:
            if spec is None:
                raise PathError(path, "not a scalar field")
            return FieldRef(owner=obj, key=key, spec=spec, path=path)
        obj = value

    raise PathError(path, "empty path")  # unreachable: split() is never empty


def iter_fields(target: Any) -> Iterator[tuple[str, FieldRef]]:
    """Yield every scalar leaf reachable from *target* with its path."""
    yield from _walk(_params_root(target), "")


def _walk(obj: Any, prefix: str) -> Iterator[tuple[str, FieldRef]]:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        hints = _type_hints(type(obj))
        children = []
        for f in dataclasses.fields(obj):
            value = getattr(obj, f.name)
            children.append((f.name, value, spec_for(hints.get(f.name)) or spec_for(type(value))))
    elif isinstance(obj, Mapping):
        children = [(str(k), v, _value_spec(v)) for k, v in obj.items()]
    elif isinstance(obj, list):
        children = [(str(i), v, _value_spec(v)) for i, v in enumerate(obj)]
    else:
        return
    for key, value, spec in children:
        path = f"{prefix}{key}"
        if spec is not None:
            owner_key: str | int = int(key) if isinstance(obj, list) else key
            yield path, FieldRef(owner=obj, key=owner_key, spec=spec, path=path)
        else:
            yield from _walk(value, path + ".")


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------


@functools.lru_cache(maxsize=None)
def field_table(cls: type) -> dict[str, FieldSpec]:
    """Flattened leaf paths of a dataclass type, with their kinds."""
    table: dict[str, FieldSpec] = {}
    hints = _type_hints(cls)
    for f in dataclasses.fields(cls):
        hint = hints.get(f.name)
        spec = spec_for(hint)
        if spec is not None:
            table[f.name] = spec
        elif isinstance(hint, type) and dataclasses.is_dataclass(hint):
            for sub, sub_spec in field_table(hint).items():
                table[f"{f.name}.{sub}"] = sub_spec
    return table


def _default_for(cls: type, path: str) -> Any:
    """Dataclass default for a leaf path, or _MISSING when there is none."""
    segments = path.split(".")
    by_name = {f.name: f for f in dataclasses.fields(cls)}
    f = by_name.get(segments[0])
    if f is None:
        return _MISSING
    if f.default is not dataclasses.MISSING:
        value = f.default
    elif f.default_factory is not dataclasses.MISSING:
        value = f.default_factory()
    else:
        return _MISSING
    for seg in segments[1:]:
        if not dataclasses.is_dataclass(value):
            return _MISSING
        value = getattr(value, seg, _MISSING)
        if value is _MISSING:
            return _MISSING
    return value


def all_params(target: Any) -> str:
    """List every scalar leaf of *target* as ``path: value`` lines."""
    return "\n".join(f"{path}: {ref.get_string()}" for path, ref in iter_fields(target))


def non_default_params(target: Any) -> str:
    """List the leaves of a dataclass target that differ from their defaults."""
    root = _params_root(target)
    lines = []
    for path, ref in iter_fields(target):
        default = _default_for(type(root), path) if dataclasses.is_dataclass(root) else _MISSING
        if default is _MISSING or default != ref.get():
            lines.append(f"{path}: {ref.get_string()}")
    return "\n".join(lines)
