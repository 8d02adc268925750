"""Record: a generic styleable target backed by a nested dict."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from paramstyle.errors import CodecError


@dataclass
class Record:
    """A plain-data target, e.g. a layer described in a JSON file.

    Parameter paths resolve against ``fields``, so ``Learn.Lrate`` addresses
    ``fields["Learn"]["Lrate"]``.
    """

    type_name: str
    name: str
    style_class: str = ""
    fields: dict[str, Any] = field(default_factory=dict)

    def params_root(self) -> dict[str, Any]:
        return self.fields

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type_name, "name": self.name}
        if self.style_class:
            data["class"] = self.style_class
        data["fields"] = copy.deepcopy(self.fields)
        return data

    @classmethod
    def from_dict(cls, data: Any, location: str = "") -> Record:
        if not isinstance(data, dict):
            raise CodecError("target must be an object", location or None)
        try:
            type_name = data["type"]
            name = data["name"]
        except KeyError as exc:
            raise CodecError(f"target is missing {exc.args[0]!r}", location or None) from None
        fields_ = data.get("fields", {})
        if not isinstance(fields_, dict):
            raise CodecError("target 'fields' must be an object", location or None)
        return cls(
            type_name=str(type_name),
            name=str(name),
            style_class=str(data.get("class", "")),
            fields=copy.deepcopy(fields_),
        )


def records_from_list(data: Any) -> list[Record]:
    """Build Records from a decoded JSON list of target objects."""
    if not isinstance(data, list):
        raise CodecError("targets document must be a list")
    return [Record.from_dict(item, location=f"[{i}]") for i, item in enumerate(data)]
