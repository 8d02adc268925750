"""Persistence (JSON) and Go initializer export."""

from paramstyle.codec.gocode import go_code, go_source, save_go_code, write_go_code
from paramstyle.codec.json_codec import dumps, load, loads, save, to_data
from paramstyle.codec.store import ParamStore

__all__ = [
    "dumps",
    "loads",
    "load",
    "save",
    "to_data",
    "go_code",
    "go_source",
    "write_go_code",
    "save_go_code",
    "ParamStore",
]
