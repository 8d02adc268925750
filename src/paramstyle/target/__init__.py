"""Styleable targets: the identity capability and field-path resolution."""

from paramstyle.target.fields import (
    FieldRef,
    FieldSpec,
    all_params,
    convert,
    field_table,
    format_value,
    iter_fields,
    non_default_params,
    resolve,
)
from paramstyle.target.record import Record, records_from_list
from paramstyle.target.styler import Styler, class_tags, target_label

__all__ = [
    "Styler",
    "class_tags",
    "target_label",
    "FieldRef",
    "FieldSpec",
    "resolve",
    "convert",
    "format_value",
    "iter_fields",
    "field_table",
    "all_params",
    "non_default_params",
    "Record",
    "records_from_list",
]
