"""Tests for field-path resolution, conversion and listings."""

import pytest

from paramstyle.errors import PathError
from paramstyle.target import (
    FieldSpec,
    Record,
    Styler,
    all_params,
    class_tags,
    convert,
    field_table,
    non_default_params,
    resolve,
)
from tests.sample_targets import ActFun, Layer, Prjn


# ---------------------------------------------------------------------------
# Styler capability
# ---------------------------------------------------------------------------


class TestStyler:
    def test_dataclass_target_is_styler(self):
        assert isinstance(Layer(name="h"), Styler)

    def test_record_is_styler(self):
        assert isinstance(Record(type_name="Layer", name="h"), Styler)

    def test_class_tags_split(self):
        assert class_tags(Layer(name="h", style_class="Hidden  Fast")) == ["Hidden", "Fast"]

    def test_class_tags_empty(self):
        assert class_tags(Layer(name="h")) == []


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


class TestResolve:
    def test_nested_float(self):
        layer = Layer(name="h")
        ref = resolve(layer, "Learn.Lrate")
        assert ref.kind == "float"
        assert ref.get() == 0.04

    def test_set_float(self):
        layer = Layer(name="h")
        resolve(layer, "Learn.Lrate").set("0.2")
        assert layer.Learn.Lrate == 0.2

    def test_set_int(self):
        layer = Layer(name="h")
        resolve(layer, "Act.Cycles").set("75")
        assert layer.Act.Cycles == 75

    def test_set_bool(self):
        layer = Layer(name="h")
        resolve(layer, "Learn.Enabled").set("false")
        assert layer.Learn.Enabled is False

    def test_set_enum_by_name(self):
        layer = Layer(name="h")
        resolve(layer, "Act.Fun").set("RELU")
        assert layer.Act.Fun is ActFun.RELU

    def test_set_enum_by_value(self):
        layer = Layer(name="h")
        resolve(layer, "Act.Fun").set("relu")
        assert layer.Act.Fun is ActFun.RELU

    def test_list_index(self):
        layer = Layer(name="h", Prjns=[Prjn(name="a"), Prjn(name="b")])
        resolve(layer, "Prjns.1.WtScale").set("0.5")
        assert layer.Prjns[1].WtScale == 0.5
        assert layer.Prjns[0].WtScale == 1.0

    def test_mapping_key(self):
        layer = Layer(name="h", Gains={"Input": 1.0})
        ref = resolve(layer, "Gains.Input")
        assert ref.kind == "float"
        ref.set("2.5")
        assert layer.Gains["Input"] == 2.5

    def test_record_resolves_against_fields(self):
        rec = Record(type_name="Layer", name="h", fields={"Act": {"Gain": 1.0, "On": True}})
        resolve(rec, "Act.Gain").set("3")
        resolve(rec, "Act.On").set("no")
        assert rec.fields["Act"] == {"Gain": 3.0, "On": False}

    def test_unknown_field(self):
        with pytest.raises(PathError, match="no field 'Lrat'"):
            resolve(Layer(name="h"), "Learn.Lrat")

    def test_empty_segment(self):
        with pytest.raises(PathError, match="empty path segment"):
            resolve(Layer(name="h"), "Learn..Lrate")

    def test_non_scalar_leaf(self):
        with pytest.raises(PathError, match="not a scalar"):
            resolve(Layer(name="h"), "Learn")

    def test_bad_list_index(self):
        layer = Layer(name="h", Prjns=[Prjn()])
        with pytest.raises(PathError, match="out of range"):
            resolve(layer, "Prjns.3.WtScale")
        with pytest.raises(PathError, match="expected list index"):
            resolve(layer, "Prjns.first.WtScale")

    def test_cannot_descend_into_scalar(self):
        with pytest.raises(PathError, match="cannot resolve"):
            resolve(Layer(name="h"), "Learn.Lrate.Extra")

    def test_bad_value_raises_path_error(self):
        ref = resolve(Layer(name="h"), "Learn.Lrate")
        with pytest.raises(PathError) as excinfo:
            ref.set("fast")
        assert excinfo.value.path == "Learn.Lrate"

    def test_get_string_formats(self):
        layer = Layer(name="h")
        assert resolve(layer, "Learn.Enabled").get_string() == "true"
        assert resolve(layer, "Act.Fun").get_string() == "SIGMOID"
        assert resolve(layer, "Act.Cycles").get_string() == "50"


# ---------------------------------------------------------------------------
# convert
# ---------------------------------------------------------------------------


class TestConvert:
    @pytest.mark.parametrize("raw", ["true", "True", "1", "yes", "ON"])
    def test_truthy(self, raw):
        assert convert(raw, FieldSpec("bool")) is True

    @pytest.mark.parametrize("raw", ["false", "0", "No", "off"])
    def test_falsy(self, raw):
        assert convert(raw, FieldSpec("bool")) is False

    def test_bad_bool(self):
        with pytest.raises(ValueError, match="invalid bool"):
            convert("maybe", FieldSpec("bool"))

    def test_bad_int(self):
        with pytest.raises(ValueError, match="invalid int"):
            convert("1.5", FieldSpec("int"))

    def test_bad_enum_lists_members(self):
        with pytest.raises(ValueError, match="SIGMOID, RELU"):
            convert("tanh", FieldSpec("enum", ActFun))

    def test_enum_spec_without_type(self):
        with pytest.raises(ValueError, match="no Enum type"):
            convert("RELU", FieldSpec("enum"))

    def test_widened_int_takes_float(self):
        assert convert("1.5", FieldSpec("int", widen=True)) == 1.5
        assert convert("2", FieldSpec("int", widen=True)) == 2
        with pytest.raises(ValueError, match="invalid int"):
            convert("fast", FieldSpec("int", widen=True))

    def test_typed_int_stays_strict(self):
        layer = Layer(name="h")
        with pytest.raises(PathError, match="invalid int"):
            resolve(layer, "Act.Cycles").set("1.5")

    def test_str_kept_verbatim(self):
        assert convert(" spaced ", FieldSpec("str")) == " spaced "


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------


class TestListings:
    def test_field_table_flattens_nested_dataclasses(self):
        table = field_table(Layer)
        assert table["Learn.Lrate"] == FieldSpec("float")
        assert table["Act.Fun"] == FieldSpec("enum", ActFun)
        assert table["Learn.Enabled"].kind == "bool"
        assert "Prjns" not in table

    def test_all_params_lists_every_leaf(self):
        text = all_params(Layer(name="h", Prjns=[Prjn(name="p")]))
        lines = text.splitlines()
        assert "Learn.Lrate: 0.04" in lines
        assert "Act.Fun: SIGMOID" in lines
        assert "Prjns.0.WtScale: 1.0" in lines

    def test_non_default_params(self):
        layer = Layer(name="h")
        layer.Learn.Lrate = 0.1
        text = non_default_params(layer)
        assert "Learn.Lrate: 0.1" in text
        assert "Learn.Momentum" not in text
        # name has no default, so it is always listed
        assert "name: h" in text
