"""Tests for Go initializer export."""

import io

import pytest

from paramstyle.codec import go_code, go_source, save_go_code, write_go_code
from paramstyle.config import ParamStyleConfig
from paramstyle.errors import CodecIOError
from paramstyle.model import Sel, Sheet, Sheets


class TestGoCode:
    def test_params_sorted(self):
        assert go_code({"b": "2", "a": "1"}) == 'params.Params{\n\t"a": "1",\n\t"b": "2",\n}'

    def test_sel(self):
        code = go_code(Sel("Layer", "d", {"x": "1"}))
        assert code == 'Sel: "Layer", Desc: "d",\n\tParams: params.Params{\n\t\t"x": "1",\n\t}'

    def test_sheet(self):
        code = go_code(Sheet([Sel("L", params={"x": "1"})]))
        assert code == (
            "params.Sheet{\n"
            '\t{Sel: "L", Desc: "",\n'
            "\t\tParams: params.Params{\n"
            '\t\t\t"x": "1",\n'
            "\t\t}},\n"
            "}"
        )

    def test_sheets_sorted_by_name(self):
        code = go_code(Sheets({"Zeta": Sheet(), "Alpha": Sheet()}))
        assert code.index('"Alpha": &params.Sheet{') < code.index('"Zeta": &params.Sheet{')

    def test_strings_are_quoted(self):
        code = go_code(Sel("Layer", 'say "hi"', {}))
        assert 'Desc: "say \\"hi\\""' in code

    def test_sets(self, sample_sets):
        code = go_code(sample_sets)
        assert code.startswith("params.Sets{\n\t{Name: \"Base\", Desc: \"baseline params\", Sheets: params.Sheets{\n")
        assert code.endswith("}\n")
        assert code.index('"Env"') < code.index('"Network"')
        assert '{Name: "HighGain"' in code

    def test_write_to_stream(self):
        buf = io.StringIO()
        write_go_code(buf, {"a": "1"})
        assert buf.getvalue() == go_code({"a": "1"})

    def test_unknown_type(self):
        with pytest.raises(TypeError):
            go_code(3.5)  # type: ignore[arg-type]


class TestGoSource:
    def test_default_header(self, sample_sets):
        source = go_source(sample_sets)
        assert source.startswith("// File generated by paramstyle export\n\npackage main\n\n")
        assert 'import "github.com/emer/emergent/params"\n' in source
        assert "var SavedParamsSets = params.Sets{\n" in source
        assert source.endswith("}\n")

    def test_config_overrides(self):
        config = ParamStyleConfig(go_package="sim", go_var="Defaults")
        source = go_source(Sheet([Sel("Layer")]), config)
        assert "package sim\n" in source
        assert "var Defaults = params.Sheet{" in source

    def test_single_sheet_has_no_trailing_comma(self):
        source = go_source(Sheet([Sel("Layer", params={"x": "1"})]))
        assert source.endswith("\t}},\n}\n")

    def test_single_set_wrapped_in_literal(self, sample_sets):
        source = go_source(sample_sets[1])
        assert 'var SavedParamsSet = params.Set{Name: "HighGain", Desc: "more gain", Sheets: params.Sheets{\n' in source
        assert source.endswith("\t},\n}}\n")

    def test_single_sel_wrapped_in_literal(self):
        source = go_source(Sel("Layer", "", {"x": "1"}))
        assert 'var SavedParamsSel = params.Sel{Sel: "Layer", Desc: "",\n' in source
        assert source.endswith("\t}}\n")

    def test_var_name_follows_type(self):
        assert "var SavedParams = params.Params{" in go_source({"a": "1"})
        assert "var SavedParamsSheets = " in go_source(Sheets())

    def test_always_ends_with_newline(self):
        assert go_source({"a": "1"}).endswith("}\n")

    def test_save(self, tmp_path, sample_sets):
        path = tmp_path / "params.go"
        save_go_code(sample_sets, path)
        assert path.read_text(encoding="utf-8") == go_source(sample_sets)

    def test_save_failure(self, tmp_path, sample_sets):
        with pytest.raises(CodecIOError):
            save_go_code(sample_sets, tmp_path / "missing" / "params.go")
