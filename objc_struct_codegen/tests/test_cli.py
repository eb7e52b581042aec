"""
Tests for the objc_struct_codegen command line.
"""

from __future__ import annotations

import json

from click.testing import CliRunner

from objc_struct_codegen.objc_struct_codegen import objc_struct_codegen

MODEL = {
    "moduleName": "NativePoint",
    "structs": [
        {
            "name": "point",
            "properties": [
                {"name": "x", "optional": False, "typeAnnotation": {"type": "DoubleTypeAnnotation"}},
                {"name": "y", "optional": True, "typeAnnotation": {"type": "DoubleTypeAnnotation"}},
            ],
        }
    ],
}


def _write_model(tmp_path, model=MODEL, name="model.json"):
    path = tmp_path / name
    path.write_text(json.dumps(model))
    return path


class TestCli:
    def test_generates_header(self, tmp_path):
        model_path = _write_model(tmp_path)
        output = tmp_path / "NativePoint.h"

        result = CliRunner().invoke(objc_struct_codegen, [str(model_path), str(output)])

        assert result.exit_code == 0, result.output
        header = output.read_text()
        assert "double x() const;" in header
        assert "folly::Optional<double> y() const;" in header
        assert "// Generated by objc_struct_codegen" in header
        assert "objc_struct_codegen model.json NativePoint.h" in header

    def test_module_name_option(self, tmp_path):
        model_path = _write_model(tmp_path)
        output = tmp_path / "out.h"

        result = CliRunner().invoke(objc_struct_codegen, ["--name", "Other", str(model_path), str(output)])

        assert result.exit_code == 0, result.output
        assert "namespace Other {" in output.read_text()

    def test_module_name_defaults_to_file_stem(self, tmp_path):
        model = {"structs": MODEL["structs"]}
        model_path = _write_model(tmp_path, model, name="NativeFromStem.json")
        output = tmp_path / "out.h"

        result = CliRunner().invoke(objc_struct_codegen, [str(model_path), str(output)])

        assert result.exit_code == 0, result.output
        assert "namespace NativeFromStem {" in output.read_text()

    def test_optional_style_option(self, tmp_path):
        model_path = _write_model(tmp_path)
        output = tmp_path / "out.h"

        result = CliRunner().invoke(objc_struct_codegen, ["--optional-style", "std", str(model_path), str(output)])

        assert result.exit_code == 0, result.output
        assert "std::optional<double> y() const;" in output.read_text()

    def test_config_file(self, tmp_path):
        model_path = _write_model(tmp_path)
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"add_generation_comment": False, "optional_style": "std"}))
        output = tmp_path / "out.h"

        result = CliRunner().invoke(objc_struct_codegen, ["-c", str(config_path), str(model_path), str(output)])

        assert result.exit_code == 0, result.output
        header = output.read_text()
        assert header.startswith("#ifndef __cplusplus")
        assert "std::optional<double>" in header

    def test_existing_output_requires_force(self, tmp_path):
        model_path = _write_model(tmp_path)
        output = tmp_path / "out.h"
        output.write_text("old")

        result = CliRunner().invoke(objc_struct_codegen, [str(model_path), str(output)])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert output.read_text() == "old"

        result = CliRunner().invoke(objc_struct_codegen, ["--force", str(model_path), str(output)])
        assert result.exit_code == 0, result.output
        assert "struct Point {" in output.read_text()

    def test_unmappable_type_is_reported(self, tmp_path):
        model = {
            "moduleName": "M",
            "structs": [{"name": "a", "properties": [{"name": "t", "typeAnnotation": {"type": "ReservedTypeAnnotation", "name": "Nope"}}]}],
        }
        model_path = _write_model(tmp_path, model)
        output = tmp_path / "out.h"

        result = CliRunner().invoke(objc_struct_codegen, [str(model_path), str(output)])

        assert result.exit_code == 1
        assert "Couldn't convert into ObjC type: Nope" in result.output
        assert not output.exists()

    def test_malformed_model_is_reported(self, tmp_path):
        model = {"moduleName": "M", "structs": [{"name": "a", "properties": [{"name": "t", "typeAnnotation": {"type": "Bogus"}}]}]}
        model_path = _write_model(tmp_path, model)

        result = CliRunner().invoke(objc_struct_codegen, [str(model_path), str(tmp_path / "out.h")])

        assert result.exit_code == 1
        assert "Unknown type annotation: Bogus" in result.output
