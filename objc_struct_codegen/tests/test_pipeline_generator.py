"""
Tests for PipelineGenerator: struct selection, header assembly and writing.
"""

from __future__ import annotations

import pytest

from objc_struct_codegen import __version__
from objc_struct_codegen.pipeline import (
    CodeGeneratorConfig,
    OptionalStyle,
    OutputConfig,
    OutputMode,
    OutputValidationError,
    PipelineGenerator,
    UnmappableTypeError,
    UnmappableValueError,
)
from objc_struct_codegen.pipeline.schema_ast import ModuleSchema, NumberTypeAnnotation, RegularStruct, StructProperty
from objc_struct_codegen.pipeline.writer import AtomicWriter


def _struct(name, *props):
    return {
        "name": name,
        "properties": [{"name": p, "optional": False, "typeAnnotation": {"type": "NumberTypeAnnotation"}} for p in props],
    }


MODEL = {
    "moduleName": "NativeShapes",
    "structs": [_struct("circle", "radius"), _struct("square", "side"), _struct("triangle", "base", "height")],
}


def _generate(model=MODEL, **config_values):
    config = CodeGeneratorConfig(add_generation_comment=False)
    for key, value in config_values.items():
        setattr(config, key, value)
    return PipelineGenerator(None, model, config).generate()


class TestStructSelection:
    def test_declaration_order_is_kept(self):
        header = _generate()
        assert header.index("struct Circle {") < header.index("struct Square {") < header.index("struct Triangle {")

    def test_declarations_precede_methods(self):
        header = _generate()
        assert header.rindex("@end") < header.index("inline double")

    def test_ignore_structs(self):
        header = _generate(ignore_structs=["square"])
        assert "struct Square" not in header
        assert "JS::NativeShapes::Square" not in header
        assert "struct Circle {" in header

    def test_order_structs(self):
        header = _generate(order_structs=["triangle", "circle"])
        assert header.index("struct Triangle {") < header.index("struct Circle {") < header.index("struct Square {")

    def test_repeated_order_entries_emit_once(self):
        header = _generate(order_structs=["circle", "circle"])
        assert header.count("struct Circle {") == 1
        assert header.count("@interface RCTCxxConvert (NativeShapes_Circle)") == 1
        assert header.count("inline double JS::NativeShapes::Circle::radius() const") == 1

    def test_parallel_output_is_identical(self):
        assert _generate(parallel=True) == _generate()

    def test_generation_is_deterministic(self):
        assert _generate() == _generate()


class TestHeader:
    def test_module_name_override(self):
        header = PipelineGenerator("Renamed", MODEL, CodeGeneratorConfig(add_generation_comment=False)).generate()
        assert "namespace Renamed {" in header
        assert "NativeShapes" not in header

    def test_parsed_schema_is_accepted(self):
        schema = ModuleSchema(
            module_name="M",
            structs=(RegularStruct(name="a", properties=(StructProperty(name="b", type_annotation=NumberTypeAnnotation()),)),),
        )
        header = PipelineGenerator(None, schema, CodeGeneratorConfig(add_generation_comment=False)).generate()
        assert "inline double JS::M::A::b() const" in header

    def test_generation_comment(self):
        header = PipelineGenerator(None, MODEL).generate()
        assert header.startswith(f"// Generated by objc_struct_codegen v{__version__} : objc_struct_codegen")

    def test_folly_imports(self):
        header = _generate()
        assert "#import <folly/Optional.h>" in header
        assert "#import <optional>" not in header

    def test_std_optional_style(self):
        model = {
            "moduleName": "M",
            "structs": [
                {
                    "name": "a",
                    "properties": [
                        {"name": "b", "optional": True, "typeAnnotation": {"type": "NumberTypeAnnotation"}},
                        {"name": "c", "optional": True, "typeAnnotation": {"type": "TypeAliasTypeAnnotation", "name": "d"}},
                    ],
                },
                {"name": "d", "properties": []},
            ],
        }
        header = _generate(model, optional_style=OptionalStyle.STD)
        assert "#import <optional>" in header
        assert "folly" not in header
        assert "std::optional<double> b() const;" in header
        assert "(p == nil ? std::nullopt : std::make_optional(JS::M::D(p)))" in header

    def test_empty_module(self):
        header = _generate({"moduleName": "M", "structs": []})
        assert header.endswith("NS_ASSUME_NONNULL_BEGIN\n\nNS_ASSUME_NONNULL_END\n")


class TestErrors:
    def test_unmappable_type_aborts_the_whole_run(self):
        model = {
            "moduleName": "M",
            "structs": [
                _struct("fine", "a"),
                {"name": "broken", "properties": [{"name": "tag", "typeAnnotation": {"type": "ReservedTypeAnnotation", "name": "Other"}}]},
            ],
        }
        with pytest.raises(UnmappableTypeError):
            _generate(model)

    def test_unmappable_value_is_raised_from_value_path(self, monkeypatch):
        from objc_struct_codegen.pipeline.backends import type_mapper

        # Type mapper knows a reserved name the value mapper does not
        monkeypatch.setitem(type_mapper.RESERVED_TYPES, "SurfaceId", "double")
        model = {
            "moduleName": "M",
            "structs": [{"name": "a", "properties": [{"name": "s", "typeAnnotation": {"type": "ReservedTypeAnnotation", "name": "SurfaceId"}}]}],
        }
        with pytest.raises(UnmappableValueError):
            _generate(model)


class TestWrite:
    def test_write(self, tmp_path):
        output = tmp_path / "out" / "NativeShapes.h"
        PipelineGenerator(None, MODEL).write(output)
        assert "struct Circle {" in output.read_text()
        assert list(output.parent.glob(".*.tmp")) == []

    def test_existing_file_is_an_error_by_default(self, tmp_path):
        output = tmp_path / "NativeShapes.h"
        output.write_text("keep me")
        with pytest.raises(FileExistsError):
            PipelineGenerator(None, MODEL).write(output)
        assert output.read_text() == "keep me"

    @pytest.mark.parametrize("atomic_write", [True, False])
    def test_force_overwrites(self, tmp_path, atomic_write):
        output = tmp_path / "NativeShapes.h"
        output.write_text("old")
        config = CodeGeneratorConfig(output=OutputConfig(mode=OutputMode.FORCE, atomic_write=atomic_write))
        PipelineGenerator(None, MODEL, config).write(output)
        assert "struct Square {" in output.read_text()

    def test_validation_failure_leaves_no_file(self, tmp_path):
        output = tmp_path / "bad.h"
        with pytest.raises(OutputValidationError):
            AtomicWriter().write(output, "namespace JS { struct A {\n")
        assert not output.exists()
        assert list(tmp_path.iterdir()) == []

    def test_custom_validator(self, tmp_path):
        seen = []
        AtomicWriter(validate_header=seen.append).write(tmp_path / "x.h", "anything")
        assert seen == ["anything"]


class TestConfig:
    def test_round_trip(self):
        config = CodeGeneratorConfig.from_dict(
            {
                "ignore_structs": ["a"],
                "optional_style": "std",
                "parallel": True,
                "output": {"mode": "force", "atomic_write": False},
                "unknown_key": 1,
            }
        )
        assert config.optional_style is OptionalStyle.STD
        assert config.output.mode is OutputMode.FORCE
        assert config.output.atomic_write is False
        assert config.output.validate_before_write is True
        assert not hasattr(config, "unknown_key")
        assert CodeGeneratorConfig.from_dict(config.to_dict()) == config
