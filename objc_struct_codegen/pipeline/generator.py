"""
Pipeline generator.

Runs the full generation for one native module:

1. Parse the JSON model into a ModuleSchema (unless one is given)
2. Select and order the structs per configuration
3. Serialize every struct (type mapper + value mapper per property)
4. Assemble the header between the fixed prefix and suffix
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any

from .. import __version__
from ..cli_utils import reconstruct_command_line
from .backends.header_backend import ObjCHeaderBackend
from .backends.naming import NamingContext
from .backends.struct_serializer import RegularStructSerializer, serialize_struct
from .config import CodeGeneratorConfig, OutputMode
from .schema_ast.nodes import ModuleSchema, Struct, StructSerializationOutput
from .schema_ast.parser import SchemaParser
from .writer.atomic_writer import AtomicWriter, validate_objc_header

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates an Objective-C++ header for one native module."""

    def __init__(
        self,
        module_name: str | None,
        schema: dict[str, Any] | ModuleSchema,
        config: CodeGeneratorConfig | None = None,
    ):
        """
        Initialize the generator.

        Args:
            module_name: Module name; None keeps the schema's own
            schema: JSON model or an already parsed ModuleSchema
            config: Code generation configuration
        """
        self.config = config or CodeGeneratorConfig()
        if isinstance(schema, ModuleSchema):
            self.schema = schema if not module_name else ModuleSchema(module_name=module_name, structs=schema.structs)
        else:
            self.schema = SchemaParser().parse(schema, module_name)
        self.module_name = self.schema.module_name

        self.naming = NamingContext(optional_style=self.config.optional_style)
        self.serializer = RegularStructSerializer(self.naming)
        self.header_backend = ObjCHeaderBackend(self.naming)

    def selected_structs(self) -> list[Struct]:
        """Structs to generate, after ignore and order configuration."""
        structs = [s for s in self.schema.structs if s.name not in self.config.ignore_structs]

        by_name = {s.name: s for s in structs}
        ordered = [by_name[name] for name in dict.fromkeys(self.config.order_structs) if name in by_name]
        ordered += [s for s in structs if s.name not in self.config.order_structs]
        return ordered

    def serialize_structs(self) -> list[StructSerializationOutput]:
        """Serialize the selected structs, preserving their order."""
        structs = self.selected_structs()

        def serialize(struct: Struct) -> StructSerializationOutput:
            logger.debug(f"Serializing struct {struct.name} ({len(struct.properties)} properties)")
            return serialize_struct(self.module_name, struct, self.serializer)

        if self.config.parallel and len(structs) > 1:
            with ThreadPoolExecutor() as executor:
                return list(executor.map(serialize, structs))
        return [serialize(struct) for struct in structs]

    def generate(self) -> str:
        """
        Generate the header.

        Returns:
            The header source

        Raises:
            CodegenError: If any struct cannot be mapped; nothing is produced
        """
        outputs = self.serialize_structs()
        logger.info(f"Generated {len(outputs)} struct(s) for module {self.module_name}")
        return self.header_backend.generate(outputs, self._generate_command_comment())

    def write(self, output: Path) -> None:
        """Generate the header and write it according to the output configuration."""
        content = self.generate()
        output_config = self.config.output
        validate = output_config.validate_before_write

        if output_config.atomic_write:
            writer = AtomicWriter()
            if output_config.mode == OutputMode.ERROR_IF_EXISTS:
                writer.write_if_not_exists(output, content, validate=validate)
            else:
                writer.write(output, content, validate=validate)
        else:
            if output_config.mode == OutputMode.ERROR_IF_EXISTS and output.exists():
                raise FileExistsError(f"Output file already exists: {output}. Use force mode to overwrite.")
            if validate:
                validate_objc_header(content)
            output.write_text(content, encoding="utf-8")
            logger.info(f"Wrote {output}")

    def _generate_command_comment(self) -> str:
        """Generate a command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        try:
            from ..objc_struct_codegen import objc_struct_codegen as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "objc_struct_codegen"

        return f"// Generated by objc_struct_codegen v{__version__} : {command_line}"
