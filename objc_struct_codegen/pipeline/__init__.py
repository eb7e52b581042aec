"""
Pipeline - struct model to Objective-C++ header generator.

1. Phase 1 (Parser): Parse the JSON model into struct nodes
2. Phase 2 (Backends): Map each property's type and conversion expression
3. Phase 3 (Serializer): Render struct declarations and accessor methods
4. Phase 4 (Header): Assemble the header between the fixed prefix and suffix
5. Phase 5 (Writer): Optional atomic write with a structural check
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, OptionalStyle, OutputConfig, OutputMode
from .errors import (
    CodegenError,
    OutputValidationError,
    SchemaParseError,
    UnmappableTypeError,
    UnmappableValueError,
    UnsupportedStructError,
)
from .generator import PipelineGenerator
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "OptionalStyle",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "CodegenError",
    "UnmappableTypeError",
    "UnmappableValueError",
    "SchemaParseError",
    "UnsupportedStructError",
    "OutputValidationError",
]
