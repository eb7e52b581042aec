"""Struct model to Objective-C++ Generator

A Python package for generating Objective-C++ struct accessors that read
typed values out of an NSDictionary, from a native module's struct model.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CodegenError,
    CodeGeneratorConfig,
    OptionalStyle,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    UnmappableTypeError,
    UnmappableValueError,
)

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
]
