"""
Struct model module.

Contains the type annotation nodes and the parser for the JSON model.
"""

from __future__ import annotations

from .nodes import (
    ArrayTypeAnnotation,
    BooleanTypeAnnotation,
    DoubleTypeAnnotation,
    FloatTypeAnnotation,
    GenericObjectTypeAnnotation,
    Int32TypeAnnotation,
    ModuleSchema,
    NullableTypeAnnotation,
    NumberTypeAnnotation,
    RegularStruct,
    ReservedTypeAnnotation,
    StringTypeAnnotation,
    Struct,
    StructProperty,
    StructSerializationOutput,
    TypeAliasTypeAnnotation,
    TypeAnnotation,
    unwrap_nullable,
)
from .parser import SchemaParser

__all__ = [
    "TypeAnnotation",
    "ReservedTypeAnnotation",
    "StringTypeAnnotation",
    "NumberTypeAnnotation",
    "FloatTypeAnnotation",
    "Int32TypeAnnotation",
    "DoubleTypeAnnotation",
    "BooleanTypeAnnotation",
    "GenericObjectTypeAnnotation",
    "ArrayTypeAnnotation",
    "TypeAliasTypeAnnotation",
    "NullableTypeAnnotation",
    "unwrap_nullable",
    "StructProperty",
    "Struct",
    "RegularStruct",
    "StructSerializationOutput",
    "ModuleSchema",
    "SchemaParser",
]
