"""
Node definitions for the struct model.

These nodes mirror the codegen schema's type grammar: a closed set of
type annotations, an optional nullable wrapper, and the regular structs
whose properties carry them. Every node is immutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class TypeAnnotation:
    """Base class for all type annotation variants."""

    # Tag of the variant in the JSON model
    type: ClassVar[str] = ""


@dataclass(frozen=True)
class ReservedTypeAnnotation(TypeAnnotation):
    """A platform marker type. Only "RootTag" is known."""

    type: ClassVar[str] = "ReservedTypeAnnotation"

    name: str = ""


@dataclass(frozen=True)
class StringTypeAnnotation(TypeAnnotation):
    type: ClassVar[str] = "StringTypeAnnotation"


@dataclass(frozen=True)
class NumberTypeAnnotation(TypeAnnotation):
    type: ClassVar[str] = "NumberTypeAnnotation"


@dataclass(frozen=True)
class FloatTypeAnnotation(TypeAnnotation):
    type: ClassVar[str] = "FloatTypeAnnotation"


@dataclass(frozen=True)
class Int32TypeAnnotation(TypeAnnotation):
    type: ClassVar[str] = "Int32TypeAnnotation"


@dataclass(frozen=True)
class DoubleTypeAnnotation(TypeAnnotation):
    type: ClassVar[str] = "DoubleTypeAnnotation"


@dataclass(frozen=True)
class BooleanTypeAnnotation(TypeAnnotation):
    type: ClassVar[str] = "BooleanTypeAnnotation"


@dataclass(frozen=True)
class GenericObjectTypeAnnotation(TypeAnnotation):
    """An opaque object, passed through without conversion."""

    type: ClassVar[str] = "GenericObjectTypeAnnotation"


@dataclass(frozen=True)
class ArrayTypeAnnotation(TypeAnnotation):
    """A homogeneous sequence.

    element_type is None for an untyped array, which is passed through
    like a generic object.
    """

    type: ClassVar[str] = "ArrayTypeAnnotation"

    element_type: TypeAnnotation | None = None


@dataclass(frozen=True)
class TypeAliasTypeAnnotation(TypeAnnotation):
    """Reference to another struct by name."""

    type: ClassVar[str] = "TypeAliasTypeAnnotation"

    name: str = ""


@dataclass(frozen=True)
class NullableTypeAnnotation(TypeAnnotation):
    """Wrapper marking the inner annotation as nullable."""

    type: ClassVar[str] = "NullableTypeAnnotation"

    type_annotation: TypeAnnotation | None = None


def unwrap_nullable(annotation: TypeAnnotation) -> tuple[TypeAnnotation, bool]:
    """Return the inner annotation and whether it was wrapped as nullable."""
    if isinstance(annotation, NullableTypeAnnotation):
        return annotation.type_annotation, True
    return annotation, False


@dataclass(frozen=True)
class StructProperty:
    """A named property of a struct."""

    name: str = ""
    type_annotation: TypeAnnotation | None = None
    optional: bool = False


@dataclass(frozen=True)
class Struct:
    """Base class for struct kinds."""

    name: str = ""
    properties: tuple[StructProperty, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RegularStruct(Struct):
    """A struct read from an NSDictionary through typed accessors."""

    pass


@dataclass(frozen=True)
class StructSerializationOutput:
    """Generated Objective-C++ for one struct."""

    declaration: str = ""
    methods: str = ""


@dataclass(frozen=True)
class ModuleSchema:
    """All structs of one native module, in declaration order."""

    module_name: str = ""
    structs: tuple[Struct, ...] = field(default_factory=tuple)
