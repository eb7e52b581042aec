"""
Type mapper: schema type annotation -> Objective-C++ accessor return type.
"""

from __future__ import annotations

from ..errors import UnmappableTypeError
from ..schema_ast.nodes import (
    ArrayTypeAnnotation,
    BooleanTypeAnnotation,
    DoubleTypeAnnotation,
    FloatTypeAnnotation,
    GenericObjectTypeAnnotation,
    Int32TypeAnnotation,
    NumberTypeAnnotation,
    ReservedTypeAnnotation,
    StringTypeAnnotation,
    TypeAliasTypeAnnotation,
    TypeAnnotation,
    unwrap_nullable,
)
from .naming import DEFAULT_NAMING, NamingContext

NUMERIC_TYPES = (NumberTypeAnnotation, FloatTypeAnnotation, Int32TypeAnnotation, DoubleTypeAnnotation)

# Reserved names and the C++ type they are declared as
RESERVED_TYPES = {"RootTag": "double"}


class ObjCTypeMapper:
    """Maps type annotations to declared accessor types."""

    def __init__(self, naming: NamingContext | None = None):
        self.naming = naming or DEFAULT_NAMING

    def map_type(self, module_name: str, nullable_annotation: TypeAnnotation, is_optional: bool = False) -> str:
        """
        Translate an annotation to the accessor's declared type.

        Args:
            module_name: Native module the struct belongs to
            nullable_annotation: The annotation, possibly nullable-wrapped
            is_optional: The property's own optional flag

        Returns:
            Objective-C++ type string

        Raises:
            UnmappableTypeError: If the variant or reserved name is unknown
        """
        annotation, nullable = unwrap_nullable(nullable_annotation)
        is_required = not nullable and not is_optional

        def wrap_optional(type_name: str) -> str:
            return type_name if is_required else self.naming.wrap_optional(type_name)

        if isinstance(annotation, ReservedTypeAnnotation):
            if annotation.name not in RESERVED_TYPES:
                raise UnmappableTypeError(annotation.name)
            return wrap_optional(RESERVED_TYPES[annotation.name])

        # Strings rely on NSString nullability, never on the optional wrapper
        if isinstance(annotation, StringTypeAnnotation):
            return "NSString *"

        if isinstance(annotation, NUMERIC_TYPES):
            return wrap_optional("double")

        if isinstance(annotation, BooleanTypeAnnotation):
            return wrap_optional("bool")

        if isinstance(annotation, GenericObjectTypeAnnotation):
            return self._opaque_object(is_required)

        if isinstance(annotation, ArrayTypeAnnotation):
            if annotation.element_type is None:
                return self._opaque_object(is_required)
            element_type = self.map_type(module_name, annotation.element_type)
            return wrap_optional(f"facebook::react::LazyVector<{element_type}>")

        if isinstance(annotation, TypeAliasTypeAnnotation):
            return wrap_optional(self.naming.struct_type_name(module_name, annotation.name))

        raise UnmappableTypeError(getattr(annotation, "type", "") or type(annotation).__name__)

    @staticmethod
    def _opaque_object(is_required: bool) -> str:
        return "id<NSObject> " if is_required else "id<NSObject> _Nullable"


def to_objc_type(
    module_name: str,
    nullable_annotation: TypeAnnotation,
    is_optional: bool = False,
    naming: NamingContext | None = None,
) -> str:
    """Convenience function mapping one annotation with the default naming."""
    return ObjCTypeMapper(naming).map_type(module_name, nullable_annotation, is_optional)
