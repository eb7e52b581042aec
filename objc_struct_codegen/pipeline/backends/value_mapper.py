"""
Value mapper: schema type annotation -> conversion expression.

Mirrors ObjCTypeMapper's dispatch, but produces the expression turning a
raw `id` read from the NSDictionary into the accessor's declared type.
"""

from __future__ import annotations

from ..errors import UnmappableValueError
from ..schema_ast.nodes import (
    ArrayTypeAnnotation,
    BooleanTypeAnnotation,
    GenericObjectTypeAnnotation,
    ReservedTypeAnnotation,
    StringTypeAnnotation,
    TypeAliasTypeAnnotation,
    TypeAnnotation,
    unwrap_nullable,
)
from .naming import DEFAULT_NAMING, NamingContext
from .type_mapper import NUMERIC_TYPES, ObjCTypeMapper

# Reserved names and the bridging primitive kind that converts them
RESERVED_BRIDGES = {"RootTag": "Double"}


def item_value_name(depth: int) -> str:
    """Block parameter name for array elements at the given nesting depth."""
    return f"itemValue_{depth}"


class ObjCValueMapper:
    """Maps type annotations to conversion expressions."""

    def __init__(self, naming: NamingContext | None = None, type_mapper: ObjCTypeMapper | None = None):
        self.naming = naming or DEFAULT_NAMING
        self.type_mapper = type_mapper or ObjCTypeMapper(self.naming)

    def map_value(
        self,
        module_name: str,
        nullable_annotation: TypeAnnotation,
        value: str,
        depth: int,
        is_optional: bool = False,
    ) -> str:
        """
        Build the expression converting `value` to the declared type.

        Args:
            module_name: Native module the struct belongs to
            nullable_annotation: The annotation, possibly nullable-wrapped
            value: Expression holding the raw value
            depth: Array nesting level, used only to name block parameters
            is_optional: The property's own optional flag

        Returns:
            Objective-C++ expression string

        Raises:
            UnmappableValueError: If the variant or reserved name is unknown
        """
        annotation, nullable = unwrap_nullable(nullable_annotation)
        is_required = not nullable and not is_optional

        def bridging_to(kind: str, arg: str | None = None) -> str:
            args = ", ".join(a for a in (value, arg) if a)
            if is_required:
                return f"RCTBridgingTo{kind}({args})"
            return f"RCTBridgingToOptional{kind}({args})"

        if isinstance(annotation, ReservedTypeAnnotation):
            if annotation.name not in RESERVED_BRIDGES:
                raise UnmappableValueError(annotation.name)
            return bridging_to(RESERVED_BRIDGES[annotation.name])

        if isinstance(annotation, StringTypeAnnotation):
            return bridging_to("String")

        if isinstance(annotation, NUMERIC_TYPES):
            return bridging_to("Double")

        if isinstance(annotation, BooleanTypeAnnotation):
            return bridging_to("Bool")

        if isinstance(annotation, GenericObjectTypeAnnotation):
            return value

        if isinstance(annotation, ArrayTypeAnnotation):
            element_type = annotation.element_type
            if element_type is None:
                return value

            local_var_name = item_value_name(depth)
            element_objc_type = self.type_mapper.map_type(module_name, element_type)
            element_objc_value = self.map_value(module_name, element_type, local_var_name, depth + 1)
            return bridging_to(
                "Vec",
                f"^{element_objc_type}(id {local_var_name}) {{ return {element_objc_value}; }}",
            )

        if isinstance(annotation, TypeAliasTypeAnnotation):
            struct_name = self.naming.struct_type_name(module_name, annotation.name)
            if is_required:
                return f"{struct_name}({value})"
            return f"({value} == nil ? {self.naming.empty_optional} : {self.naming.make_optional(f'{struct_name}({value})')})"

        raise UnmappableValueError(getattr(annotation, "type", "") or type(annotation).__name__)


def to_objc_value(
    module_name: str,
    nullable_annotation: TypeAnnotation,
    value: str,
    depth: int,
    is_optional: bool = False,
    naming: NamingContext | None = None,
) -> str:
    """Convenience function mapping one annotation with the default naming."""
    return ObjCValueMapper(naming).map_value(module_name, nullable_annotation, value, depth, is_optional)
