"""
Struct serializer.

Renders one struct's declaration block and its inline accessor
implementations from the type and value mappers' output.
"""

from __future__ import annotations

from ...utils import escape_objc_string
from ..errors import UnsupportedStructError
from ..schema_ast.nodes import RegularStruct, Struct, StructProperty, StructSerializationOutput
from .base import TemplateBackend
from .naming import NamingContext
from .type_mapper import ObjCTypeMapper
from .value_mapper import ObjCValueMapper

# Name of the raw value read from the NSDictionary in every accessor body
RAW_VALUE = "p"


class RegularStructSerializer(TemplateBackend):
    """Serializes regular structs to Objective-C++."""

    TEMPLATES = ("struct", "method")

    def __init__(self, naming: NamingContext | None = None):
        super().__init__(naming)
        self.type_mapper = ObjCTypeMapper(self.naming)
        self.value_mapper = ObjCValueMapper(self.naming, self.type_mapper)

    def serialize(self, module_name: str, struct: RegularStruct) -> StructSerializationOutput:
        """
        Generate the declaration and accessor methods of a struct.

        Args:
            module_name: Native module the struct belongs to
            struct: The struct model

        Returns:
            StructSerializationOutput with the declaration block and the
            concatenated accessor implementations
        """
        struct_name = self.naming.capitalize(struct.name)
        namespaced_name = self.naming.struct_type_name(module_name, struct.name)

        declarations = []
        methods = []
        for prop in struct.properties:
            prop_name, return_type, return_value = self._map_property(module_name, prop)
            return_type += self._padding(return_type)

            declarations.append(f"{return_type}{prop_name}() const;")
            methods.append(
                self.templates["method"].render(
                    return_type=return_type,
                    return_value=return_value,
                    namespaced_name=namespaced_name,
                    property_name=prop_name,
                    property_key=escape_objc_string(prop.name),
                )
            )

        declaration = self.templates["struct"].render(
            module_name=module_name,
            struct_name=struct_name,
            struct_properties="\n      ".join(declarations),
        )
        return StructSerializationOutput(declaration=declaration, methods="\n".join(methods))

    def _map_property(self, module_name: str, prop: StructProperty) -> tuple[str, str, str]:
        """Accessor name, declared type and conversion expression of a property."""
        prop_name = self.naming.safe_property_name(prop)
        return_type = self.type_mapper.map_type(module_name, prop.type_annotation, prop.optional)
        return_value = self.value_mapper.map_value(module_name, prop.type_annotation, RAW_VALUE, 0, prop.optional)
        return prop_name, return_type, return_value

    @staticmethod
    def _padding(return_type: str) -> str:
        # Pointer types bind the "*" to the accessor name
        return "" if return_type.endswith("*") else " "


def serialize_struct(
    module_name: str,
    struct: Struct,
    serializer: RegularStructSerializer | None = None,
) -> StructSerializationOutput:
    """Serialize a struct, dispatching on its kind.

    Raises:
        UnsupportedStructError: For any struct kind other than RegularStruct
    """
    if isinstance(struct, RegularStruct):
        return (serializer or RegularStructSerializer()).serialize(module_name, struct)
    raise UnsupportedStructError(f"Unsupported struct kind {type(struct).__name__} for struct '{struct.name}'")


def serialize_regular_struct(
    module_name: str,
    struct: RegularStruct,
    naming: NamingContext | None = None,
) -> StructSerializationOutput:
    """Convenience function serializing one struct with a fresh serializer."""
    return RegularStructSerializer(naming).serialize(module_name, struct)
