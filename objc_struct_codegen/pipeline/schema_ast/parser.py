"""
Struct model parser.

Turns the codegen JSON model of a native module into immutable nodes.
Reserved names are kept as-is: deciding whether they can be mapped is
left to the backends.
"""

from __future__ import annotations

from typing import Any

from ...utils import get_safe_property_name
from ..errors import SchemaParseError
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
    StructProperty,
    TypeAliasTypeAnnotation,
    TypeAnnotation,
)


class SchemaParser:
    """Parses a module's struct model into nodes."""

    # Variants without payload, by JSON tag
    LEAF_TYPES: dict[str, type[TypeAnnotation]] = {
        cls.type: cls
        for cls in (
            StringTypeAnnotation,
            NumberTypeAnnotation,
            FloatTypeAnnotation,
            Int32TypeAnnotation,
            DoubleTypeAnnotation,
            BooleanTypeAnnotation,
            GenericObjectTypeAnnotation,
        )
    }

    # Older schemas tag reserved types this way
    RESERVED_TAGS = {"ReservedTypeAnnotation", "ReservedFunctionValueTypeAnnotation"}

    def parse(self, model: dict[str, Any], module_name: str | None = None) -> ModuleSchema:
        """
        Parse a module model.

        Args:
            model: The JSON model, with "moduleName" and "structs"
            module_name: Overrides the model's "moduleName" when given

        Returns:
            ModuleSchema with structs in declaration order
        """
        if not isinstance(model, dict):
            raise SchemaParseError("Model must be a JSON object", "#")

        name = module_name or model.get("moduleName")
        if not name:
            raise SchemaParseError("Missing module name", "#/moduleName")

        structs = model.get("structs", [])
        if not isinstance(structs, list):
            raise SchemaParseError("'structs' must be a list", "#/structs")

        return ModuleSchema(
            module_name=name,
            structs=tuple(self.parse_struct(s, f"#/structs/{i}") for i, s in enumerate(structs)),
        )

    def parse_struct(self, struct: dict[str, Any], path: str = "#") -> RegularStruct:
        """Parse one struct definition."""
        if not isinstance(struct, dict):
            raise SchemaParseError("Struct must be a JSON object", path)
        if not struct.get("name"):
            raise SchemaParseError("Struct is missing 'name'", path)

        properties = struct.get("properties", [])
        if not isinstance(properties, list):
            raise SchemaParseError("'properties' must be a list", f"{path}/properties")

        parsed = tuple(self._parse_property(p, f"{path}/properties/{i}") for i, p in enumerate(properties))

        accessors: dict[str, str] = {}
        for i, prop in enumerate(parsed):
            accessor = get_safe_property_name(prop)
            if accessor in accessors:
                raise SchemaParseError(
                    f"Properties '{accessors[accessor]}' and '{prop.name}' both map to accessor '{accessor}'",
                    f"{path}/properties/{i}",
                )
            accessors[accessor] = prop.name

        return RegularStruct(name=struct["name"], properties=parsed)

    def _parse_property(self, prop: dict[str, Any], path: str) -> StructProperty:
        if not isinstance(prop, dict):
            raise SchemaParseError("Property must be a JSON object", path)
        if not prop.get("name"):
            raise SchemaParseError("Property is missing 'name'", path)
        if "typeAnnotation" not in prop:
            raise SchemaParseError("Property is missing 'typeAnnotation'", path)

        optional = prop.get("optional", False)
        if not isinstance(optional, bool):
            raise SchemaParseError("'optional' must be a boolean", f"{path}/optional")

        return StructProperty(
            name=prop["name"],
            type_annotation=self.parse_type_annotation(prop["typeAnnotation"], f"{path}/typeAnnotation"),
            optional=optional,
        )

    def parse_type_annotation(self, node: dict[str, Any], path: str = "#") -> TypeAnnotation:
        """
        Parse a type annotation recursively.

        Args:
            node: The annotation dictionary, tagged by its "type" key
            path: Current path in the model (for error messages)

        Returns:
            The matching TypeAnnotation variant
        """
        if not isinstance(node, dict) or "type" not in node:
            raise SchemaParseError("Type annotation must be an object with a 'type'", path)

        tag = node["type"]

        if tag in self.LEAF_TYPES:
            return self.LEAF_TYPES[tag]()

        if tag in self.RESERVED_TAGS:
            return ReservedTypeAnnotation(name=node.get("name", ""))

        if tag == NullableTypeAnnotation.type:
            inner = node.get("typeAnnotation")
            if inner is None:
                raise SchemaParseError("Nullable annotation is missing 'typeAnnotation'", path)
            return NullableTypeAnnotation(type_annotation=self.parse_type_annotation(inner, f"{path}/typeAnnotation"))

        if tag == ArrayTypeAnnotation.type:
            element_type = node.get("elementType")
            if element_type is None:
                return ArrayTypeAnnotation()
            return ArrayTypeAnnotation(element_type=self.parse_type_annotation(element_type, f"{path}/elementType"))

        if tag == TypeAliasTypeAnnotation.type:
            if not node.get("name"):
                raise SchemaParseError("Type alias is missing 'name'", path)
            return TypeAliasTypeAnnotation(name=node["name"])

        raise SchemaParseError(f"Unknown type annotation: {tag}", path)
