"""
Naming helpers for the Objective-C++ struct generator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pipeline.schema_ast.nodes import StructProperty

# Property names that would clash with Objective-C / C++ identifiers
# when used as accessor names
OBJC_RESERVED_NAMES = {
    "id",
    "bool",
    "char",
    "class",
    "const",
    "default",
    "delete",
    "double",
    "float",
    "int",
    "long",
    "namespace",
    "new",
    "nil",
    "operator",
    "private",
    "public",
    "short",
    "struct",
    "template",
    "this",
    "union",
    "void",
}


def capitalize(text: str) -> str:
    """Uppercase the first character, leaving the rest untouched.

    Examples:
        "point" -> "Point"
        "spec_item" -> "Spec_item"
        "" -> ""
    """
    if not text:
        return ""
    return text[0].upper() + text[1:]


def get_safe_property_name(prop: StructProperty) -> str:
    """Accessor name for a property, suffixed with "_" when it is a reserved word."""
    if prop.name in OBJC_RESERVED_NAMES:
        return f"{prop.name}_"
    return prop.name


def get_namespaced_struct_name(module_name: str, struct_name: str) -> str:
    """Fully-qualified C++ name of a generated struct."""
    return f"JS::{module_name}::{struct_name}"


def escape_objc_string(text: str) -> str:
    """Escape text for use inside an Objective-C @"..." literal."""
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
