"""
Naming context shared by the Objective-C++ backends.

Bundles the naming helpers and the optional-type spelling so mappers
receive them explicitly instead of reaching for module globals.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ...utils import capitalize, get_namespaced_struct_name, get_safe_property_name
from ..config import OptionalStyle
from ..schema_ast.nodes import StructProperty

# (wrapper template, empty value, factory) per optional style
OPTIONAL_SPELLINGS: dict[OptionalStyle, tuple[str, str, str]] = {
    OptionalStyle.FOLLY: ("folly::Optional", "folly::none", "folly::make_optional"),
    OptionalStyle.STD: ("std::optional", "std::nullopt", "std::make_optional"),
}


@dataclass(frozen=True)
class NamingContext:
    """Naming helpers and optional spelling for one generation run."""

    capitalize: Callable[[str], str] = capitalize
    safe_property_name: Callable[[StructProperty], str] = get_safe_property_name
    namespaced_struct_name: Callable[[str, str], str] = get_namespaced_struct_name
    optional_style: OptionalStyle = OptionalStyle.FOLLY

    def struct_type_name(self, module_name: str, alias_name: str) -> str:
        """Namespaced C++ name of the struct an alias refers to."""
        return self.namespaced_struct_name(module_name, self.capitalize(alias_name))

    def wrap_optional(self, type_name: str) -> str:
        wrapper, _, _ = OPTIONAL_SPELLINGS[self.optional_style]
        return f"{wrapper}<{type_name}>"

    @property
    def empty_optional(self) -> str:
        return OPTIONAL_SPELLINGS[self.optional_style][1]

    def make_optional(self, expression: str) -> str:
        _, _, factory = OPTIONAL_SPELLINGS[self.optional_style]
        return f"{factory}({expression})"


DEFAULT_NAMING = NamingContext()
