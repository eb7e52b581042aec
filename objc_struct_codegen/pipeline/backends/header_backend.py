"""
Header backend.

Stitches per-struct fragments between the fixed header prefix and suffix.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..config import OptionalStyle
from ..schema_ast.nodes import StructSerializationOutput
from .base import TemplateBackend

# Headers each optional style needs on top of the fixed React imports
OPTIONAL_IMPORTS = {
    OptionalStyle.FOLLY: ["folly/Optional.h"],
    OptionalStyle.STD: ["optional"],
}


class ObjCHeaderBackend(TemplateBackend):
    """Assembles a complete Objective-C++ header."""

    TEMPLATES = ("prefix", "suffix")

    def required_imports(self) -> list[str]:
        return sorted(OPTIONAL_IMPORTS[self.naming.optional_style] + ["vector"])

    def generate(self, outputs: Sequence[StructSerializationOutput], generation_comment: str = "") -> str:
        """
        Render the header.

        Args:
            outputs: Serialized structs, in output order
            generation_comment: Comment line placed at the top, if any

        Returns:
            The header source
        """
        prefix = self.templates["prefix"].render(
            generation_comment=generation_comment,
            required_imports=self.required_imports(),
        )
        suffix = self.templates["suffix"].render()

        # Every declaration precedes every method
        sections = [output.declaration for output in outputs]
        sections += [output.methods for output in outputs if output.methods]

        if not sections:
            return prefix + suffix + "\n"
        return prefix + "\n" + "\n\n".join(sections) + "\n" + suffix + "\n"
