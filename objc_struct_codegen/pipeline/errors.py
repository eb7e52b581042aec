"""
Errors raised while generating struct bindings.

All of them are fatal for the whole run: a caller cannot safely emit
partial bindings.
"""

from __future__ import annotations


class CodegenError(Exception):
    """Base class for all generation errors."""

    pass


class UnmappableTypeError(CodegenError):
    """Raised when a type annotation has no Objective-C++ declared type.

    The message carries the offending variant tag (or reserved name).
    """

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Couldn't convert into ObjC type: {tag}")


class UnmappableValueError(CodegenError):
    """Raised when a type annotation has no conversion expression.

    Kept apart from UnmappableTypeError since the two mappers can
    diverge in coverage.
    """

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Couldn't convert into ObjC value: {tag}")


class SchemaParseError(CodegenError):
    """Raised when a struct model document cannot be parsed.

    This can happen when:
    - A required key (name, properties, typeAnnotation) is missing
    - A type annotation carries an unknown "type" tag
    - A node has the wrong JSON shape
    - Two properties of a struct map to the same accessor name
    """

    def __init__(self, message: str, path: str = ""):
        self.path = path
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)


class UnsupportedStructError(CodegenError):
    """Raised when a struct kind other than a regular struct is serialized."""

    pass


class OutputValidationError(CodegenError):
    """Raised when a generated header fails the structural sanity check."""

    pass
