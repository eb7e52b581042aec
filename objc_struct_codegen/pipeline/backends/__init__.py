"""
Objective-C++ code generation backends.

Contains the type and value mappers, the struct serializer and the
header assembly.
"""

from __future__ import annotations

from .base import TemplateBackend
from .header_backend import ObjCHeaderBackend
from .naming import DEFAULT_NAMING, NamingContext
from .struct_serializer import RegularStructSerializer, serialize_regular_struct, serialize_struct
from .type_mapper import ObjCTypeMapper, to_objc_type
from .value_mapper import ObjCValueMapper, to_objc_value

__all__ = [
    "TemplateBackend",
    "NamingContext",
    "DEFAULT_NAMING",
    "ObjCTypeMapper",
    "ObjCValueMapper",
    "RegularStructSerializer",
    "ObjCHeaderBackend",
    "to_objc_type",
    "to_objc_value",
    "serialize_struct",
    "serialize_regular_struct",
]
