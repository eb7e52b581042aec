"""
Output writing for generated headers.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter, validate_objc_header

__all__ = [
    "AtomicWriter",
    "validate_objc_header",
]
