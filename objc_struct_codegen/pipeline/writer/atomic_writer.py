"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import OutputValidationError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(self, validate_header: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_header: Optional validation function for generated headers
        """
        self._validate_header = validate_header or validate_objc_header

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputValidationError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_header(content)

            temp_path.replace(path)
            logger.info(f"Wrote {path}")

        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    logger.warning(f"Could not remove temporary file {temp_path}")
            raise

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> bool:
        """Write content only if the file doesn't exist.

        Returns:
            True if file was written

        Raises:
            FileExistsError: If the file already exists
            OutputValidationError: If validation fails
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        self.write(path, content, validate)
        return True


def validate_objc_header(content: str) -> None:
    """Default structural check of a generated header.

    Raises:
        OutputValidationError: If validation fails
    """
    if "#import <Foundation/Foundation.h>" not in content:
        raise OutputValidationError("Generated header is missing the Foundation import")

    if "struct " in content and "namespace JS" not in content:
        raise OutputValidationError("Generated header declares structs outside namespace JS")

    open_braces = content.count("{")
    close_braces = content.count("}")
    if open_braces != close_braces:
        raise OutputValidationError(f"Generated header has unbalanced braces: {open_braces} open, {close_braces} close")
