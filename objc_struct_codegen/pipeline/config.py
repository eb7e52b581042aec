"""
Configuration for the struct generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


class OptionalStyle(str, Enum):
    """Which C++ optional type wraps non-required accessors."""

    FOLLY = "folly"  # folly::Optional<T>, folly::none, folly::make_optional
    STD = "std"  # std::optional<T>, std::nullopt, std::make_optional


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to check the header before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Structs to skip during generation
    ignore_structs: list[str] = field(default_factory=list)

    # Order in which to generate structs (empty = declaration order)
    order_structs: list[str] = field(default_factory=list)

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Optional wrapper used for non-required accessors
    optional_style: OptionalStyle = OptionalStyle.FOLLY

    # Serialize structs on a thread pool (output order is unchanged)
    parallel: bool = False

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif k == "optional_style":
                config.optional_style = OptionalStyle(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "ignore_structs": self.ignore_structs,
            "order_structs": self.order_structs,
            "add_generation_comment": self.add_generation_comment,
            "optional_style": self.optional_style.value,
            "parallel": self.parallel,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
