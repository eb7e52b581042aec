"""
CLI utilities for rebuilding the invocation shown in generated headers.
"""

from pathlib import Path

import click

PROGRAM_NAME = "objc_struct_codegen"


def _display_value(value) -> str:
    """File paths are shown by name only so headers don't leak local directories."""
    if isinstance(value, Path) or (isinstance(value, str) and ("/" in value or "\\" in value)):
        return Path(str(value)).name
    if hasattr(value, "value"):
        # Enum choices
        return str(value.value)
    return str(value)


def reconstruct_command_line(click_command: click.Command, program_name: str = PROGRAM_NAME) -> str:
    """
    Reconstruct the command line from the current Click context.

    Args:
        click_command: Click command object for introspection
        program_name: Name to start the command line with

    Returns:
        Reconstructed command line string, or just the program name when
        no Click context is active
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        return program_name

    arguments = []
    options = []

    for param in click_command.params:
        value = cli_args.get(param.name)
        if value is None or value is False or value == ():
            continue

        if isinstance(param, click.Argument):
            arguments.append(_display_value(value))
        elif isinstance(param, click.Option):
            if value == param.default:
                continue
            flag = param.opts[0] if param.opts else f"--{param.name}"
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, _display_value(value)])

    return " ".join([program_name, *arguments, *options])
