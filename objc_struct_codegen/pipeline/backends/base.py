"""
Base class for template-driven backends.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from .naming import DEFAULT_NAMING, NamingContext


class TemplateBackend:
    """Loads the Jinja2 templates a backend renders."""

    # Template directory name
    TEMPLATE_LANG: str = "objc"

    # File extension
    FILE_EXTENSION: str = "h"

    # Template stems loaded by _setup_templates, e.g. "struct" -> struct.h.jinja2
    TEMPLATES: tuple[str, ...] = ()

    def __init__(self, naming: NamingContext | None = None):
        """
        Initialize the backend.

        Args:
            naming: Naming helpers and optional spelling
        """
        self.naming = naming or DEFAULT_NAMING
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.templates = {stem: self.jinja_env.get_template(f"{stem}.{self.FILE_EXTENSION}.jinja2") for stem in self.TEMPLATES}
