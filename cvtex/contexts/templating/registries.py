"""
Templating Registries

Loads and caches the Jinja2 templates behind the LaTeX renderer.

Layout under the templates root:
    structure/document.tex.jinja        preamble and body wrapper
    types/{section}/template.tex.jinja  one template per résumé section

Templates use delimiters that never occur in LaTeX source:
    <<< expression >>>    <%% statement %%>    <# comment #>
"""

import os
from pathlib import Path
from typing import Dict, List

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

from cvtex.contexts.templating.latex_escaping import (
    escape_latex,
    escape_url,
    format_bullets,
    format_newlines,
)

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("CVTEX_TEMPLATES_PATH", Path(__file__).parent / "template")
)

DOCUMENT_TEMPLATE = "structure/document.tex.jinja"
SECTION_TEMPLATE = "types/{type_name}/template.tex.jinja"

# Filters available to every template. User text only reaches the output through these.
LATEX_FILTERS = {
    "latex": escape_latex,
    "bullets": format_bullets,
    "newlines": format_newlines,
    "href": escape_url,
}


def build_environment(templates_path: Path) -> Environment:
    """
    Create the Jinja2 environment used for all LaTeX templates.

    Undefined variables raise instead of rendering as empty strings, whitespace
    is left exactly as written, and output is never HTML-escaped.
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_path)),
        undefined=StrictUndefined,
        variable_start_string="<<<",
        variable_end_string=">>>",
        block_start_string="<%%",
        block_end_string="%%>",
        comment_start_string="<#",
        comment_end_string="#>",
        trim_blocks=False,
        lstrip_blocks=False,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.filters.update(LATEX_FILTERS)
    return env


class TemplateRegistry:
    """
    Cache of section templates keyed by section type.

    Attributes:
        templates_path: Templates root (defaults to CVTEX_TEMPLATES_PATH)
        types_base_path: Directory holding one subdirectory per section type
        env: Configured Jinja2 environment
    """

    def __init__(self, templates_path: Path = None):
        self.templates_path = Path(templates_path or TEMPLATES_PATH)
        self.types_base_path = self.templates_path / "types"
        self.env = build_environment(self.templates_path)
        self._cache: Dict[str, Template] = {}

    def available_types(self) -> List[str]:
        """Section types that have a template on disk, sorted by name."""
        return sorted(
            path.parent.name for path in self.types_base_path.glob("*/template.tex.jinja")
        )

    def get_template(self, type_name: str) -> Template:
        """
        Get the template for a section type, loading it on first use.

        Args:
            type_name: Section type (e.g., 'experience')

        Returns:
            Compiled Jinja2 Template

        Raises:
            TemplateNotFound: If the section has no template file
            TemplateSyntaxError: If the template does not compile
        """
        template = self._cache.get(type_name)
        if template is not None:
            return template

        try:
            template = self.env.get_template(SECTION_TEMPLATE.format(type_name=type_name))
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"No template for section '{type_name}' at {self.get_template_path(type_name)}. "
                f"Available: {self.available_types()}"
            ) from e

        self._cache[type_name] = template
        return template

    def get_document_template(self) -> Template:
        return self.env.get_template(DOCUMENT_TEMPLATE)

    def get_template_path(self, type_name: str) -> Path:
        return self.templates_path / SECTION_TEMPLATE.format(type_name=type_name)

    def clear_cache(self):
        self._cache.clear()

    def is_cached(self, type_name: str) -> bool:
        return type_name in self._cache
