"""
Templating Context

Responsibilities:
- Manages the résumé record (immutable structured data model)
- Escapes free text for LaTeX and normalizes URLs
- Renders records to LaTeX source and to structured preview data
- Owns the LaTeX templates and layout/locale configuration

Owns: Résumé data model, escaping, LaTeX and preview rendering
Never: Reads or writes stored records, mutates its input
"""

from cvtex.contexts.templating.exceptions import InvalidResumeStructureError, TemplateRenderError
from cvtex.contexts.templating.latex_escaping import (
    escape_latex,
    format_bullets,
    normalize_url,
)
from cvtex.contexts.templating.latex_generator import render_latex, write_latex
from cvtex.contexts.templating.preview_generator import PreviewDocument, render_preview
from cvtex.contexts.templating.resume_data_structure import (
    Education,
    Experience,
    Profile,
    Project,
    Resume,
)

__all__ = [
    # Renderers
    "render_latex",
    "write_latex",
    "render_preview",
    "PreviewDocument",
    # Escaper/formatter
    "escape_latex",
    "format_bullets",
    "normalize_url",
    # Data structure classes
    "Resume",
    "Profile",
    "Experience",
    "Education",
    "Project",
    # Errors
    "InvalidResumeStructureError",
    "TemplateRenderError",
]
