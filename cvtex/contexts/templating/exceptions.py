"""Errors raised while loading or rendering résumé records."""

from pathlib import Path
from typing import Optional


class InvalidResumeStructureError(ValueError):
    """
    A résumé record is missing required substructure or has mistyped fields.

    Raised for records without a 'profile', entries that are not mappings, or list
    fields that are not lists. Absent optional collections are never an error;
    the loader defaults them to empty.
    """


class TemplateRenderError(Exception):
    """
    A section template or the document skeleton failed to render.

    Attributes:
        message: Short description
        type_name: Section being rendered ('experience', 'document', ...)
        template_path: Template file involved
        original_error: Underlying Jinja2 error
    """

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.type_name = type_name
        self.template_path = template_path
        self.original_error = original_error

        details = []
        if type_name:
            details.append(f"section={type_name}")
        if template_path:
            details.append(f"template={template_path}")
        if original_error:
            details.append(f"cause={type(original_error).__name__}: {original_error}")

        super().__init__(f"{message} ({', '.join(details)})" if details else message)
