"""
LaTeX Generator

Converts a structured résumé record to a complete LaTeX document source.

Sections are emitted in fixed order (header, summary, experience, projects,
education, skills). A section whose backing data is empty is omitted entirely,
heading included.
"""

import time
from pathlib import Path
from typing import Any, Dict, List

from jinja2 import TemplateError

from cvtex.contexts.templating.config_resolver import load_layout_config
from cvtex.contexts.templating.exceptions import TemplateRenderError
from cvtex.contexts.templating.latex_escaping import escape_latex, escape_url
from cvtex.contexts.templating.logger import _log_debug, _log_error, log_render_result
from cvtex.contexts.templating.registries import TemplateRegistry
from cvtex.contexts.templating.resume_data_structure import Profile, Resume, as_resume
from cvtex.utils.text_processing import set_max_consecutive_blank_lines


class ResumeToLaTeXConverter:
    """Converts a Resume record to LaTeX format."""

    def __init__(
        self,
        template_registry: TemplateRegistry = None,
        layout: Dict[str, Any] = None,
    ):
        self.template_registry = template_registry or TemplateRegistry()
        self.layout = layout or load_layout_config()

    def _render(self, type_name: str, **context) -> str:
        """Render a section template, wrapping Jinja2 failures with the template location."""
        try:
            template = self.template_registry.get_template(type_name)
            return template.render(**context).strip()
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render '{type_name}' section",
                type_name=type_name,
                template_path=self.template_registry.get_template_path(type_name),
                original_error=e,
            ) from e

    def _contact_items(self, profile: Profile) -> List[str]:
        """
        Build escaped contact fragments in fixed order.

        Location, email and phone are plain text; linkedin and github become
        clickable links showing the text the user typed.
        """
        items = [escape_latex(value) for value in (profile.location, profile.email, profile.phone)]
        for link in (profile.linkedin, profile.github):
            if link.strip():
                items.append(f"\\href{{{escape_url(link)}}}{{{escape_latex(link)}}}")
        return [item for item in items if item]

    def generate_header(self, profile: Profile) -> str:
        """
        Generate the centered name and contact line.

        Args:
            profile: Résumé profile

        Returns:
            LaTeX center environment with name and contact line
        """
        return self._render(
            "header",
            profile=profile,
            contact_items=self._contact_items(profile),
            separator=self.layout["separators"]["latex_contact"],
        )

    def generate_summary(self, profile: Profile) -> str:
        """Generate the italic summary block. Line breaks in the summary are preserved."""
        return self._render("summary", profile=profile)

    def convert_experience(self, resume: Resume) -> str:
        """
        Convert the experience entries to a LaTeX section.

        Each entry shows company, date range (ending in the "present" label for
        current positions, regardless of the stored end date), role, location and
        the duties as an itemize list.
        """
        return self._render(
            "experience",
            heading=self.layout["headings"]["experience"],
            present_label=self.layout["labels"]["present"],
            entries=resume.experience,
        )

    def convert_projects(self, resume: Resume) -> str:
        """Convert the project entries to a LaTeX section."""
        labels = self.layout["labels"]
        return self._render(
            "projects",
            heading=self.layout["headings"]["projects"],
            link_label=labels["link"],
            keywords_label=labels["keywords"],
            entries=resume.projects,
        )

    def convert_education(self, resume: Resume) -> str:
        """Convert the education entries to a LaTeX section."""
        return self._render(
            "education",
            heading=self.layout["headings"]["education"],
            entries=resume.education,
        )

    def convert_skills(self, resume: Resume) -> str:
        """Convert skills to a single comma-joined line."""
        return self._render(
            "skills",
            heading=self.layout["headings"]["skills"],
            skills=resume.skills,
            separator=self.layout["separators"]["latex_skills"],
        )

    def generate_sections(self, resume: Resume) -> List[str]:
        """
        Render every non-empty section in fixed order.

        Args:
            resume: Résumé record

        Returns:
            List of rendered section strings (header always first)
        """
        sections = [self.generate_header(resume.profile)]

        if resume.profile.summary.strip():
            sections.append(self.generate_summary(resume.profile))
        if resume.experience:
            sections.append(self.convert_experience(resume))
        if resume.projects:
            sections.append(self.convert_projects(resume))
        if resume.education:
            sections.append(self.convert_education(resume))
        if resume.skills:
            sections.append(self.convert_skills(resume))

        return sections

    def generate_document(self, resume: Resume) -> str:
        """
        Generate complete LaTeX document from a résumé record.

        Args:
            resume: Résumé record

        Returns:
            Complete LaTeX document string (preamble + body)
        """
        sections = self.generate_sections(resume)

        try:
            template = self.template_registry.get_document_template()
            generated_latex = template.render(document=self.layout["document"], sections=sections)
        except TemplateError as e:
            raise TemplateRenderError(
                "Failed to render document skeleton",
                type_name="document",
                template_path=self.template_registry.templates_path / "structure",
                original_error=e,
            ) from e

        # Templates leave blank runs where optional parts are skipped
        return set_max_consecutive_blank_lines(generated_latex, max_consecutive=1)


def render_latex(resume, layout: Dict[str, Any] = None) -> str:
    """
    Render a résumé to LaTeX source.

    Args:
        resume: Resume instance or its JSON-shaped mapping
        layout: Optional layout dict (defaults to layout.yaml)

    Returns:
        Complete LaTeX document source

    Raises:
        InvalidResumeStructureError: If a mapping is passed with the wrong shape
    """
    return ResumeToLaTeXConverter(layout=layout).generate_document(as_resume(resume))


def write_latex(resume, output_path: Path, layout: Dict[str, Any] = None) -> Path:
    """
    Render a résumé to LaTeX and write it to disk as UTF-8.

    Args:
        resume: Resume instance or its JSON-shaped mapping
        output_path: Destination .tex file (parent directories are created)
        layout: Optional layout dict

    Returns:
        Path to the written file
    """
    start = time.time()
    resume = as_resume(resume)
    _log_debug(f"Rendering LaTeX for {resume.name}")

    try:
        latex = render_latex(resume, layout=layout)
    except TemplateRenderError as e:
        _log_error(f"{resume.name}: latex render failed: {e.message}")
        raise

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(latex, encoding="utf-8")

    log_render_result(resume.name, "latex", output_path, time.time() - start)
    return output_path
