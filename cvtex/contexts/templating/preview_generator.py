"""
Preview Generator

Converts a résumé record to structured preview data for direct visual rendering.

The preview follows the same section order and inclusion rules as the LaTeX
output. Text is passed through raw (no markup escaping), but bullet splitting
and URL normalization behave exactly as in the LaTeX target.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from cvtex.contexts.templating.config_resolver import load_layout_config
from cvtex.contexts.templating.latex_escaping import normalize_url
from cvtex.contexts.templating.resume_data_structure import (
    Education,
    Experience,
    Profile,
    Project,
    Resume,
    as_resume,
)
from cvtex.utils.text_processing import join_non_empty, split_lines


@dataclass
class ContactItem:
    """
    Single contact fragment in the header line.

    Attributes:
        kind: Field name ("location", "email", "phone", "linkedin", "github")
        text: Text as entered by the user
        url: Clickable target for links (empty for plain fields)
    """

    kind: str
    text: str
    url: str = ""


@dataclass
class PreviewHeader:
    """Name and contact line shown at the top of the page."""

    name: str
    contact: List[ContactItem] = field(default_factory=list)
    separator: str = " | "

    @property
    def contact_line(self) -> str:
        return join_non_empty([item.text for item in self.contact], self.separator)


@dataclass
class PreviewEntry:
    """
    One experience, project or education entry.

    Attributes:
        title: Main line (role, project name or institution)
        subtitle: Secondary line (company, project role or degree)
        dates: Date range or graduation date
        location: Free-text location
        stack: Project technology stack
        bullets: Bullet items (experience duties)
        lines: Flowing text lines, each ending in a soft line break (project description)
        link: Normalized clickable URL
        keywords: Keyword text, shown with keywords_label when present
        keywords_label: Localized label for the keyword list
    """

    title: str
    subtitle: str = ""
    dates: str = ""
    location: str = ""
    stack: str = ""
    bullets: List[str] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)
    link: str = ""
    keywords: str = ""
    keywords_label: str = ""


@dataclass
class PreviewSection:
    """
    Section of the preview.

    Attributes:
        kind: Section type ("summary", "experience", "projects", "education", "skills")
        heading: Localized heading
        entries: Entries for list sections
        lines: Text lines for summary
        items: Raw items for skills
        separator: Glyph placed between skills
    """

    kind: str
    heading: str
    entries: List[PreviewEntry] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)
    items: List[str] = field(default_factory=list)
    separator: str = ""

    @property
    def text(self) -> str:
        """Single-line text for skills, newline-joined text for summary."""
        if self.kind == "skills":
            return self.separator.join(self.items)
        return "\n".join(self.lines)


@dataclass
class PreviewDocument:
    """Ordered preview of a complete résumé."""

    header: PreviewHeader
    sections: List[PreviewSection] = field(default_factory=list)

    @property
    def section_kinds(self) -> List[str]:
        return [section.kind for section in self.sections]

    def get_section(self, kind: str) -> PreviewSection:
        """
        Get a section by kind.

        Raises:
            KeyError: If the section was omitted (its data is empty)
        """
        for section in self.sections:
            if section.kind == kind:
                return section
        raise KeyError(f"Section '{kind}' not present in preview")

    def to_markdown(self) -> str:
        """Flatten the preview to Markdown text."""
        # Imported here to avoid circular dependency
        from cvtex.contexts.templating.markdown_formatter import format_preview_markdown

        return format_preview_markdown(self)


def _flowing_lines(text: str) -> List[str]:
    """Split flowing text on soft line breaks, keeping interior blank lines."""
    text = text.strip("\n")
    return text.split("\n") if text else []


class ResumeToPreviewConverter:
    """Converts a Resume record to a PreviewDocument."""

    def __init__(self, layout: Dict[str, Any] = None):
        self.layout = layout or load_layout_config()
        self.headings = self.layout["headings"]
        self.labels = self.layout["labels"]
        self.separators = self.layout["separators"]

    def generate_header(self, profile: Profile) -> PreviewHeader:
        contact = [
            ContactItem(kind, value)
            for kind, value in (
                ("location", profile.location),
                ("email", profile.email),
                ("phone", profile.phone),
            )
            if value
        ]
        contact.extend(
            ContactItem(kind, value, normalize_url(value.strip()))
            for kind, value in (("linkedin", profile.linkedin), ("github", profile.github))
            if value.strip()
        )
        return PreviewHeader(
            name=profile.full_name,
            contact=contact,
            separator=self.separators["preview_contact"],
        )

    def convert_experience(self, experience: Experience) -> PreviewEntry:
        end = self.labels["present"] if experience.current else experience.end_date
        return PreviewEntry(
            title=experience.role,
            subtitle=experience.company,
            dates=f"{experience.start_date}{self.separators['date_range']}{end}",
            location=experience.location,
            bullets=split_lines(experience.duties),
        )

    def convert_project(self, project: Project) -> PreviewEntry:
        return PreviewEntry(
            title=project.name,
            subtitle=project.role,
            stack=project.stack,
            lines=_flowing_lines(project.description),
            link=normalize_url(project.link.strip()),
            keywords=project.keywords,
            keywords_label=self.labels["keywords"],
        )

    def convert_education(self, education: Education) -> PreviewEntry:
        return PreviewEntry(
            title=education.institution,
            subtitle=education.degree,
            dates=education.graduation_date,
            location=education.location,
        )

    def generate_document(self, resume: Resume) -> PreviewDocument:
        """
        Build the preview, omitting sections whose data is empty.

        Args:
            resume: Résumé record

        Returns:
            PreviewDocument with sections in fixed order
        """
        sections = []

        if resume.profile.summary.strip():
            sections.append(
                PreviewSection(
                    kind="summary",
                    heading=self.headings["summary"],
                    lines=_flowing_lines(resume.profile.summary),
                )
            )
        if resume.experience:
            sections.append(
                PreviewSection(
                    kind="experience",
                    heading=self.headings["experience"],
                    entries=[self.convert_experience(entry) for entry in resume.experience],
                )
            )
        if resume.projects:
            sections.append(
                PreviewSection(
                    kind="projects",
                    heading=self.headings["projects"],
                    entries=[self.convert_project(entry) for entry in resume.projects],
                )
            )
        if resume.education:
            sections.append(
                PreviewSection(
                    kind="education",
                    heading=self.headings["education"],
                    entries=[self.convert_education(entry) for entry in resume.education],
                )
            )
        if resume.skills:
            sections.append(
                PreviewSection(
                    kind="skills",
                    heading=self.headings["skills"],
                    items=list(resume.skills),
                    separator=self.separators["preview_skills"],
                )
            )

        return PreviewDocument(header=self.generate_header(resume.profile), sections=sections)


def render_preview(resume, layout: Dict[str, Any] = None) -> PreviewDocument:
    """
    Render a résumé to structured preview data.

    Args:
        resume: Resume instance or its JSON-shaped mapping
        layout: Optional layout dict (defaults to layout.yaml)

    Returns:
        PreviewDocument
    """
    return ResumeToPreviewConverter(layout=layout).generate_document(as_resume(resume))
