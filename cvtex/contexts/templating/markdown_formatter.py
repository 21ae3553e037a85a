"""
Markdown Utilities

Helper functions for formatting preview data as markdown.
"""

from typing import List

from cvtex.contexts.templating.preview_generator import (
    PreviewDocument,
    PreviewEntry,
    PreviewHeader,
    PreviewSection,
)

# Two trailing spaces force a line break in markdown
SOFT_BREAK = "  "


def format_header_markdown(header: PreviewHeader) -> str:
    """
    Format name and contact line.

    Links are rendered as markdown links to their normalized URL.
    """
    fragments = [f"[{item.text}]({item.url})" if item.url else item.text for item in header.contact]
    parts = [f"# {header.name}"]
    if fragments:
        parts.append("")
        parts.append(header.separator.join(fragments))
    return "\n".join(parts)


def format_entry_markdown(entry: PreviewEntry) -> str:
    """
    Format single experience, project or education entry.

    Title is formatted as ### (section header added separately by caller).
    """
    parts = [f"### {entry.title}\n"]

    details = [f"**{entry.subtitle}**" if entry.subtitle else "", f"*{entry.dates}*" if entry.dates else ""]
    details.extend([entry.location, f"`{entry.stack}`" if entry.stack else ""])
    details = [detail for detail in details if detail]
    if details:
        parts.append(" · ".join(details))
        parts.append("")

    if entry.link:
        parts.append(f"<{entry.link}>")
        parts.append("")

    for bullet in entry.bullets:
        parts.append(f"- {bullet}")

    if entry.lines:
        parts.append(f"{SOFT_BREAK}\n".join(entry.lines))

    if entry.keywords:
        parts.append("")
        parts.append(f"**{entry.keywords_label}** {entry.keywords}")

    return "\n".join(parts).rstrip()


def format_section_markdown(section: PreviewSection) -> str:
    """Format a preview section with its ## heading."""
    parts: List[str] = [f"## {section.heading}\n"]

    if section.entries:
        parts.append("\n\n".join(format_entry_markdown(entry) for entry in section.entries))
    elif section.kind == "summary":
        parts.append(f"{SOFT_BREAK}\n".join(section.lines))
    else:
        parts.append(section.text)

    return "\n".join(parts)


def format_preview_markdown(document: PreviewDocument) -> str:
    """
    Format a complete preview as markdown.

    Sections appear in the preview's order; omitted sections produce no heading.
    """
    parts = [format_header_markdown(document.header)]
    parts.extend(format_section_markdown(section) for section in document.sections)
    return "\n\n".join(parts) + "\n"
