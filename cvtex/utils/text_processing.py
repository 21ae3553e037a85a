"""
Text processing utilities shared by the LaTeX and preview renderers.
"""

import re
from typing import List

# Literal two-character sequence that older stored records use as a line break
LITERAL_NEWLINE = "\\n"


def normalize_newlines(text: str) -> str:
    """
    Convert every line-break representation to a single real newline character.

    Handles Windows line endings and the literal backslash-n sequence that shows up
    in records stored as double-encoded JSON. Literal backslash-n is only treated as
    a line break when the text has no real line break, so text that already uses
    real newlines keeps sequences such as "\\\\newcommand" intact.

    Example:
        >>> normalize_newlines("a\\\\nb")
        'a\\nb'
        >>> normalize_newlines("a\\r\\nb")
        'a\\nb'
    """
    if not text:
        return ""
    if "\n" in text or "\r" in text:
        return text.replace("\r\n", "\n").replace("\r", "\n")
    return text.replace(LITERAL_NEWLINE, "\n")


def split_lines(text: str) -> List[str]:
    """
    Split text on newlines and drop blank or whitespace-only lines.

    Args:
        text: Bullet text with one item per line

    Returns:
        Non-blank lines in their original order (not stripped)

    Example:
        >>> split_lines("A\\nB\\n\\n   \\nC")
        ['A', 'B', 'C']
        >>> split_lines("")
        []
    """
    if not text:
        return []
    return [line for line in text.split("\n") if line.strip()]


def join_non_empty(values: List[str], separator: str) -> str:
    """
    Join values with a separator, skipping empty strings.

    Example:
        >>> join_non_empty(["Madrid", "", "hola@ejemplo.com"], " | ")
        'Madrid | hola@ejemplo.com'
    """
    return separator.join(value for value in values if value)


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Collapse runs of blank lines (whitespace-only lines count as blank).

    Args:
        content: Rendered document text
        max_consecutive: Blank lines kept per run; 0 removes them all

    Example:
        >>> set_max_consecutive_blank_lines("a\\n\\n\\n\\nb")
        'a\\n\\nb'
    """
    # A run longer than the limit, or any run at all when the limit is 0
    minimum_run = "*" if max_consecutive == 0 else "+"
    pattern = rf"\n[ \t]*\n([ \t]*\n){minimum_run}"
    return re.sub(pattern, "\n" * (max_consecutive + 1), content)
