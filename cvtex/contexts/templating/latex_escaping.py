"""
LaTeX Escaping and Formatting

Low-level text transforms applied to every free-text résumé field before it is
placed into a LaTeX document:

- escape_latex: neutralize characters with special meaning in LaTeX
- format_bullets: newline-separated text -> itemize environment
- format_newlines: flowing text with forced line breaks
- normalize_url / escape_url: scheme completion and \\href-safe URLs

Escaping is a one-shot boundary operation. It is applied exactly once per raw
field and never to already-rendered fragments (escape_latex is not idempotent).
"""

import re
from urllib.parse import quote

from cvtex.utils.text_processing import split_lines

# Replacement for each LaTeX special character. Applied in a single regex pass, so
# the braces emitted by \textbackslash{} are never escaped a second time.
LATEX_SPECIAL_CHARS = {
    "\\": r"\textbackslash{}",
    "{": r"\{",
    "}": r"\}",
    "$": r"\$",
    "&": r"\&",
    "#": r"\#",
    "^": r"\textasciicircum{}",
    "_": r"\_",
    "~": r"\textasciitilde{}",
    "%": r"\%",
}

LATEX_SPECIAL_PATTERN = re.compile("|".join(re.escape(char) for char in LATEX_SPECIAL_CHARS))

# Forced line break used for soft newlines in flowing text
LATEX_LINE_BREAK = "\\\\\n"

# Characters that stay literal when percent-encoding a URL for \href
URL_SAFE_CHARS = ":/?=&#%+,;@!*'()[].-"

# Characters hyperref needs backslash-escaped inside \href{...}
HREF_SPECIAL_CHARS = {
    "%": r"\%",
    "#": r"\#",
    "&": r"\&",
}


def escape_latex(text: str) -> str:
    """
    Escape LaTeX special characters so text renders literally.

    Total over all input: never fails, and returns an empty string for empty or
    None input.

    Args:
        text: Raw user text

    Returns:
        Text safe to embed verbatim in a LaTeX document body

    Example:
        >>> escape_latex("100% & $5 {x}")
        '100\\\\% \\\\& \\\\$5 \\\\{x\\\\}'
        >>> escape_latex("C:\\\\temp")
        'C:\\\\textbackslash{}temp'
    """
    if not text:
        return ""
    return LATEX_SPECIAL_PATTERN.sub(lambda match: LATEX_SPECIAL_CHARS[match.group(0)], text)


def format_bullets(text: str, indent: str = "  ") -> str:
    """
    Convert bullet text into an itemize environment.

    Splits on newlines, drops blank lines, escapes each remaining line and wraps
    the items. Nothing is emitted when no non-blank lines remain.

    Args:
        text: Raw bullet text, one item per line
        indent: Indentation for each \\item line

    Returns:
        LaTeX itemize environment, or "" when there are no items

    Example:
        >>> print(format_bullets("A\\nB\\n\\nC"))
        \\begin{itemize}
          \\item A
          \\item B
          \\item C
        \\end{itemize}
    """
    items = split_lines(text)
    if not items:
        return ""

    lines = [r"\begin{itemize}"]
    lines.extend(f"{indent}\\item {escape_latex(item)}" for item in items)
    lines.append(r"\end{itemize}")
    return "\n".join(lines)


def format_newlines(text: str) -> str:
    """
    Escape flowing text and turn each newline into a forced LaTeX line break.

    Leading and trailing newlines are dropped so no break opens or closes a paragraph.

    Example:
        >>> format_newlines("Line one\\nLine_two")
        'Line one\\\\\\\\\\nLine\\\\_two'
    """
    if not text:
        return ""
    return escape_latex(text.strip("\n")).replace("\n", LATEX_LINE_BREAK)


def normalize_url(link: str) -> str:
    """
    Make a user-entered link clickable.

    Empty input stays empty, links starting with "http" pass through unchanged,
    and everything else gets an https:// scheme.

    Example:
        >>> normalize_url("github.com/x")
        'https://github.com/x'
        >>> normalize_url("http://x.com")
        'http://x.com'
        >>> normalize_url("")
        ''
    """
    if not link:
        return ""
    return link if link.startswith("http") else f"https://{link}"


def escape_url(link: str) -> str:
    """
    Normalize a link and make it safe as the target argument of \\href.

    Characters that would break the brace group or change meaning in LaTeX
    (backslash, braces, ^, $, whitespace, _ and ~) are percent-encoded, which leaves
    the address unchanged. Existing percent escapes and the hyperref specials
    % # & are backslash-escaped.

    Example:
        >>> escape_url("github.com/me/my_repo#readme")
        'https://github.com/me/my\\\\%5Frepo\\\\#readme'
    """
    url = normalize_url(link.strip() if link else "")
    if not url:
        return ""

    encoded = quote(url, safe=URL_SAFE_CHARS).replace("_", "%5F").replace("~", "%7E")
    return "".join(HREF_SPECIAL_CHARS.get(char, char) for char in encoded)
