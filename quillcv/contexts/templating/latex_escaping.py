"""
LaTeX escaping for user-supplied resume text.

Every value that reaches the generated document passes through escape_latex(),
either directly or via the keyed-argument builder in key_value.py.
"""

import re
from typing import Any, Dict

from quillcv.utils.text_processing import single_line

# Typographic normalization, applied in the same pass as escaping
TYPOGRAPHY_MAP: Dict[str, str] = {
    "\u2013": "--",  # en dash
    "\u2014": "--",  # em dash
    "\u2026": r"\ldots{}",  # ellipsis
}

# Reserved characters. Backslash is listed first: its replacement introduces
# braces that must never be escaped again.
LATEX_SPECIAL_MAP: Dict[str, str] = {
    "\\": r"\textbackslash{}",
    "{": r"\{",
    "}": r"\}",
    "$": r"\$",
    "&": r"\&",
    "%": r"\%",
    "#": r"\#",
    "_": r"\_",
    "^": r"\textasciicircum{}",
    "~": r"\textasciitilde{}",
}

ESCAPE_MAP: Dict[str, str] = {**TYPOGRAPHY_MAP, **LATEX_SPECIAL_MAP}

# One alternation over every mapped character, so each input character is
# rewritten at most once
_ESCAPE_PATTERN = re.compile("|".join(re.escape(char) for char in ESCAPE_MAP))


def escape_latex(value: Any) -> str:
    r"""
    Convert arbitrary text into LaTeX-safe text.

    Collapses whitespace runs (newlines included) to single spaces and trims,
    turns en/em dashes into ``--`` and the ellipsis character into
    ``\ldots{}``, then escapes every LaTeX-reserved character to its
    literal-producing form. Numbers are stringified first.

    Args:
        value: Text (or number) to escape; None is allowed

    Returns:
        Escaped single-line string, or "" if the input was empty or whitespace

    Example:
        >>> escape_latex("R&D  budget: 40%")
        'R\\&D budget: 40\\%'
        >>> escape_latex("C:\\temp")
        'C:\\textbackslash{}temp'
        >>> escape_latex("   ")
        ''
    """
    text = single_line(value)
    if not text:
        return ""
    return _ESCAPE_PATTERN.sub(lambda match: ESCAPE_MAP[match.group(0)], text)
