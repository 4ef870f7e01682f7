"""
Text processing utilities shared by the section renderers.

None of these helpers escape LaTeX; they only normalize plain text.
"""

import re
from typing import Any, Iterable, Optional

_WHITESPACE_RUN = re.compile(r"\s+")
_URL_SCHEME = re.compile(r"^https?://", re.IGNORECASE)


def non_empty(value: Any) -> bool:
    """
    Check whether a value carries any visible text.

    Example:
        >>> non_empty("  ")
        False
        >>> non_empty(3.8)
        True
    """
    if value is None:
        return False
    return len(str(value).strip()) > 0


def single_line(value: Any) -> str:
    """
    Collapse all whitespace runs (including newlines) to single spaces and trim.

    Example:
        >>> single_line("Led  a\\n team ")
        'Led a team'
    """
    if value is None:
        return ""
    return _WHITESPACE_RUN.sub(" ", str(value)).strip()


def trim_join(parts: Iterable[Any], separator: str) -> str:
    """
    Trim every part, drop the empty ones, and join the rest.

    Example:
        >>> trim_join([" Ada ", None, "Lovelace"], " ")
        'Ada Lovelace'
    """
    cleaned = [str(part).strip() for part in parts if part is not None]
    return separator.join(part for part in cleaned if part)


def strip_scheme(url: Optional[str]) -> str:
    """
    Remove a leading http:// or https:// from a URL.

    Example:
        >>> strip_scheme("https://github.com/ada")
        'github.com/ada'
    """
    if not non_empty(url):
        return ""
    return _URL_SCHEME.sub("", str(url).strip())


def capitalize_first(text: str) -> str:
    """Uppercase the first character only (``"technical"`` -> ``"Technical"``)."""
    return text[:1].upper() + text[1:]


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Normalize consecutive blank lines to a maximum number.

    Args:
        content: The text content to normalize
        max_consecutive: Maximum number of consecutive blank lines to allow.
                        Use 0 to remove all blank lines (default: 1)

    Returns:
        Content with normalized blank lines

    Example:
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=1)
        'text\\n\\nmore'
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=0)
        'text\\nmore'
    """
    if max_consecutive == 0:
        pattern = r"\n\s*\n(\s*\n)*"
    else:
        pattern = r"\n\s*\n(\s*\n)+"

    replacement = "\n" * (max_consecutive + 1)

    return re.sub(pattern, replacement, content)
