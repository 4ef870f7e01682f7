"""
Keyed macro argument construction.

The keycommand/xkeyval macros used by the templates abort compilation
("Invalid boolean expression") when a key is given an empty value, e.g.
``coursework={}``. Everything in this module exists so that such a pair can
never be produced: a value that is empty after escaping yields no entry at all,
and a macro with no entries yields no invocation at all.
"""

from typing import Any, Iterable, List, Optional, Tuple

from quillcv.contexts.templating.latex_escaping import escape_latex


def kv(key: str, value: Any) -> Optional[str]:
    """
    Build a single ``key={escaped value}`` entry.

    Args:
        key: Macro key name
        value: Raw value; escaped here

    Returns:
        The entry, or None when the escaped value is empty

    Example:
        >>> kv("company", "Acme & Co")
        'company={Acme \\\\& Co}'
        >>> kv("location", "  ") is None
        True
    """
    escaped = escape_latex(value)
    if not escaped:
        return None
    return f"{key}={{{escaped}}}"


def kvs(items: Iterable[Optional[str]]) -> str:
    """
    Join entries produced by kv(), dropping the ``None`` ones.

    Returns:
        Comma-joined argument list, or "" if no entry qualifies
    """
    return ", ".join(item for item in items if isinstance(item, str) and item)


def macro_call(name: str, args: str) -> Optional[str]:
    r"""
    Wrap an argument list into ``\name[args]``.

    Returns:
        The invocation, or None when ``args`` is empty (the macro is omitted)
    """
    if not args:
        return None
    return rf"\{name}[{args}]"


class KeyValueArgs:
    """
    Ordered builder for a keyed macro argument list.

    Candidates are added in display order; build() keeps only those whose
    escaped value is non-empty.

    Example:
        >>> args = KeyValueArgs().add("title", "Compiler").add("duration", None)
        >>> args.build()
        'title={Compiler}'
        >>> bool(KeyValueArgs().add("title", ""))
        False
    """

    def __init__(self, pairs: Iterable[Tuple[str, Any]] = ()):
        self._pairs: List[Tuple[str, Any]] = []
        for key, value in pairs:
            self.add(key, value)

    def add(self, key: str, value: Any) -> "KeyValueArgs":
        self._pairs.append((key, value))
        return self

    def entries(self) -> List[str]:
        return [entry for entry in (kv(key, value) for key, value in self._pairs) if entry]

    def build(self) -> str:
        return kvs(self.entries())

    def to_macro(self, name: str) -> Optional[str]:
        return macro_call(name, self.build())

    def __bool__(self) -> bool:
        return bool(self.entries())
